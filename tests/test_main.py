import logging

from autoerase import main as main_module
from autoerase import version
from autoerase.models import AccountsPage, Policy

from .conftest import FakeAdminAdapter, make_account


def _adapter():
    return FakeAdminAdapter(
        pages=[
            AccountsPage(
                users=[
                    make_account("@alice:example.org", days_old=40),
                    make_account("@whatsapp_123:example.org", days_old=400),
                    make_account("@new:example.org", days_old=1),
                ]
            )
        ]
    )


def test_run_erases_eligible_accounts():
    adapter = _adapter()

    main_module.run(adapter, Policy.build(retention_days=30))

    assert [t for op, t in adapter.calls if op == "deactivate"] == ["@alice:example.org"]


def test_run_dry_run_does_not_erase():
    adapter = _adapter()

    main_module.run(adapter, Policy.build(retention_days=30, dry_run=True))

    operations = {op for op, _ in adapter.calls}
    assert operations == {"list_accounts", "media_count"}


def test_run_with_nothing_eligible(caplog):
    adapter = FakeAdminAdapter(pages=[AccountsPage(users=[make_account("@x:e", days_old=1)])])

    with caplog.at_level(logging.INFO):
        main_module.run(adapter, Policy.build(retention_days=30))

    assert "no eligible accounts found" in caplog.text
    assert [op for op, _ in adapter.calls] == ["list_accounts"]


def test_main_exits_on_invalid_configuration(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for key in ("HOST", "TOKEN", "TTL"):
        monkeypatch.delenv(f"SUAE_{key}", raising=False)

    assert main_module.main([]) == main_module.EXIT_CONFIG_ERROR


def test_version_matches_project():
    assert version.get_version() == "1.0.0"
