import pytest

from autoerase.core.config import get_settings
from autoerase.core.exceptions import ConfigurationError
from autoerase.models import DEFAULT_EXCLUDED_PREFIXES, Policy


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for key in ("HOST", "TOKEN", "TTL", "DRYRUN", "REDACT", "PREFIXES", "LOG_LEVEL"):
        monkeypatch.delenv(f"SUAE_{key}", raising=False)
    # keep a developer's .env out of the tests
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def valid_env(monkeypatch):
    monkeypatch.setenv("SUAE_HOST", "https://matrix.example.org/")
    monkeypatch.setenv("SUAE_TOKEN", "secret")
    monkeypatch.setenv("SUAE_TTL", "30")


def test_loads_from_environment(valid_env, monkeypatch):
    monkeypatch.setenv("SUAE_DRYRUN", "true")
    monkeypatch.setenv("SUAE_PREFIXES", "@ops_ @monitor:, @backup_")

    settings = get_settings()

    assert settings.HOST == "https://matrix.example.org"
    assert settings.TTL == 30
    assert settings.DRYRUN is True
    assert settings.REDACT is False
    assert settings.PREFIXES == ["@ops_", "@monitor:", "@backup_"]


@pytest.mark.parametrize(
    "key,value",
    [("SUAE_HOST", ""), ("SUAE_TOKEN", "  "), ("SUAE_TTL", "0"), ("SUAE_TTL", "-3")],
)
def test_invalid_values_are_rejected(valid_env, monkeypatch, key, value):
    monkeypatch.setenv(key, value)

    with pytest.raises(ConfigurationError):
        get_settings()


def test_missing_values_are_rejected():
    with pytest.raises(ConfigurationError) as exc_info:
        get_settings()

    assert "SUAE_HOST" in str(exc_info.value)


def test_overrides_win_over_environment(valid_env, monkeypatch):
    monkeypatch.setenv("SUAE_DRYRUN", "true")

    settings = get_settings(DRYRUN=False, REDACT=None)

    assert settings.DRYRUN is False
    assert settings.REDACT is False


def test_policy_from_settings_extends_defaults(valid_env, monkeypatch):
    monkeypatch.setenv("SUAE_PREFIXES", "@ops_")
    monkeypatch.setenv("SUAE_REDACT", "1")

    policy = Policy.from_settings(get_settings())

    assert policy.retention_days == 30
    assert policy.redact is True
    assert DEFAULT_EXCLUDED_PREFIXES < policy.excluded_prefixes
    assert "@ops_" in policy.excluded_prefixes
