from datetime import UTC, datetime, timedelta

import pytest

from autoerase.adapters.base import BaseAdminAdapter
from autoerase.core.exceptions import ServerError, TransportError
from autoerase.models import Account, AccountsPage, Policy
from autoerase.utils.datetime_utils import to_timestamp_ms

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=UTC)


def make_account(name: str, days_old: float = 400, **flags) -> Account:
    return Account(
        name=name,
        creation_ts=to_timestamp_ms(NOW - timedelta(days=days_old)),
        **flags,
    )


class FakeAdminAdapter(BaseAdminAdapter):
    """In-memory adapter that records calls and fails on demand."""

    def __init__(self, pages=None, media=None, fail=None):
        self.pages = pages or []
        self.media = media or {}
        # {(operation, name): exception}
        self.fail = fail or {}
        self.calls: list[tuple[str, str]] = []

    def _maybe_fail(self, operation: str, name: str) -> None:
        self.calls.append((operation, name))
        error = self.fail.get((operation, name))
        if error is not None:
            raise error

    def list_accounts_page(self, from_token: str = "0") -> AccountsPage:
        self._maybe_fail("list_accounts", from_token)
        return self.pages[int(from_token)]

    def deactivate_account(self, name: str) -> None:
        self._maybe_fail("deactivate", name)

    def delete_media(self, name: str) -> int:
        self._maybe_fail("delete_media", name)
        return self.media.get(name, 0)

    def redact_messages(self, name: str) -> None:
        self._maybe_fail("redact", name)

    def get_media_count(self, name: str) -> int:
        self._maybe_fail("media_count", name)
        return self.media.get(name, 0)

    def operations_for(self, name: str) -> list[str]:
        return [operation for operation, target in self.calls if target == name]


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def policy():
    return Policy.build(retention_days=30)


@pytest.fixture
def redact_policy():
    return Policy.build(retention_days=30, redact=True)


@pytest.fixture
def server_error():
    return ServerError(500, '{"errcode":"M_UNKNOWN"}')


@pytest.fixture
def transport_error():
    return TransportError("request error: connection refused")
