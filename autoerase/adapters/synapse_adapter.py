"""Adapter for the Synapse admin HTTP API."""

import logging
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from autoerase.adapters.base import BaseAdminAdapter
from autoerase.core.exceptions import DecodeError, ServerError, TransportError
from autoerase.models import AccountsPage, DeletedMedia, MediaCount

logger = logging.getLogger(__name__)

USER_AGENT = "Synapse User Auto Erase (library; +https://github.com/etkecc/synapse-user-autoerase)"

PAGE_SIZE = 1000


class SynapseAdminAdapter(BaseAdminAdapter):
    """Adapter for the Synapse admin API.

    Owns an ``httpx.Client``; use it as a context manager (or call
    :meth:`close`) so the connection pool is released.
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        transport: httpx.BaseTransport | None = None,
    ):
        if not base_url:
            raise ValueError("base_url must be provided to SynapseAdminAdapter")
        if not token:
            raise ValueError("token must be provided to SynapseAdminAdapter")
        self.base_url = base_url.rstrip("/")
        self.headers = {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
        }
        self._client = httpx.Client(base_url=self.base_url, headers=self.headers, transport=transport)

    def __enter__(self) -> "SynapseAdminAdapter":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def list_accounts_page(self, from_token: str = "0") -> AccountsPage:
        """Fetch one page of non-guest, non-admin, active accounts, newest first."""
        params = {
            "from": from_token,
            "limit": PAGE_SIZE,
            "guests": "false",
            "admins": "false",
            "deactivated": "false",
            "locked": "false",
            "order_by": "creation_ts",
            "dir": "b",
        }
        response = self._request("list_accounts", "GET", "/_synapse/admin/v2/users", params=params)
        return self._decode(response, AccountsPage, "list_accounts")

    def deactivate_account(self, name: str) -> None:
        self._request(
            "deactivate",
            "POST",
            f"/_synapse/admin/v1/deactivate/{_user_path(name)}",
            account=name,
            json={"erase": True},
        )

    def delete_media(self, name: str) -> int:
        response = self._request(
            "delete_media",
            "DELETE",
            f"/_synapse/admin/v1/users/{_user_path(name)}/media",
            account=name,
        )
        return self._decode(response, DeletedMedia, "delete_media", name).total

    def redact_messages(self, name: str) -> None:
        # An empty room list means every room the user has been in
        self._request(
            "redact",
            "POST",
            f"/_synapse/admin/v1/user/{_user_path(name)}/redact",
            account=name,
            json={"rooms": []},
        )

    def get_media_count(self, name: str) -> int:
        response = self._request(
            "media_count",
            "GET",
            f"/_synapse/admin/v1/users/{_user_path(name)}/media",
            account=name,
            params={"limit": 1},
        )
        return self._decode(response, MediaCount, "media_count", name).total

    def _request(
        self,
        operation: str,
        method: str,
        path: str,
        account: str | None = None,
        **kwargs,
    ) -> httpx.Response:
        """Send a request, mapping failures onto the application's error types."""
        logger.debug("%s %s", method, path)
        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.RequestError as e:
            raise TransportError(f"request error: {e}", operation, account) from e

        if not response.is_success:
            raise ServerError(response.status_code, response.text, operation, account)
        return response

    @staticmethod
    def _decode(
        response: httpx.Response,
        model: type[BaseModel],
        operation: str,
        account: str | None = None,
    ):
        try:
            return model.model_validate_json(response.content)
        except ValidationError as e:
            raise DecodeError(f"malformed response: {e}", operation, account) from e


def _user_path(name: str) -> str:
    return quote(name, safe="@:")
