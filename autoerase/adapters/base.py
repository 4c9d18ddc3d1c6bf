from abc import ABC, abstractmethod

from autoerase.models import AccountsPage


class BaseAdminAdapter(ABC):
    """Abstract base class for homeserver administration adapters."""

    @abstractmethod
    def list_accounts_page(self, from_token: str = "0") -> AccountsPage:
        """
        Fetch one page of the account listing.

        Guests, admins, deactivated and locked accounts are excluded
        server-side where the server supports it.

        Args:
            from_token: Continuation token returned by the previous page.

        Returns:
            The decoded page.

        """

    @abstractmethod
    def deactivate_account(self, name: str) -> None:
        """Deactivate the account and ask the server to erase its personal data."""

    @abstractmethod
    def delete_media(self, name: str) -> int:
        """Delete all media uploaded by the account, returning the number deleted."""

    @abstractmethod
    def redact_messages(self, name: str) -> None:
        """Redact all messages sent by the account in every room."""

    @abstractmethod
    def get_media_count(self, name: str) -> int:
        """Get the number of media files uploaded by the account."""
