"""Service for enumerating accounts on the homeserver."""

import logging

from autoerase.adapters.base import BaseAdminAdapter
from autoerase.core.exceptions import AutoEraseException
from autoerase.models import Account

logger = logging.getLogger(__name__)


class DirectoryService:
    """Loads the full account directory page by page."""

    def __init__(self, adapter: BaseAdminAdapter):
        self.adapter = adapter

    def load_accounts(self) -> tuple[list[Account], AutoEraseException | None]:
        """
        Load every account by following continuation tokens.

        A failing page stops pagination. Accounts collected from earlier
        pages are still returned so the caller can decide whether to go on
        with a partial directory.

        Returns:
            Accounts in server order, and the error that stopped pagination
            (or None if every page was fetched)
        """
        accounts: list[Account] = []
        token = "0"
        pages = 0

        while True:
            try:
                page = self.adapter.list_accounts_page(token)
            except AutoEraseException as e:
                return accounts, e

            pages += 1
            accounts.extend(page.users)
            logger.debug(
                "page %d: %d accounts (total reported %d)", pages, len(page.users), page.total
            )

            if not page.next_token:
                return accounts, None
            token = page.next_token
