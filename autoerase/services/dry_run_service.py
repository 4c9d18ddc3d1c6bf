"""Read-only preview of the accounts that would be erased."""

import logging
from datetime import datetime

from autoerase.adapters.base import BaseAdminAdapter
from autoerase.core.exceptions import AutoEraseException
from autoerase.models import Account
from autoerase.utils.datetime_utils import utc_now

logger = logging.getLogger(__name__)


class DryRunService:
    """Reports eligible accounts with their media counts without changing anything."""

    def __init__(self, adapter: BaseAdminAdapter):
        self.adapter = adapter

    def add_media_count(self, accounts: list[Account]) -> None:
        """Attach the uploaded media count to each account, skipping failures."""
        for account in accounts:
            try:
                account.uploaded_media = self.adapter.get_media_count(account.name)
            except AutoEraseException as e:
                logger.error("failed to get media count for %s: %s", account.name, e)

    def report(self, accounts: list[Account], now: datetime | None = None) -> list[Account]:
        """
        Log the accounts that would be erased, oldest first.

        Args:
            accounts: Eligible accounts
            now: Reference time for the registration age

        Returns:
            The accounts sorted by creation time
        """
        now = now or utc_now()
        logger.info("filtered %d accounts, adding media count...", len(accounts))
        self.add_media_count(accounts)

        ordered = sorted(accounts, key=lambda account: account.creation_ts)
        logger.info("%d users left, printing...", len(ordered))
        for account in ordered:
            logger.info(
                "%s registered %d days ago uploaded %d media",
                account.name,
                account.age_in_days(now),
                account.uploaded_media,
            )
        logger.info("To remove the accounts, set the environment variable SUAE_DRYRUN to false")
        return ordered
