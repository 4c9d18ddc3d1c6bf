"""Service for erasing accounts from the homeserver."""

import logging
from datetime import datetime

from autoerase.adapters.base import BaseAdminAdapter
from autoerase.core.exceptions import AutoEraseException
from autoerase.models import Account, ErasureOutcome, ErasureSummary, Policy, StepStatus
from autoerase.utils.datetime_utils import utc_now

logger = logging.getLogger(__name__)


class ErasureService:
    """Deactivates accounts, deletes their media and optionally redacts their messages.

    Every step is irreversible and nothing is rolled back. An account that
    was deactivated but lost a later step is reported as a partial erasure.
    """

    def __init__(self, adapter: BaseAdminAdapter, policy: Policy):
        self.adapter = adapter
        self.policy = policy

    def erase(self, account: Account) -> ErasureOutcome:
        """
        Erase a single account.

        Args:
            account: Account to erase

        Returns:
            Outcome of each step
        """
        outcome = ErasureOutcome(name=account.name)

        try:
            self.adapter.deactivate_account(account.name)
        except AutoEraseException as e:
            logger.error("failed to remove account %s: %s", account.name, e)
            outcome.errors.append(str(e))
            if self.policy.redact:
                outcome.redaction = StepStatus.SKIPPED
            return outcome
        outcome.deactivated = True

        try:
            outcome.media_deleted = self.adapter.delete_media(account.name)
            outcome.media_status = StepStatus.SUCCESS
        except AutoEraseException as e:
            logger.error("failed to remove media of %s: %s", account.name, e)
            outcome.media_status = StepStatus.FAILED
            outcome.errors.append(str(e))

        if self.policy.redact:
            try:
                self.adapter.redact_messages(account.name)
                outcome.redaction = StepStatus.SUCCESS
            except AutoEraseException as e:
                logger.error("failed to redact messages of %s: %s", account.name, e)
                outcome.redaction = StepStatus.FAILED
                outcome.errors.append(str(e))

        return outcome

    def erase_all(self, accounts: list[Account], now: datetime | None = None) -> ErasureSummary:
        """
        Erase accounts one at a time, in order.

        Failures are isolated to the account they happened on; the batch
        always runs to the end.

        Args:
            accounts: Eligible accounts
            now: Reference time for the age shown in the log

        Returns:
            Batch statistics with every outcome
        """
        now = now or utc_now()
        summary = ErasureSummary()

        for account in accounts:
            logger.info("removing %s ...", account.name)
            outcome = self.erase(account)
            summary.record(outcome)
            if outcome.deactivated:
                logger.info(
                    "removed %s (registered %d days ago), deleted %d media",
                    account.name,
                    account.age_in_days(now),
                    outcome.media_deleted,
                )

        logger.info(
            "erasure finished: %d erased, %d partially erased, %d failed (of %d)",
            summary.erased,
            summary.partial,
            summary.failed,
            summary.total,
        )
        return summary
