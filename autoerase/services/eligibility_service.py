"""Eligibility rules for account erasure."""

from datetime import datetime

from autoerase.models import Account, Policy
from autoerase.utils.datetime_utils import MILLISECONDS_PER_DAY, to_timestamp_ms, utc_now


def has_excluded_prefix(name: str, prefixes: frozenset[str]) -> bool:
    """Return True if the name starts with any of the prefixes (case-sensitive)."""
    return any(name.startswith(prefix) for prefix in prefixes)


def is_within_retention_window(creation_ts: int, retention_days: int, now: datetime) -> bool:
    """
    Check whether an account is still inside the retention window.

    A retention of 0 disables the check. The distance to ``now`` is taken
    as an absolute value, so timestamps in the future are always kept.

    Args:
        creation_ts: Registration time in milliseconds since the epoch
        retention_days: Retention window in days
        now: Reference time

    Returns:
        True if the account must be kept
    """
    if retention_days == 0:
        return False
    return abs(to_timestamp_ms(now) - creation_ts) <= retention_days * MILLISECONDS_PER_DAY


def is_eligible(account: Account, policy: Policy, now: datetime) -> bool:
    if account.is_privileged_or_inactive:
        return False
    if has_excluded_prefix(account.name, policy.excluded_prefixes):
        return False
    if is_within_retention_window(account.creation_ts, policy.retention_days, now):
        return False
    return True


def filter_accounts(
    accounts: list[Account], policy: Policy, now: datetime | None = None
) -> list[Account]:
    """Return the accounts eligible for erasure, keeping input order."""
    now = now or utc_now()
    return [account for account in accounts if is_eligible(account, policy, now)]
