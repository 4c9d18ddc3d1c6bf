"""Data models."""

from autoerase.models.account import Account, AccountsPage
from autoerase.models.enums import StepStatus
from autoerase.models.erasure import ErasureOutcome, ErasureSummary
from autoerase.models.media import DeletedMedia, MediaCount
from autoerase.models.policy import DEFAULT_EXCLUDED_PREFIXES, Policy

__all__ = [
    "Account",
    "AccountsPage",
    "DEFAULT_EXCLUDED_PREFIXES",
    "DeletedMedia",
    "ErasureOutcome",
    "ErasureSummary",
    "MediaCount",
    "Policy",
    "StepStatus",
]
