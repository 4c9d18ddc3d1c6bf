"""Business logic services."""

from autoerase.services.directory_service import DirectoryService
from autoerase.services.dry_run_service import DryRunService
from autoerase.services.eligibility_service import filter_accounts, is_within_retention_window
from autoerase.services.erasure_service import ErasureService

__all__ = [
    "DirectoryService",
    "DryRunService",
    "ErasureService",
    "filter_accounts",
    "is_within_retention_window",
]
