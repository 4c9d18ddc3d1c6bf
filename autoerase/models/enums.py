"""Enum definitions for erasure step results."""

import enum


class StepStatus(str, enum.Enum):
    """Result of a single erasure step for one account."""

    NOT_REQUESTED = "not_requested"
    SUCCESS = "success"
    FAILED = "failed"
    SKIPPED = "skipped"
