"""Pydantic models for erasure results."""

from pydantic import BaseModel, Field

from autoerase.models.enums import StepStatus


class ErasureOutcome(BaseModel):
    """Result of erasing one account."""

    name: str
    deactivated: bool = False
    media_status: StepStatus = StepStatus.SKIPPED
    media_deleted: int = 0
    redaction: StepStatus = StepStatus.NOT_REQUESTED
    errors: list[str] = Field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        """Deactivated and no later step failed."""
        return (
            self.deactivated
            and self.media_status != StepStatus.FAILED
            and self.redaction != StepStatus.FAILED
        )


class ErasureSummary(BaseModel):
    """Statistics for an erasure batch."""

    total: int = 0
    erased: int = 0
    partial: int = 0
    failed: int = 0
    outcomes: list[ErasureOutcome] = Field(default_factory=list)

    def record(self, outcome: ErasureOutcome) -> None:
        self.total += 1
        if outcome.succeeded:
            self.erased += 1
        elif outcome.deactivated:
            self.partial += 1
        else:
            self.failed += 1
        self.outcomes.append(outcome)
