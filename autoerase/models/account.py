"""Pydantic models for Synapse user accounts.

Only the fields this application needs are declared; anything else the
admin API returns is ignored.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from autoerase.utils.datetime_utils import days_between, from_timestamp_ms


class Account(BaseModel):
    """A user account as reported by the homeserver."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str
    is_guest: bool = False
    is_admin: bool = Field(default=False, alias="admin")
    is_deactivated: bool = Field(default=False, alias="deactivated")
    is_locked: bool = Field(default=False, alias="locked")
    creation_ts: int = 0

    # Filled in during dry runs only, never part of the listing response
    uploaded_media: int = Field(default=0, exclude=True)

    @field_validator("is_guest", "is_admin", "is_deactivated", "is_locked", mode="before")
    @classmethod
    def null_is_false(cls, value):
        return False if value is None else value

    @field_validator("creation_ts", mode="before")
    @classmethod
    def null_is_zero(cls, value):
        return 0 if value is None else value

    @property
    def created_at(self) -> datetime:
        return from_timestamp_ms(self.creation_ts)

    @property
    def is_privileged_or_inactive(self) -> bool:
        """True for guest, admin, deactivated, or locked accounts."""
        return self.is_guest or self.is_admin or self.is_deactivated or self.is_locked

    def age_in_days(self, now: datetime) -> int:
        """Whole days since registration."""
        return days_between(self.creation_ts, now)


class AccountsPage(BaseModel):
    """One page of the paginated user listing."""

    users: list[Account] = Field(default_factory=list)
    next_token: str | None = None
    total: int = 0

    @field_validator("next_token", mode="before")
    @classmethod
    def coerce_token(cls, value):
        if value is None:
            return None
        return str(value)
