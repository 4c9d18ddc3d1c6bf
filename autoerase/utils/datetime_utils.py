"""Utility functions for datetime handling."""

from datetime import UTC, datetime

MILLISECONDS_PER_DAY = 24 * 60 * 60 * 1000


def utc_now() -> datetime:
    """Get current UTC time (timezone-aware)."""
    return datetime.now(UTC)


def from_timestamp_ms(timestamp_ms: int) -> datetime:
    """Convert milliseconds since the epoch to a UTC-aware datetime."""
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=UTC)


def to_timestamp_ms(dt: datetime) -> int:
    """Convert a datetime to milliseconds since the epoch."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return int(dt.timestamp() * 1000)


def days_between(earlier_ms: int, later: datetime) -> int:
    """Whole days elapsed from a millisecond timestamp to ``later``, truncated."""
    return int((to_timestamp_ms(later) - earlier_ms) / MILLISECONDS_PER_DAY)
