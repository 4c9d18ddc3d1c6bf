"""Utility functions."""

from autoerase.utils.datetime_utils import days_between, from_timestamp_ms, to_timestamp_ms, utc_now

__all__ = ["days_between", "from_timestamp_ms", "to_timestamp_ms", "utc_now"]
