"""Timestamp formatting used when rendering notifications."""

from __future__ import annotations

from datetime import tzinfo
from functools import lru_cache

from notification_center.utils import get_app_timezone, timestamp_to_datetime


class TimestampFormatter:
    """Format UNIX timestamps as local date/time strings."""

    def __init__(self, timezone: tzinfo | None = None) -> None:
        self.timezone = timezone or get_app_timezone()

    def as_datetime(self, timestamp: int, pattern: str) -> str:
        """Return ``timestamp`` formatted with the ``strftime`` ``pattern``."""

        return timestamp_to_datetime(timestamp, self.timezone).strftime(pattern)


@lru_cache(maxsize=1)
def get_timestamp_formatter() -> TimestampFormatter:
    """Return the formatter bound to the configured application timezone."""

    return TimestampFormatter()


__all__ = ["TimestampFormatter", "get_timestamp_formatter"]
