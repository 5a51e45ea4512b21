"""Utility helpers for reusable functionality."""

from .datetime import (
    get_app_timezone,
    now_timestamp,
    resolve_timezone,
    timestamp_to_datetime,
)
from .templating import find_tokens, resolve_path, stringify, substitute

__all__ = [
    "find_tokens",
    "get_app_timezone",
    "now_timestamp",
    "resolve_path",
    "resolve_timezone",
    "stringify",
    "substitute",
    "timestamp_to_datetime",
]
