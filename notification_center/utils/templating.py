"""Small helpers for ``{token}`` style string templates."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any, Final

TOKEN_PATTERN: Final[re.Pattern[str]] = re.compile(r"\{([^}]+)\}")

_MISSING: Final = object()


def find_tokens(template: str) -> list[str]:
    """Return the names of every ``{name}`` token in ``template`` in order."""

    return TOKEN_PATTERN.findall(template)


def resolve_path(source: Any, path: str, default: Any = None) -> Any:
    """Resolve a dotted ``path`` through nested mappings and object attributes.

    ``resolve_path({"a": obj}, "a.b")`` returns ``obj.b``. Integer segments
    index into sequences, so ``"items.0"`` is the first item. Missing segments,
    ``None`` intermediates and methods reached through attributes yield
    ``default``.
    """

    current = source
    for segment in path.split("."):
        if current is None:
            return default
        if isinstance(current, Mapping):
            current = current.get(segment, _MISSING)
        elif isinstance(current, Sequence) and not isinstance(current, (str, bytes)):
            current = _index(current, segment)
        else:
            current = getattr(current, segment, _MISSING)
            if callable(current):
                return default
        if current is _MISSING:
            return default
    return default if current is None else current


def _index(items: Sequence[Any], segment: str) -> Any:
    if not segment.isdecimal():
        return _MISSING
    position = int(segment)
    if position >= len(items):
        return _MISSING
    return items[position]


def substitute(template: str, replacements: Mapping[str, str]) -> str:
    """Replace every key of ``replacements`` found in ``template``.

    Keys are matched longest first and replaced in a single pass, so text that
    was inserted by one replacement is never scanned again.
    """

    keys = [key for key in replacements if key]
    if not keys:
        return template
    keys.sort(key=len, reverse=True)
    pattern = re.compile("|".join(re.escape(key) for key in keys))
    return pattern.sub(lambda match: replacements[match.group(0)], template)


def stringify(value: Any) -> str:
    """Convert ``value`` into the text inserted in a rendered template."""

    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else ""
    return str(value)


__all__ = [
    "TOKEN_PATTERN",
    "find_tokens",
    "resolve_path",
    "stringify",
    "substitute",
]
