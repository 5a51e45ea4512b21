"""Tests for the ``{token}`` template helpers."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from notification_center.utils import find_tokens, resolve_path, stringify, substitute


def test_find_tokens_returns_names_in_order() -> None:
    assert find_tokens("{a} and {b.c} then {a}") == ["a", "b.c", "a"]
    assert find_tokens("no tokens {} here") == []


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("user.name", "Ana"),
        ("user.tags", ["x"]),
        ("meta.size", 3),
        ("meta.upper", None),
        ("user.missing", None),
        ("nothing.at.all", None),
    ],
)
def test_resolve_path_walks_mappings_and_attributes(path: str, expected: object) -> None:
    source = {"user": {"name": "Ana", "tags": ["x"]}, "meta": SimpleNamespace(size=3, upper=str.upper)}

    assert resolve_path(source, path) == expected


def test_substitute_prefers_longest_key_and_does_not_rescan() -> None:
    replacements = {"{a}": "{ab}", "{ab}": "long"}

    assert substitute("{a}-{ab}", replacements) == "{ab}-long"
    assert substitute("plain", {}) == "plain"


def test_stringify_matches_template_output() -> None:
    assert stringify(None) == ""
    assert stringify(True) == "1"
    assert stringify(False) == ""
    assert stringify(12) == "12"


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("items.0", "first"),
        ("items.1.name", "second"),
        ("items.2", None),
        ("items.-1", None),
        ("items.first", None),
        ("label.0", None),
    ],
)
def test_resolve_path_indexes_sequences(path: str, expected: object) -> None:
    source = {"items": ["first", {"name": "second"}], "label": "text"}

    assert resolve_path(source, path) == expected
