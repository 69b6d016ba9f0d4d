"""Helpers for reading ``CT_*`` environment variables.

Each helper returns ``None`` for an unset variable so callers can tell
"not configured" apart from a configured falsy value.
"""

from __future__ import annotations

from typing import Callable, TypeVar

T = TypeVar("T")

TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


def _convert(value: str | None, convert: Callable[[str], T]) -> T | None:
    if value is None:
        return None
    try:
        return convert(value.strip())
    except ValueError:
        return None


def parse_bool_env(value: str | None) -> bool | None:
    """``1``/``true``/``yes``/``on`` in any case are true; anything else is false."""
    return _convert(value, lambda raw: raw.lower() in TRUE_VALUES)


def parse_int_env(value: str | None) -> int | None:
    return _convert(value, int)


def parse_float_env(value: str | None) -> float | None:
    return _convert(value, float)


def parse_id_list(value: str | None) -> frozenset[str]:
    """Split a comma-separated id list such as ``"101, 105,,"``.

    Whitespace is removed and blank entries are dropped.
    """
    if not value:
        return frozenset()
    tokens = ("".join(token.split()) for token in value.split(","))
    return frozenset(token for token in tokens if token)
