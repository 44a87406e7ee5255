"""Conversions between digit strings and numbers of any size.

Python caps int/str conversion at a configurable number of digits
(`sys.set_int_max_str_digits`). Literals and results here may be longer, so
conversions work in fixed-size chunks that stay below the smallest allowed
cap instead of touching the interpreter-wide setting.
"""

from __future__ import annotations

from typing_extensions import TypeAliasType


Number = TypeAliasType("Number", int | float)

CHUNK_DIGITS = 500
_CHUNK_BASE = 10**CHUNK_DIGITS


def parse_digits(digits: str) -> int:
    """Convert a run of ASCII digits to an int, regardless of its length."""
    value = 0
    for start in range(0, len(digits), CHUNK_DIGITS):
        chunk = digits[start : start + CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def format_integer(value: int) -> str:
    """Render an int in base 10, regardless of its length."""
    if value < 0:
        return "-" + format_integer(-value)
    if value < _CHUNK_BASE:
        return str(value)

    chunks: list[str] = []
    while value >= _CHUNK_BASE:
        value, low = divmod(value, _CHUNK_BASE)
        chunks.append(str(low).zfill(CHUNK_DIGITS))
    chunks.append(str(value))
    return "".join(reversed(chunks))


def is_long_integer(value: object) -> bool:
    """Return whether value is an int too long for a single str() call."""
    return isinstance(value, int) and not isinstance(value, bool) and abs(value) >= _CHUNK_BASE


def format_number(value: Number) -> str:
    """Format a result number for text output."""
    if isinstance(value, int):
        return format_integer(value)
    return str(value)
