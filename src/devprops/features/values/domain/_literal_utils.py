"""Literal parsing helpers.

Where: src/devprops/features/values/domain/_literal_utils.py
What: Provide pure routines that turn raw attribute text into numbers, booleans and lists.
Why: Keep the accessor methods of ``TypedValue`` free of lexical detail.
"""

from __future__ import annotations

import math
import re
import struct
from decimal import Decimal
from fractions import Fraction
from typing import Final

__all__ = [
    "INT32_BITS",
    "INT64_BITS",
    "parse_decimal",
    "to_single_precision",
    "parse_single_precision",
    "parse_bounded_int",
    "parse_permissive_boolean",
    "split_enumeration",
]

INT32_BITS: Final[int] = 32
INT64_BITS: Final[int] = 64

ENUMERATION_SEPARATOR: Final[str] = ","

_DECIMAL_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
)
_SPECIAL_PATTERN: Final[re.Pattern[str]] = re.compile(r"([+-]?)(NaN|Infinity)")
_INTEGER_PATTERN: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")

# Infinity rounds as if it were the next binary32 step past the largest finite value.
_BINARY32_OVERFLOW: Final[Fraction] = Fraction(2**128)


def parse_decimal(text: str) -> float:
    """Parse a decimal floating-point literal.

    Accepts an optional sign, digits with optional fraction and exponent, and the
    ``NaN`` / ``Infinity`` literals. Surrounding whitespace is ignored.

    Args:
        text: Raw literal.

    Returns:
        float: Parsed value.

    Raises:
        ValueError: If ``text`` is not a decimal literal.
    """
    candidate = text.strip()
    if _DECIMAL_PATTERN.fullmatch(candidate):
        return float(candidate)

    special = _SPECIAL_PATTERN.fullmatch(candidate)
    if special is not None:
        sign, word = special.groups()
        if word == "NaN":
            return math.nan
        return -math.inf if sign == "-" else math.inf

    raise ValueError(f"Invalid decimal literal: {text!r}")


def to_single_precision(value: float) -> float:
    """Round ``value`` to the nearest IEEE-754 binary32 number."""
    try:
        packed = struct.pack("<f", value)
    except OverflowError:
        return math.copysign(math.inf, value)
    return struct.unpack("<f", packed)[0]


def parse_single_precision(text: str) -> float:
    """Parse a decimal literal rounded once to the nearest binary32 value.

    Rounding through a double first can land on the wrong side of a binary32
    midpoint, so the double-derived candidate and its binary32 neighbours are
    compared against the exact decimal value. Ties go to the even significand.

    Raises:
        ValueError: If ``text`` is not a decimal literal.
    """
    value = parse_decimal(text)
    if not math.isfinite(value) or value == 0.0:
        return to_single_precision(value)

    exact = Fraction(Decimal(text.strip()))
    candidate = to_single_precision(value)
    options = [candidate, *_binary32_neighbours(candidate)]
    return min(
        options,
        key=lambda option: (abs(_exact_binary32(option) - exact), _binary32_bits(option) & 1),
    )


def _binary32_bits(value: float) -> int:
    return struct.unpack("<I", struct.pack("<f", value))[0]


def _binary32_neighbours(value: float) -> list[float]:
    bits = _binary32_bits(value)
    neighbours: list[float] = []
    for adjacent in (bits - 1, bits + 1):
        if 0 <= adjacent <= 0xFFFFFFFF:
            neighbour: float = struct.unpack("<f", struct.pack("<I", adjacent))[0]
            if not math.isnan(neighbour):
                neighbours.append(neighbour)
    return neighbours


def _exact_binary32(value: float) -> Fraction:
    if math.isinf(value):
        return _BINARY32_OVERFLOW if value > 0 else -_BINARY32_OVERFLOW
    return Fraction(value)


def parse_bounded_int(text: str, bits: int) -> int:
    """Parse a signed integer literal that must fit in ``bits`` bits.

    Only an optional sign followed by ASCII digits is accepted.

    Raises:
        ValueError: If ``text`` is malformed or out of range.
    """
    if not _INTEGER_PATTERN.fullmatch(text):
        raise ValueError(f"Invalid integer literal: {text!r}")

    value = int(text)
    lower = -(1 << (bits - 1))
    upper = (1 << (bits - 1)) - 1
    if not lower <= value <= upper:
        raise ValueError(f"Integer literal out of {bits}-bit range: {text!r}")
    return value


def parse_permissive_boolean(text: str) -> bool:
    """Return True only for a case-insensitive ``true``; never fails."""
    return text.casefold() == "true"


def split_enumeration(text: str) -> list[str]:
    """Split a comma-separated list, trimming each segment and keeping empty ones."""
    return [segment.strip() for segment in text.split(ENUMERATION_SEPARATOR)]
