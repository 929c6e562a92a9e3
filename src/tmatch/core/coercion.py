"""Loose (coercing) equality between primitive values.

The matcher compares primitives the way a dynamically typed `==` would,
spelled out as an explicit table instead of relying on Python's `==`:

- None and UNDEFINED equal each other and nothing else
- a boolean is compared as the number 1 or 0
- a number and a string are compared after converting the string with `to_number`
- values of the same kind compare with `==`
- any other pairing is unequal
"""

from __future__ import annotations

import math
import re
from typing import Any

from .kinds import Kind, classify

_NULLISH = frozenset({Kind.NULL, Kind.UNDEFINED})

_INTEGER = re.compile(r"[+-]?[0-9]+")
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_RADIX = {"0x": 16, "0o": 8, "0b": 2}
_RADIX_DIGITS = {
    16: re.compile(r"[0-9a-fA-F]+"),
    8: re.compile(r"[0-7]+"),
    2: re.compile(r"[01]+"),
}


def to_number(text: str) -> int | float:
    """Convert a string to a number, or NaN when it is not numeric.

    e.g., ' 42 ' -> 42, '' -> 0, '0x1f' -> 31, '1e3' -> 1000.0, '-Infinity' -> -inf, 'abc' -> nan

    Integer literals convert exactly rather than through a double.
    """
    s = text.strip()
    if not s:
        return 0

    if s in ("Infinity", "+Infinity"):
        return math.inf
    if s == "-Infinity":
        return -math.inf

    # radix literals are unsigned, e.g. '0x10' but not '-0x10'
    base = _RADIX.get(s[:2].lower())
    if base is not None:
        digits = s[2:]
        return int(digits, base) if _RADIX_DIGITS[base].fullmatch(digits) else math.nan

    if _INTEGER.fullmatch(s):
        try:
            return int(s)
        except ValueError:
            # past the int digit limit, read it like any other decimal
            return float(s)
    if _DECIMAL.fullmatch(s):
        return float(s)
    return math.nan


def loose_equals(a: Any, b: Any) -> bool:
    """Compare two primitive values (or None) with coercing equality."""
    kind_a, kind_b = classify(a), classify(b)

    if kind_a in _NULLISH or kind_b in _NULLISH:
        return kind_a in _NULLISH and kind_b in _NULLISH

    if kind_a is Kind.BOOLEAN:
        return loose_equals(int(a), b)
    if kind_b is Kind.BOOLEAN:
        return loose_equals(a, int(b))

    if kind_a is kind_b:
        return a == b

    if kind_a is Kind.NUMBER and kind_b is Kind.STRING:
        return a == to_number(b)
    if kind_a is Kind.STRING and kind_b is Kind.NUMBER:
        return to_number(a) == b

    return False
