"""Explicit loose and strict equality over a fixed coercion table.

Values are sorted into kinds before comparing:

    undefined, null, boolean, number, string, bytes, object

``strict_equals`` never converts between kinds. ``loose_equals`` applies,
in order:

1. same kind            -> strict comparison
2. null vs undefined    -> equal (and neither equals anything else)
3. number vs string     -> the string is converted with ``to_number``
4. boolean vs anything  -> the boolean becomes 0 or 1, then retry
5. anything else        -> not equal (objects are never coerced)
"""

from __future__ import annotations

import math
import re
from typing import Any

from assertkit.types import UNDEFINED, is_number

_NUMERIC_LITERAL = re.compile(
    r"""
    [+-]?(?:
        (?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?
      | Infinity
    )
    """,
    re.VERBOSE,
)
_RADIX_LITERAL = re.compile(r"0([xXoObB])([0-9a-fA-F]+)")
_RADIX = {"x": 16, "o": 8, "b": 2}


def kind_of(value: Any) -> str:
    if value is UNDEFINED:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if is_number(value):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, bytes):
        return "bytes"
    return "object"


def to_number(text: str) -> float:
    """Convert a string to a number, NaN when it is not a numeric literal."""
    text = text.strip()
    if not text:
        return 0.0
    match = _RADIX_LITERAL.fullmatch(text)
    if match:
        try:
            return float(int(match.group(2), _RADIX[match.group(1).lower()]))
        except ValueError:
            return math.nan
    if _NUMERIC_LITERAL.fullmatch(text):
        return float(text.replace("Infinity", "inf"))
    return math.nan


def _is_nan(value: Any) -> bool:
    try:
        return value != value
    except Exception:
        return False


def strict_equals(a: Any, b: Any) -> bool:
    kind = kind_of(a)
    if kind != kind_of(b):
        return False
    if kind == "object":
        return a is b
    if kind == "number" and (_is_nan(a) or _is_nan(b)):
        return False
    return a == b


def loose_equals(a: Any, b: Any) -> bool:
    kind_a, kind_b = kind_of(a), kind_of(b)

    if kind_a == kind_b:
        return strict_equals(a, b)

    nullish = ("null", "undefined")
    if kind_a in nullish or kind_b in nullish:
        return kind_a in nullish and kind_b in nullish

    if kind_a == "number" and kind_b == "string":
        return strict_equals(a, to_number(b))
    if kind_a == "string" and kind_b == "number":
        return strict_equals(to_number(a), b)

    if kind_a == "boolean":
        return loose_equals(int(a), b)
    if kind_b == "boolean":
        return loose_equals(a, int(b))

    return False


def is_truthy(value: Any) -> bool:
    """Coercive truthiness.

    ``False``, ``0``, NaN, ``""``, ``b""``, ``None`` and ``UNDEFINED`` are
    falsy. Every other value follows ``bool()``.
    """
    if value is None or value is UNDEFINED:
        return False
    if is_number(value) and _is_nan(value):
        return False
    return bool(value)
