"""Structural equivalence following the CommonJS "deep equal" rules 7.1-7.4."""

from __future__ import annotations

import datetime
import logging
from typing import Any

from assertkit.coercion import loose_equals, strict_equals
from assertkit.types import is_date, is_object, is_primitive, own_keys, own_value, private_slots

logger = logging.getLogger(__name__)

_EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)
_MILLISECOND = datetime.timedelta(milliseconds=1)


def epoch_millis(value: datetime.date) -> int:
    """Milliseconds since the epoch; naive values are read as local time."""
    if not isinstance(value, datetime.datetime):
        value = datetime.datetime.combine(value, datetime.time())
    if value.tzinfo is None or value.utcoffset() is None:
        value = value.astimezone()
    return (value - _EPOCH) // _MILLISECOND


def deep_equal(actual: Any, expected: Any, *, cycle_guard: bool = False) -> bool:
    """Return whether ``actual`` and ``expected`` are structurally equivalent.

    Without ``cycle_guard`` a self-referential structure recurses until
    ``RecursionError``. With it, a pair of objects already being compared
    further up the stack is taken as equal.
    """
    in_progress: set[tuple[int, int]] | None = set() if cycle_guard else None
    return _deep_equal(actual, expected, in_progress)


def _deep_equal(actual: Any, expected: Any, in_progress: set[tuple[int, int]] | None) -> bool:
    # 7.1 identical values
    if strict_equals(actual, expected):
        return True

    # 7.2 dates refer to the same instant
    if is_date(actual) and is_date(expected):
        return epoch_millis(actual) == epoch_millis(expected)

    if is_primitive(actual) or is_primitive(expected):
        return loose_equals(actual, expected)

    # 7.3 pairs that are not both objects
    actual_is_object = is_object(actual)
    expected_is_object = is_object(expected)
    if not actual_is_object and not expected_is_object:
        return loose_equals(actual, expected)
    if not (actual_is_object and expected_is_object):
        return False

    # 7.4 same type, same key set, equivalent values per key
    if type(actual) is not type(expected):
        return False

    if in_progress is None:
        return _equivalent(actual, expected, in_progress)

    pair = (id(actual), id(expected))
    if pair in in_progress:
        logger.debug("Cycle detected comparing %s objects", type(actual).__name__)
        return True
    in_progress.add(pair)
    try:
        return _equivalent(actual, expected, in_progress)
    finally:
        in_progress.discard(pair)


def _equivalent(a: Any, b: Any, in_progress: set[tuple[int, int]] | None) -> bool:
    keys_a = own_keys(a)
    keys_b = own_keys(b)
    if len(keys_a) != len(keys_b) or set(keys_a) != set(keys_b):
        return False
    if not all(
        _deep_equal(own_value(a, key), own_value(b, key), in_progress)
        for key in keys_a
    ):
        return False
    # private slots only count where both sides have filled them
    shared = private_slots(a) & private_slots(b)
    return all(
        _deep_equal(getattr(a, slot), getattr(b, slot), in_progress)
        for slot in sorted(shared)
    )
