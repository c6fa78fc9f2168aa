"""Type predicates and debug stringification used by the assertion core."""

from __future__ import annotations

import array
import datetime
from collections import deque
from collections.abc import Mapping, Sequence, Set as AbstractSet
import inspect
import numbers
import re
import reprlib
from typing import Any


class _Undefined:
    """Marker for "no value", kept distinct from ``None`` (null)."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False


UNDEFINED = _Undefined()


def is_undefined(value: Any) -> bool:
    return value is UNDEFINED


def is_null(value: Any) -> bool:
    return value is None


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_number(value: Any) -> bool:
    return isinstance(value, numbers.Number) and not isinstance(value, bool)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_bytes(value: Any) -> bool:
    return isinstance(value, bytes)


def is_regexp(value: Any) -> bool:
    return isinstance(value, re.Pattern)


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_date(value: Any) -> bool:
    return isinstance(value, datetime.date)


def is_function(value: Any) -> bool:
    """True for functions, methods, builtins and classes."""
    return inspect.isroutine(value) or inspect.isclass(value)


def is_primitive(value: Any) -> bool:
    return (
        value is None
        or value is UNDEFINED
        or isinstance(value, (bool, str, bytes))
        or is_number(value)
    )


def is_object(value: Any) -> bool:
    """True for aggregates that deep equality descends into."""
    return not is_primitive(value) and not is_function(value)


def instance_of(value: Any, cls: type | tuple[type, ...]) -> bool:
    try:
        return isinstance(value, cls)
    except TypeError:
        return False


def _is_indexed(value: Any) -> bool:
    return isinstance(value, (Sequence, deque, array.array)) and not isinstance(value, (str, bytes))


def _slot_names(value: Any) -> list[str]:
    names: list[str] = []
    for cls in type(value).__mro__:
        slots = getattr(cls, "__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for slot in slots:
            if slot in ("__dict__", "__weakref__"):
                continue
            # name mangling for __private slots
            if slot.startswith("__") and not slot.endswith("__"):
                slot = f"_{cls.__name__.lstrip('_')}{slot}"
            if slot not in names:
                names.append(slot)
    return names


def own_keys(value: Any) -> list[Any]:
    """Return the own keys of an object-like value.

    Sequences (including ``deque``, ``range`` and ``array``) are keyed by
    index, mappings by key and sets by element. Plain instances expose their
    ``__dict__`` entries and every public ``__slots__`` name, set or not.
    Underscore-prefixed slots are left to :func:`private_slots`.
    """
    if _is_indexed(value):
        return list(range(len(value)))
    if isinstance(value, Mapping):
        return list(value.keys())
    if isinstance(value, AbstractSet):
        return list(value)
    keys: list[Any] = list(getattr(value, "__dict__", {}).keys())
    for slot in _slot_names(value):
        if not slot.startswith("_") and slot not in keys:
            keys.append(slot)
    return keys


def private_slots(value: Any) -> set[str]:
    """Underscore-prefixed slots that currently hold a value.

    These are often lazily filled caches, so deep equality only compares the
    ones populated on both sides.
    """
    if _is_indexed(value) or isinstance(value, (Mapping, AbstractSet)):
        return set()
    keys = getattr(value, "__dict__", {})
    return {
        slot
        for slot in _slot_names(value)
        if slot.startswith("_") and slot not in keys and hasattr(value, slot)
    }


def own_value(value: Any, key: Any) -> Any:
    if _is_indexed(value) or isinstance(value, Mapping):
        return value[key]
    if isinstance(value, AbstractSet):
        return key
    return getattr(value, key, UNDEFINED)


class Source(reprlib.Repr):
    """Bounded debug rendering of arbitrary values."""

    def __init__(self, max_string: int = 60, max_level: int = 6, max_items: int = 10):
        super().__init__()
        self.maxstring = max_string
        self.maxother = max_string
        self.maxlevel = max_level
        self.maxlist = self.maxtuple = self.maxdict = max_items
        self.maxset = self.maxfrozenset = max_items

    def repr_instance(self, x: Any, level: int) -> str:
        try:
            s = repr(x)
        except Exception:
            return f"<{type(x).__name__} object at {id(x):#x}>"
        if len(s) > self.maxother:
            i = max(0, (self.maxother - 3) // 2)
            j = max(0, self.maxother - 3 - i)
            s = s[:i] + "..." + s[len(s) - j :]
        return s


_default_source = Source()


def source(value: Any) -> str:
    """Render ``value`` for diagnostics; never raises."""
    return _default_source.repr(value)
