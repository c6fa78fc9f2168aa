"""The failure record handed to loggers when an assertion does not hold."""

from __future__ import annotations

import builtins
import traceback
from collections.abc import Mapping
from typing import Any

from assertkit.types import UNDEFINED, source

_OPTIONAL_FIELDS = ("actual", "expected", "operator")


class AssertionError(builtins.AssertionError):
    """Describes a failed assertion.

    ``actual``, ``expected`` and ``operator`` are only set when they were
    supplied, so ``hasattr(err, "actual")`` tells a missing value apart from
    a ``None`` one. ``message`` is always present.

    Example::

        AssertionError.from_record(
            {"actual": 1, "expected": 2, "operator": "==", "message": None}
        )
    """

    name = "AssertionError"

    def __init__(self, message: str | None = None, **fields: Any):
        unknown = set(fields) - set(_OPTIONAL_FIELDS)
        if unknown:
            raise TypeError(f"Unknown AssertionError fields: {', '.join(sorted(unknown))}")
        super().__init__(message)
        self.message = message
        for key in _OPTIONAL_FIELDS:
            if key in fields:
                setattr(self, key, fields[key])
        self.stack = "".join(traceback.format_stack()[:-1])

    @classmethod
    def from_message(cls, message: str) -> AssertionError:
        return cls(message)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> AssertionError:
        fields = {key: record[key] for key in _OPTIONAL_FIELDS if key in record}
        return cls(record.get("message"), **fields)

    def has_field(self, key: str) -> bool:
        return key in _OPTIONAL_FIELDS and key in vars(self)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"message": self.message}
        for key in _OPTIONAL_FIELDS:
            if self.has_field(key):
                data[key] = getattr(self, key)
        return data

    def __str__(self) -> str:
        if self.message:
            return f"{self.name} : {self.message}"
        return " ".join(
            [
                f"{self.name} : ",
                source(getattr(self, "expected", UNDEFINED)),
                str(getattr(self, "operator", UNDEFINED)),
                source(getattr(self, "actual", UNDEFINED)),
            ]
        )

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={source(v)}" for k, v in self.to_dict().items())
        return f"{type(self).__name__}({fields})"
