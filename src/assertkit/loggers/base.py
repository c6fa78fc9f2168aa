"""Logger interface that assertion outcomes are reported to."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from assertkit.types import UNDEFINED

if TYPE_CHECKING:
    from assertkit.error import AssertionError


@dataclass
class AssertionResult:
    """One reported outcome.

    Attributes:
        kind: "pass", "fail" or "exception".
        message: The assertion message, if any.
        operator: Failure operator ("==", "deepEqual", "throws", ...).
        actual: Value under test, ``UNDEFINED`` when not reported.
        expected: Expected value, ``UNDEFINED`` when not reported.
        error: The ``AssertionError`` or the uncaught exception.
    """

    kind: str
    message: str | None = None
    operator: str | None = None
    actual: Any = UNDEFINED
    expected: Any = UNDEFINED
    error: BaseException | None = None

    @property
    def passed(self) -> bool:
        return self.kind == "pass"

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "kind": self.kind,
            "passed": self.passed,
            "message": self.message,
        }
        if self.operator is not None:
            data["operator"] = self.operator
        if self.actual is not UNDEFINED:
            data["actual"] = self.actual
        if self.expected is not UNDEFINED:
            data["expected"] = self.expected
        return data


class Logger(ABC):
    """Receives the outcome of every assertion call."""

    @abstractmethod
    def pass_(self, message: str | None) -> None:
        """Record a passing assertion."""
        ...

    @abstractmethod
    def fail(self, error: AssertionError) -> None:
        """Record a failing assertion."""
        ...

    @abstractmethod
    def exception(self, error: BaseException) -> None:
        """Record an exception raised outside any assertion."""
        ...
