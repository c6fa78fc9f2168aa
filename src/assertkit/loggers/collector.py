from __future__ import annotations

from assertkit.error import AssertionError
from assertkit.loggers.base import AssertionResult, Logger
from assertkit.types import UNDEFINED


class ResultCollector(Logger):
    """Keeps every reported outcome in memory, in call order."""

    def __init__(self) -> None:
        self.results: list[AssertionResult] = []

    def pass_(self, message: str | None) -> None:
        self.results.append(AssertionResult(kind="pass", message=message))

    def fail(self, error: AssertionError) -> None:
        self.results.append(
            AssertionResult(
                kind="fail",
                message=error.message,
                operator=getattr(error, "operator", None),
                actual=getattr(error, "actual", UNDEFINED),
                expected=getattr(error, "expected", UNDEFINED),
                error=error,
            )
        )

    def exception(self, error: BaseException) -> None:
        self.results.append(
            AssertionResult(kind="exception", message=str(error), error=error)
        )

    @property
    def passes(self) -> list[AssertionResult]:
        return [r for r in self.results if r.kind == "pass"]

    @property
    def failures(self) -> list[AssertionResult]:
        return [r for r in self.results if r.kind == "fail"]

    @property
    def exceptions(self) -> list[AssertionResult]:
        return [r for r in self.results if r.kind == "exception"]

    @property
    def all_passed(self) -> bool:
        return all(r.passed for r in self.results)

    def clear(self) -> None:
        self.results.clear()
