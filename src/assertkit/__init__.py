"""Assertions that report to a logger instead of raising."""

from assertkit.assert_ import Assert
from assertkit.coercion import is_truthy, loose_equals, strict_equals
from assertkit.deep_equal import deep_equal
from assertkit.error import AssertionError
from assertkit.loggers import AssertionResult, Logger, LoggingLogger, ResultCollector
from assertkit.types import UNDEFINED, source

__all__ = [
    "Assert",
    "AssertionError",
    "AssertionResult",
    "Logger",
    "LoggingLogger",
    "ResultCollector",
    "UNDEFINED",
    "deep_equal",
    "is_truthy",
    "loose_equals",
    "source",
    "strict_equals",
]
