from assertkit.loggers.base import AssertionResult, Logger
from assertkit.loggers.collector import ResultCollector
from assertkit.loggers.stdlib import LoggingLogger

__all__ = [
    "AssertionResult",
    "Logger",
    "LoggingLogger",
    "ResultCollector",
]
