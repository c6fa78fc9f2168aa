"""Logger that writes assertion outcomes to a :mod:`logging` logger."""

from __future__ import annotations

import logging

from assertkit.error import AssertionError
from assertkit.loggers.base import Logger
from assertkit.types import Source


class LoggingLogger(Logger):
    def __init__(self, logger: logging.Logger | None = None, renderer: Source | None = None):
        self.logger = logger or logging.getLogger("assertkit")
        self.renderer = renderer or Source()

    def pass_(self, message: str | None) -> None:
        self.logger.info(f"PASS {message or ''}".rstrip())

    def fail(self, error: AssertionError) -> None:
        self.logger.error(f"FAIL {error}")
        details = [
            f"{key}={self.renderer.repr(value)}"
            for key, value in error.to_dict().items()
            if key != "message"
        ]
        if details:
            self.logger.debug(f"  {' '.join(details)}")

    def exception(self, error: BaseException) -> None:
        self.logger.error(
            f"EXCEPTION {type(error).__name__}: {error}",
            exc_info=(type(error), error, error.__traceback__),
        )
