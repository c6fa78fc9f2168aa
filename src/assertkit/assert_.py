"""The assertion surface bound to a logger."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Callable, TYPE_CHECKING

from assertkit.coercion import is_truthy, loose_equals, strict_equals
from assertkit.deep_equal import deep_equal
from assertkit.error import AssertionError
from assertkit.loggers.base import Logger
from assertkit.loggers.stdlib import LoggingLogger
from assertkit.matchers import catch_types, expected_of, resolve_matcher
from assertkit.types import UNDEFINED, Source
from assertkit.verbose import setup_logger

if TYPE_CHECKING:
    from assertkit.config import AssertkitConfig

log = logging.getLogger(__name__)


class Assert:
    """Evaluates assertions and reports each outcome to ``logger``.

    Every assertion method calls exactly one of ``logger.pass_`` or
    ``logger.fail``. Failures are reported, never raised.

    Example::

        assert_ = Assert(ResultCollector())
        assert_.equal(1, "1", "one is one")
        assert_.deep_equal({"a": "foo"}, {"a": "foo"}, "equivalent objects")
    """

    __slots__ = ("_log", "_cycle_guard")

    def __init__(self, logger: Logger, *, cycle_guard: bool = False):
        if not isinstance(logger, Logger):
            raise TypeError(f"Assert expects a Logger, got {type(logger).__name__}")
        object.__setattr__(self, "_log", logger)
        object.__setattr__(self, "_cycle_guard", cycle_guard)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def from_config(cls, config: AssertkitConfig, logger: Logger | None = None) -> Assert:
        """Build an ``Assert`` from config, logging through :mod:`logging` by default."""
        if logger is None:
            log_config = config.logging
            if log_config.debug_file:
                std_logger = setup_logger(
                    Path(log_config.debug_file),
                    verbose=log_config.verbose,
                    logger_name=log_config.logger_name,
                )
            else:
                std_logger = logging.getLogger(log_config.logger_name)
            renderer = Source(
                max_string=config.source.max_string,
                max_level=config.source.max_level,
                max_items=config.source.max_items,
            )
            logger = LoggingLogger(std_logger, renderer=renderer)
        return cls(logger, cycle_guard=config.deep_equal.cycle_guard)

    @property
    def logger(self) -> Logger:
        return self._log

    # -- pass-throughs ---------------------------------------------------

    def fail(self, record: AssertionError | Mapping[str, Any]) -> None:
        if not isinstance(record, AssertionError):
            record = AssertionError.from_record(record)
        self._log.fail(record)

    def pass_(self, message: str | None = None) -> None:
        self._log.pass_(message)

    def error(self, e: BaseException) -> None:
        self._log.exception(e)

    def _check(self, passed: bool, actual: Any, expected: Any, message: str | None, operator: str) -> None:
        if passed:
            self.pass_(message)
        else:
            log.debug(f"Assertion '{operator}' failed: {message or ''}")
            self.fail(
                {
                    "actual": actual,
                    "expected": expected,
                    "message": message,
                    "operator": operator,
                }
            )

    # -- assertions ------------------------------------------------------

    def ok(self, value: Any, message: str | None = None) -> None:
        """Passes when ``value`` is truthy.

        Primitives follow the coercive falsy set (``False``, ``0``, NaN, ``""``,
        ``None``, ``UNDEFINED``); any other value follows ``bool()``, so an
        empty list or dict fails here.
        """
        self._check(is_truthy(value), value, True, message, "==")

    def equal(self, actual: Any, expected: Any, message: str | None = None) -> None:
        """Shallow, coercive equality.

        Example::

            assert_.equal(1, 1, "one is one")
        """
        self._check(loose_equals(actual, expected), actual, expected, message, "==")

    def not_equal(self, actual: Any, expected: Any, message: str | None = None) -> None:
        self._check(not loose_equals(actual, expected), actual, expected, message, "!=")

    def deep_equal(self, actual: Any, expected: Any, message: str | None = None) -> None:
        """Structural equivalence, see :func:`assertkit.deep_equal.deep_equal`."""
        passed = deep_equal(actual, expected, cycle_guard=self._cycle_guard)
        self._check(passed, actual, expected, message, "deepEqual")

    def not_deep_equal(self, actual: Any, expected: Any, message: str | None = None) -> None:
        passed = not deep_equal(actual, expected, cycle_guard=self._cycle_guard)
        self._check(passed, actual, expected, message, "notDeepEqual")

    def strict_equal(self, actual: Any, expected: Any, message: str | None = None) -> None:
        """Equality without coercion.

        Example::

            assert_.strict_equal(None, None, "None is None")
        """
        self._check(strict_equals(actual, expected), actual, expected, message, "===")

    def not_strict_equal(self, actual: Any, expected: Any, message: str | None = None) -> None:
        self._check(not strict_equals(actual, expected), actual, expected, message, "!==")

    def throws(
        self,
        block: Callable[[], Any],
        error: Any = UNDEFINED,
        message: Any = UNDEFINED,
    ) -> None:
        """Assert that calling ``block`` raises.

        Args:
            block: Zero-argument callable expected to raise.
            error: Optional exception class (or tuple of classes) the raised
                exception must be an instance of, or a compiled pattern its
                message must match. Only ``Exception`` subclasses are caught
                unless a ``BaseException`` subclass such as ``SystemExit`` is
                named here. A string here with no ``message`` is
                taken as the message.
            message: Description message.

        Example::

            assert_.throws(lambda: int("x"), ValueError, "ValueError is raised")
            assert_.throws(lambda: int("x"), re.compile("invalid literal"))
        """
        matcher, message = resolve_matcher(error, message)

        threw = False
        exception: BaseException | None = None
        try:
            block()
        except catch_types(matcher) as e:
            threw = True
            exception = e

        if threw and matcher.matches(exception):
            self.pass_(message)
            return

        failure: dict[str, Any] = {"message": message, "operator": "throws"}
        if threw:
            failure["actual"] = exception
        expected = expected_of(matcher)
        if expected is not UNDEFINED:
            failure["expected"] = expected
        log.debug(f"Assertion 'throws' failed: threw={threw}")
        self.fail(failure)

    # camelCase aliases
    notEqual = not_equal
    deepEqual = deep_equal
    notDeepEqual = not_deep_equal
    strictEqual = strict_equal
    notStrictEqual = not_strict_equal
