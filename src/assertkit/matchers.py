"""Matchers for the error argument of ``Assert.throws``."""

from __future__ import annotations

import inspect
import re
from dataclasses import dataclass
from typing import Any, Union

from assertkit.types import UNDEFINED


def exception_message(exc: BaseException) -> str:
    message = getattr(exc, "message", None)
    if isinstance(message, str):
        return message
    return str(exc)


@dataclass(frozen=True)
class NoMatcher:
    """Any raised exception passes."""

    def matches(self, exc: BaseException) -> bool:
        return True


@dataclass(frozen=True)
class MessageOnly:
    """A string given where a matcher was expected; it is the assertion message."""

    message: str

    def matches(self, exc: BaseException) -> bool:
        return True


@dataclass(frozen=True)
class PatternMatcher:
    pattern: re.Pattern
    text: str | None = None

    def matches(self, exc: BaseException) -> bool:
        return self.pattern.search(exception_message(exc)) is not None


@dataclass(frozen=True)
class TypeMatcher:
    type: type | tuple[type, ...]

    def matches(self, exc: BaseException) -> bool:
        return isinstance(exc, self.type)


Matcher = Union[NoMatcher, MessageOnly, PatternMatcher, TypeMatcher]


def _is_exception_type(value: Any) -> bool:
    if isinstance(value, tuple):
        return bool(value) and all(_is_exception_type(v) for v in value)
    return inspect.isclass(value) and issubclass(value, BaseException)


def resolve_matcher(error: Any = UNDEFINED, message: Any = UNDEFINED) -> tuple[Matcher, str | None]:
    """Resolve the optional ``(error, message)`` pair of ``throws``.

    Returns the matcher and the assertion message. A string ``error`` with
    no ``message`` is the message itself; with a message it must be
    contained in the raised exception's message.
    """
    if message is UNDEFINED:
        message = None

    if error is UNDEFINED or error is None:
        return NoMatcher(), message
    if isinstance(error, str):
        if message is None:
            return MessageOnly(error), error
        return PatternMatcher(re.compile(re.escape(error)), text=error), message
    if isinstance(error, re.Pattern):
        return PatternMatcher(error), message
    if _is_exception_type(error):
        return TypeMatcher(error), message
    raise TypeError(
        f"throws() expects an exception type, a compiled pattern or a string, got {type(error).__name__}"
    )


def expected_of(matcher: Matcher) -> Any:
    """The value reported as ``expected`` when the matcher rejects, or ``UNDEFINED``."""
    if isinstance(matcher, PatternMatcher):
        return matcher.pattern if matcher.text is None else matcher.text
    if isinstance(matcher, TypeMatcher):
        return matcher.type
    return UNDEFINED


def catch_types(matcher: Matcher) -> tuple[type[BaseException], ...]:
    """Exception classes ``throws`` catches around its block.

    ``Exception`` always, plus any ``BaseException`` subclass (``SystemExit``,
    ``KeyboardInterrupt``, ...) the matcher names explicitly.
    """
    if not isinstance(matcher, TypeMatcher):
        return (Exception,)
    types = matcher.type if isinstance(matcher.type, tuple) else (matcher.type,)
    extra = tuple(t for t in types if not issubclass(t, Exception))
    return (Exception,) + extra
