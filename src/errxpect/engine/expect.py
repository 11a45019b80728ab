"""Offset-aware expectations and failure reporting."""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any, Callable, Iterator

from errxpect.engine.base import Failure, Matcher, MatcherError
from errxpect.engine.matchers import as_matcher

logger = logging.getLogger(__name__)

FailHandler = Callable[[Failure], None]


@dataclass
class EngineSettings:
    show_location: bool = True
    description_separator: str = "\n"


_settings = EngineSettings()


def configure(show_location: bool = True, description_separator: str = "\n") -> None:
    """Set process-wide formatting defaults for reported failures."""
    _settings.show_location = show_location
    _settings.description_separator = description_separator


def raise_failure(failure: Failure) -> None:
    """Default fail handler: raise the failure as an AssertionError."""
    raise AssertionError(str(failure))


def collect_failures(sink: list[Failure]) -> FailHandler:
    """Return a fail handler that appends every failure to *sink*."""

    def _collect(failure: Failure) -> None:
        logger.warning(f"Collected failure at {failure.location or '<unknown>'}")
        sink.append(failure)

    return _collect


_fail_handler: ContextVar[FailHandler] = ContextVar(
    "errxpect_fail_handler", default=raise_failure
)


@contextmanager
def use_fail_handler(handler: FailHandler) -> Iterator[FailHandler]:
    """Install *handler* for the current context until the block exits."""
    token = _fail_handler.set(handler)
    try:
        yield handler
    finally:
        _fail_handler.reset(token)


def intercept_failures(fn: Callable[[], Any]) -> list[str]:
    """Run *fn* and return the messages of all failures it reported.

    Failures are collected instead of raised, so every assertion in *fn*
    runs to completion.
    """
    failures: list[Failure] = []
    with use_fail_handler(collect_failures(failures)):
        fn()
    return [failure.message for failure in failures]


def format_description(description: tuple[Any, ...]) -> str:
    """Render optional description arguments.

    One callable is invoked, a single value is converted with ``str``, and
    several values are treated as a ``%``-format string and its arguments,
    or joined with spaces when they don't fit that format.
    """
    if not description:
        return ""
    if len(description) == 1:
        first = description[0]
        if callable(first):
            return str(first())
        return str(first)
    try:
        return str(description[0]) % tuple(description[1:])
    except (TypeError, ValueError):
        # format and arguments disagree; don't mask the failure being reported
        return " ".join(str(arg) for arg in description)


def _caller_location(depth: int) -> str:
    try:
        frame = sys._getframe(depth + 1)
    except ValueError:
        return ""
    return f"{frame.f_code.co_filename}:{frame.f_lineno}"


class Expectation:
    """Applies matchers to one captured value and reports the outcome."""

    def __init__(self, actual: Any, location: str = ""):
        self.actual = actual
        self.location = location

    def to(self, matcher: Matcher | Callable[[Any], bool], *description: Any) -> bool:
        matcher = as_matcher(matcher)
        try:
            accepted = matcher.match(self.actual)
        except MatcherError as exc:
            return self._fail(str(exc), description)
        if accepted:
            return True
        return self._fail(matcher.failure_message(self.actual), description)

    def to_not(
        self, matcher: Matcher | Callable[[Any], bool], *description: Any
    ) -> bool:
        matcher = as_matcher(matcher)
        try:
            accepted = matcher.match(self.actual)
        except MatcherError as exc:
            return self._fail(str(exc), description)
        if not accepted:
            return True
        return self._fail(matcher.negated_failure_message(self.actual), description)

    not_to = to_not
    should = to
    should_not = to_not

    def _fail(self, message: str, description: tuple[Any, ...]) -> bool:
        prefix = format_description(description)
        if prefix:
            message = f"{prefix}{_settings.description_separator}{message}"
        location = self.location if _settings.show_location else ""
        logger.info(f"Assertion failed at {location or '<unknown>'}")
        _fail_handler.get()(Failure(message=message, location=location))
        return False


def expect_with_offset(offset: int, actual: Any) -> Expectation:
    """Start an expectation blaming the frame *offset* levels above the caller."""
    return Expectation(actual, location=_caller_location(offset + 1))


def expect(actual: Any) -> Expectation:
    return Expectation(actual, location=_caller_location(1))
