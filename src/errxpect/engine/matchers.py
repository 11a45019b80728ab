"""Stock matchers and the negation transform."""

from __future__ import annotations

from typing import Any, Callable

from errxpect.engine.base import Matcher, MatcherError, format_object


class _Not(Matcher):
    def __init__(self, matcher: Matcher):
        self.matcher = matcher

    def match(self, actual: Any) -> bool:
        return not self.matcher.match(actual)

    def failure_message(self, actual: Any) -> str:
        return self.matcher.negated_failure_message(actual)

    def negated_failure_message(self, actual: Any) -> str:
        return self.matcher.failure_message(actual)


def not_(matcher: Matcher | Callable[[Any], bool]) -> Matcher:
    """Wrap *matcher* so that it accepts exactly when the original rejects."""
    return _Not(as_matcher(matcher))


class _Satisfy(Matcher):
    def __init__(self, predicate: Callable[[Any], bool], description: str | None):
        self.predicate = predicate
        self.description = description or getattr(
            predicate, "__name__", repr(predicate)
        )

    def match(self, actual: Any) -> bool:
        return bool(self.predicate(actual))

    def failure_message(self, actual: Any) -> str:
        return f"Expected\n    {format_object(actual)}\nto satisfy {self.description}"

    def negated_failure_message(self, actual: Any) -> str:
        return (
            f"Expected\n    {format_object(actual)}\nnot to satisfy {self.description}"
        )


def satisfy(predicate: Callable[[Any], bool], description: str | None = None) -> Matcher:
    return _Satisfy(predicate, description)


def as_matcher(obj: Matcher | Callable[[Any], bool]) -> Matcher:
    """Return *obj* as a Matcher, wrapping plain callables with satisfy()."""
    if isinstance(obj, Matcher):
        return obj
    if callable(obj):
        return satisfy(obj)
    raise TypeError(f"Expected a Matcher or a callable, got {type(obj).__name__}")


class _Succeed(Matcher):
    def match(self, actual: Any) -> bool:
        if actual is None:
            return True
        if isinstance(actual, BaseException):
            return False
        raise MatcherError(
            f"Expected an error-type.  Got:\n    {format_object(actual)}"
        )

    def failure_message(self, actual: Any) -> str:
        return f"Expected success, but got an error:\n    {format_object(actual)}"

    def negated_failure_message(self, actual: Any) -> str:
        return "Expected failure, but got no error."


def succeed() -> Matcher:
    """Accept a ``None`` status; reject an exception instance."""
    return _Succeed()


class _HaveOccurred(Matcher):
    def match(self, actual: Any) -> bool:
        if actual is None:
            return False
        if isinstance(actual, BaseException):
            return True
        raise MatcherError(
            f"Expected an error-type.  Got:\n    {format_object(actual)}"
        )

    def failure_message(self, actual: Any) -> str:
        return f"Expected an error to have occurred.  Got:\n    {format_object(actual)}"

    def negated_failure_message(self, actual: Any) -> str:
        return f"Unexpected error:\n    {format_object(actual)}"


def have_occurred() -> Matcher:
    return _HaveOccurred()


class _MatchError(Matcher):
    def __init__(self, expected: type[BaseException] | BaseException | str):
        self.expected = expected

    def match(self, actual: Any) -> bool:
        if not isinstance(actual, BaseException):
            raise MatcherError(
                f"Expected an error, got:\n    {format_object(actual)}"
            )
        if isinstance(self.expected, type):
            return isinstance(actual, self.expected)
        if isinstance(self.expected, str):
            return str(actual) == self.expected
        return actual is self.expected or (
            type(actual) is type(self.expected) and actual.args == self.expected.args
        )

    def failure_message(self, actual: Any) -> str:
        return (
            f"Expected\n    {format_object(actual)}\n"
            f"to match error\n    {self.expected!r}"
        )

    def negated_failure_message(self, actual: Any) -> str:
        return (
            f"Expected\n    {format_object(actual)}\n"
            f"not to match error\n    {self.expected!r}"
        )


def match_error(expected: type[BaseException] | BaseException | str) -> Matcher:
    """Match an exception by class, by message text, or by equal type and args."""
    return _MatchError(expected)


class _Equal(Matcher):
    def __init__(self, expected: Any):
        self.expected = expected

    def match(self, actual: Any) -> bool:
        return bool(actual == self.expected)

    def failure_message(self, actual: Any) -> str:
        return (
            f"Expected\n    {format_object(actual)}\n"
            f"to equal\n    {format_object(self.expected)}"
        )

    def negated_failure_message(self, actual: Any) -> str:
        return (
            f"Expected\n    {format_object(actual)}\n"
            f"not to equal\n    {format_object(self.expected)}"
        )


def equal(expected: Any) -> Matcher:
    return _Equal(expected)


class _BeNone(Matcher):
    def match(self, actual: Any) -> bool:
        return actual is None

    def failure_message(self, actual: Any) -> str:
        return f"Expected\n    {format_object(actual)}\nto be None"

    def negated_failure_message(self, actual: Any) -> str:
        return "Expected a value other than None"


def be_none() -> Matcher:
    return _BeNone()
