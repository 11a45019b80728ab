"""Base data structures for the assertion engine."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


class MatcherError(ValueError):
    """Raised by a matcher that cannot judge the value it was given."""


@dataclass
class Failure:
    """A single reported assertion failure.

    Attributes:
        message: Full failure text, including any description prefix.
        location: ``file:line`` of the blamed call frame, or "" if unknown.
    """

    message: str
    location: str = ""

    def __str__(self) -> str:
        if not self.location:
            return self.message
        return f"{self.message}\n\n  at {self.location}"


class Matcher(ABC):
    """Predicate over a single value, able to explain its verdict."""

    @abstractmethod
    def match(self, actual: Any) -> bool:
        """Return whether *actual* is accepted; raise MatcherError if it can't be judged."""

    @abstractmethod
    def failure_message(self, actual: Any) -> str:
        """Explain why *actual* was rejected."""

    @abstractmethod
    def negated_failure_message(self, actual: Any) -> str:
        """Explain why *actual* was accepted when rejection was expected."""


def format_object(value: Any) -> str:
    return f"<{type(value).__name__}>: {value!r}"
