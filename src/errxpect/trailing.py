"""Consistency check for multi-value results with a trailing error."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Sequence

from errxpect.engine.base import Matcher
from errxpect.zero import is_zero

logger = logging.getLogger(__name__)


@dataclass
class TrailingCheck:
    """Result of vetting a multi-value result.

    Attributes:
        passed: Whether the values are consistent with their trailing error.
        message: Diagnostic for a failed check, empty otherwise.
        index: 0-based position of the first offending non-error value.
    """

    passed: bool
    message: str = ""
    index: int | None = None


def check_trailing_error(values: Sequence[Any]) -> TrailingCheck:
    """Vet *values*, whose last element is the error slot.

    A zero trailing error allows the other values to be anything. A non-zero
    trailing error requires every preceding value to be zero; the first value
    breaking this rule is reported.
    """
    if len(values) == 0:
        return TrailingCheck(passed=False, message="no return values")

    status = values[-1]
    if is_zero(status):
        return TrailingCheck(passed=True)

    for idx, actual in enumerate(values[:-1]):
        if not is_zero(actual):
            logger.debug(
                f"Non-zero value at index {idx} alongside error {status!r}"
            )
            return TrailingCheck(
                passed=False,
                message=(
                    "Unexpected non-None/non-zero actual non-error argument "
                    f"at index {idx + 1}:\n\t<{type(actual).__name__}>: {actual!r}"
                ),
                index=idx,
            )
    return TrailingCheck(passed=True)


class _TrailingErrorMatcher(Matcher):
    def __init__(self, values: Sequence[Any]):
        self.values = values

    def match(self, actual: Any) -> bool:
        return check_trailing_error(self.values).passed

    def failure_message(self, actual: Any) -> str:
        return check_trailing_error(self.values).message

    def negated_failure_message(self, actual: Any) -> str:
        return "Expected the return values to be inconsistent with their trailing error"


def have_only_trailing_error(values: Sequence[Any]) -> Matcher:
    """Matcher form of check_trailing_error() for reporting through the engine."""
    return _TrailingErrorMatcher(values)
