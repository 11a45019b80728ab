"""Assertions on the trailing error of a multi-value result."""

from __future__ import annotations

import logging
from typing import Any, Callable

from errxpect.engine import Matcher, expect_with_offset, not_
from errxpect.trailing import have_only_trailing_error

logger = logging.getLogger(__name__)

MatcherLike = Matcher | Callable[[Any], bool]


class ResultAssertion:
    """Wraps the values returned by one call and asserts on the last one.

    Before the caller's matcher runs, the values are vetted: when the
    trailing error is set, all other values must be zero. Usage::

        errxpect(*load("cfg.yaml")).to(have_occurred())
    """

    def __init__(self, values: tuple[Any, ...], offset: int = 0):
        self.values = values
        self.offset = offset

    def with_offset(self, offset: int) -> ResultAssertion:
        """Blame the frame *offset* levels above the assertion's caller."""
        self.offset = offset
        return self

    def _evaluate(self, matcher: MatcherLike, invert: bool, *description: Any) -> bool:
        if not expect_with_offset(2 + self.offset, self.values).to(
            have_only_trailing_error(self.values), *description
        ):
            # a set error alongside non-zero values; never consult the matcher
            logger.debug(f"Rejected inconsistent result {self.values!r}")
            return False
        status = self.values[-1]
        if invert:
            return expect_with_offset(2 + self.offset, status).to(
                not_(matcher), *description
            )
        return expect_with_offset(2 + self.offset, status).to(matcher, *description)

    def to(self, matcher: MatcherLike, *description: Any) -> bool:
        return self._evaluate(matcher, False, *description)

    def to_not(self, matcher: MatcherLike, *description: Any) -> bool:
        return self._evaluate(matcher, True, *description)

    def not_to(self, matcher: MatcherLike, *description: Any) -> bool:
        return self._evaluate(matcher, True, *description)

    def should(self, matcher: MatcherLike, *description: Any) -> bool:
        return self._evaluate(matcher, False, *description)

    def should_not(self, matcher: MatcherLike, *description: Any) -> bool:
        return self._evaluate(matcher, True, *description)


def errxpect(*values: Any) -> ResultAssertion:
    """Assert on the trailing error of *values*::

        errxpect(*parse_port("http")).to(have_occurred())
    """
    return ResultAssertion(values)


def errxpect_with_offset(offset: int, *values: Any) -> ResultAssertion:
    """Like errxpect(), blaming the frame *offset* levels further up.

    Useful in helper functions so that failures point at the test line
    calling the helper rather than at the helper itself.
    """
    return ResultAssertion(values, offset=offset)
