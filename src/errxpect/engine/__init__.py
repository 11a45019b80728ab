"""Matcher-based assertion engine."""

from errxpect.engine.base import Failure, Matcher, MatcherError
from errxpect.engine.expect import (
    Expectation,
    collect_failures,
    configure,
    expect,
    expect_with_offset,
    intercept_failures,
    raise_failure,
    use_fail_handler,
)
from errxpect.engine.matchers import (
    as_matcher,
    be_none,
    equal,
    have_occurred,
    match_error,
    not_,
    satisfy,
    succeed,
)

__all__ = [
    "Expectation",
    "Failure",
    "Matcher",
    "MatcherError",
    "as_matcher",
    "be_none",
    "collect_failures",
    "configure",
    "equal",
    "expect",
    "expect_with_offset",
    "have_occurred",
    "intercept_failures",
    "match_error",
    "not_",
    "raise_failure",
    "satisfy",
    "succeed",
    "use_fail_handler",
]
