"""Assert on the trailing error of multi-value results."""

from errxpect.assertion import ResultAssertion, errxpect, errxpect_with_offset
from errxpect.engine import (
    be_none,
    equal,
    have_occurred,
    intercept_failures,
    match_error,
    not_,
    satisfy,
    succeed,
)
from errxpect.trailing import TrailingCheck, check_trailing_error, have_only_trailing_error
from errxpect.zero import is_zero, register_zero

__all__ = [
    "ResultAssertion",
    "TrailingCheck",
    "be_none",
    "check_trailing_error",
    "equal",
    "errxpect",
    "errxpect_with_offset",
    "have_occurred",
    "have_only_trailing_error",
    "intercept_failures",
    "is_zero",
    "match_error",
    "not_",
    "register_zero",
    "satisfy",
    "succeed",
]
