"""Assertion API.

Public exports:
    check: Run a checker, get an outcome with a failure block
    assert_that: Run a checker, raise CheckFailure if it does not hold
    commentf: Lazily formatted comment for failure blocks
    CheckOutcome: Result of check()
    indent: Prefix every line of a text block
"""

from suitecheck.presentation.api._render import indent
from suitecheck.presentation.api.assertions import (
    CheckOutcome,
    Comment,
    assert_that,
    check,
    commentf,
)

__all__ = [
    "CheckOutcome",
    "Comment",
    "assert_that",
    "check",
    "commentf",
    "indent",
]
