"""suitecheck - checker engine and concurrent result reporters for suite-based tests."""

__version__ = "0.1.0"

from suitecheck.application.checkers import (
    Contains,
    DeepContains,
    DeepEquals,
    Equals,
    ErrorMatches,
    FitsTypeOf,
    HasLen,
    Implements,
    IsNil,
    Matches,
    Not,
    NotNil,
    PanicMatches,
    Panics,
)
from suitecheck.application.reporters import SubunitReporter, TextReporter, create_reporter
from suitecheck.domain.exceptions import CheckFailure, Panic
from suitecheck.presentation.api import assert_that, check, commentf

__all__ = [
    "CheckFailure",
    "Contains",
    "DeepContains",
    "DeepEquals",
    "Equals",
    "ErrorMatches",
    "FitsTypeOf",
    "HasLen",
    "Implements",
    "IsNil",
    "Matches",
    "Not",
    "NotNil",
    "Panic",
    "PanicMatches",
    "Panics",
    "SubunitReporter",
    "TextReporter",
    "__version__",
    "assert_that",
    "check",
    "commentf",
    "create_reporter",
]
