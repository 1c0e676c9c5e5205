"""Domain exceptions."""

from suitecheck.domain.exceptions.assertion import CheckFailure
from suitecheck.domain.exceptions.base import SuiteCheckError
from suitecheck.domain.exceptions.checker import (
    CheckerArityError,
    UncomparableTypeError,
    UnknownCheckerError,
)
from suitecheck.domain.exceptions.panic import Panic
from suitecheck.domain.exceptions.reporter import ReporterConfigError

__all__ = [
    "CheckFailure",
    "CheckerArityError",
    "Panic",
    "ReporterConfigError",
    "SuiteCheckError",
    "UncomparableTypeError",
    "UnknownCheckerError",
]
