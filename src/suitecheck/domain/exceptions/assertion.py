"""Assertion failure exception."""

from suitecheck.domain.exceptions.base import SuiteCheckError


class CheckFailure(SuiteCheckError, AssertionError):
    """A checker did not hold inside assert_that().

    Subclasses AssertionError so pytest reports it as a plain failure.

    Attributes:
        checker_name: Name of the checker that failed
        diagnostic: Rendered failure block (params, comment, usage fault)
    """

    def __init__(self, checker_name: str, diagnostic: str) -> None:
        if not checker_name:
            raise ValueError("checker_name must not be empty")

        self.checker_name = checker_name
        self.diagnostic = diagnostic
        super().__init__(f"{checker_name} check failed:\n{diagnostic}")
