"""Reporter configuration exceptions."""

from suitecheck.domain.exceptions.base import SuiteCheckError


class ReporterConfigError(SuiteCheckError, ValueError):
    """Invalid reporter configuration.

    FAIL-FIRST: raised when ReporterConfig is constructed.

    Attributes:
        field: Name of the invalid field
        reason: Why the value is invalid
    """

    def __init__(self, field: str, reason: str) -> None:
        if not field:
            raise ValueError("field must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.field = field
        self.reason = reason
        super().__init__(f"Invalid reporter config '{field}': {reason}")
