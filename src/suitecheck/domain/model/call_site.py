"""Call site value object for diagnostics."""

from dataclasses import dataclass

UNKNOWN_PATH = "<unknown path>"
UNKNOWN_FUNCTION = "<unknown function>"


@dataclass(frozen=True, slots=True)
class CallSite:
    """Where a test method lives, as shown in report headers.

    Attributes:
        path: Source path with line, e.g. "tests/test_x.py:42"
        function: Display name, e.g. "MySuite.test_bar"
    """

    path: str
    function: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.path:
            raise ValueError("path must not be empty")
        if not self.function:
            raise ValueError("function must not be empty")

    @classmethod
    def unknown(cls) -> "CallSite":
        """Placeholder for tokens that cannot be introspected."""
        return cls(path=UNKNOWN_PATH, function=UNKNOWN_FUNCTION)

    def __str__(self) -> str:
        """Format as path: function."""
        return f"{self.path}: {self.function}"
