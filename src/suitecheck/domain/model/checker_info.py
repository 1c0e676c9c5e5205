"""Checker identity value object."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CheckerInfo:
    """Display name and ordered parameter names of a checker.

    Immutable: a checker's info never changes after construction.

    Attributes:
        name: Display name, may encode a combinator (e.g. "Not(IsNil)")
        params: Parameter display names, e.g. ("obtained", "expected")
    """

    name: str
    params: tuple[str, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")
        if not self.params:
            raise ValueError(f"checker {self.name} must declare at least one param")
        if any(not p for p in self.params):
            raise ValueError(f"checker {self.name} has an empty param name")

    @property
    def arity(self) -> int:
        """Number of params the checker expects."""
        return len(self.params)
