"""Outcome of a single checker evaluation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Rewrite:
    """Rewritten view of a checker's inputs.

    Checkers return this instead of mutating their arguments. It lets a
    caller show the diagnosable form of a value (an error's message, a
    panic payload) under a better slot name.

    Attributes:
        params: Values to display, same length as names
        names: Slot names to display
    """

    params: tuple[object, ...]
    names: tuple[str, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if len(self.params) != len(self.names):
            raise ValueError(
                f"params and names differ in length: {len(self.params)} != {len(self.names)}"
            )

    @classmethod
    def replace_first(
        cls,
        params: Sequence[object],
        names: Sequence[str],
        value: object,
        name: str,
    ) -> Rewrite:
        """Copy inputs with slot 0 replaced."""
        return cls(
            params=(value, *tuple(params)[1:]),
            names=(name, *tuple(names)[1:]),
        )


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Result of Checker.check().

    ok=False with an empty error is a predicate failure.
    ok=False with a non-empty error is a usage fault (bad argument shape
    or type, or a failed dependency such as regex compilation).

    Attributes:
        ok: Whether the check held
        error: Usage-fault diagnostic, "" otherwise
        rewrite: Rewritten inputs for failure rendering, None if untouched
    """

    ok: bool
    error: str = ""
    rewrite: Rewrite | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.ok and self.error:
            raise ValueError(f"successful result must not carry an error: {self.error!r}")

    @classmethod
    def passed(cls, rewrite: Rewrite | None = None) -> CheckResult:
        """Check held."""
        return cls(ok=True, rewrite=rewrite)

    @classmethod
    def failed(cls, rewrite: Rewrite | None = None) -> CheckResult:
        """Check did not hold (predicate failure)."""
        return cls(ok=False, rewrite=rewrite)

    @classmethod
    def of(cls, ok: bool, rewrite: Rewrite | None = None) -> CheckResult:
        """Result from a plain boolean."""
        return cls(ok=bool(ok), rewrite=rewrite)

    @classmethod
    def usage_error(cls, message: str, rewrite: Rewrite | None = None) -> CheckResult:
        """Check could not be evaluated as asked."""
        if not message:
            raise ValueError("usage error message must not be empty")
        return cls(ok=False, error=message, rewrite=rewrite)

    def view(
        self,
        params: Sequence[object],
        names: Sequence[str],
    ) -> tuple[tuple[object, ...], tuple[str, ...]]:
        """Params and names to display, rewritten if the checker asked to."""
        if self.rewrite is not None:
            return self.rewrite.params, self.rewrite.names
        return tuple(params), tuple(names)

    def as_tuple(self) -> tuple[bool, str]:
        """(ok, error) pair."""
        return self.ok, self.error
