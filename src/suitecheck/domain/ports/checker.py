"""Checker protocol: contract for all checkers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from suitecheck.domain.model.check_result import CheckResult
    from suitecheck.domain.model.checker_info import CheckerInfo


class CheckerProtocol(Protocol):
    """Named, fixed-arity predicate over dynamically-typed values.

    Users extend suitecheck by implementing this Protocol. Built-in
    checkers are not special: same interface, same status.

    Example:
        class IsEven:
            info = CheckerInfo("IsEven", ("value",))

            def check(self, params, names):
                if not isinstance(params[0], int):
                    return CheckResult.usage_error("value must be an int")
                return CheckResult.of(params[0] % 2 == 0)
    """

    @property
    def info(self) -> CheckerInfo:
        """Name and parameter names. Never changes."""
        ...

    def check(self, params: Sequence[object], names: Sequence[str]) -> CheckResult:
        """Evaluate the predicate.

        Args:
            params: One value per info.params entry
            names: Display names, same length as params

        Returns:
            Result; inputs are never mutated, a rewritten view rides on
            the result instead.
        """
        ...
