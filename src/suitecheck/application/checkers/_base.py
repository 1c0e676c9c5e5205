"""Base checker class.

Provides the arity guard of CheckerProtocol.
Concrete checkers inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from suitecheck.domain.exceptions import CheckerArityError
from suitecheck.domain.model.checker_info import CheckerInfo

if TYPE_CHECKING:
    from collections.abc import Sequence

    from suitecheck.domain.model.check_result import CheckResult


class BaseChecker(ABC):
    """Base class for checkers implementing CheckerProtocol.

    Concrete checkers must:
    1. Declare `name` and `params` class attributes (or pass them to
       __init__)
    2. Implement `_check()`, which may assume the arity is right

    Example:
        class IsEvenChecker(BaseChecker):
            name = "IsEven"
            params = ("value",)

            def _check(self, params, names):
                return CheckResult.of(params[0] % 2 == 0)
    """

    __slots__ = ("_info",)

    name: str
    params: tuple[str, ...]

    def __init__(self, name: str | None = None, params: tuple[str, ...] | None = None) -> None:
        """Initialize checker identity.

        Args:
            name: Display name (default: class attribute `name`)
            params: Parameter names (default: class attribute `params`)
        """
        self._info = CheckerInfo(
            name=name if name is not None else type(self).name,
            params=params if params is not None else type(self).params,
        )

    @property
    def info(self) -> CheckerInfo:
        """Name and parameter names."""
        return self._info

    def check(self, params: Sequence[object], names: Sequence[str]) -> CheckResult:
        """Evaluate the checker.

        Raises:
            CheckerArityError: params or names do not match info.params
        """
        want = self._info.arity
        for supplied in (params, names):
            if len(supplied) != want:
                raise CheckerArityError(self._info.name, want, len(supplied))
        return self._check(params, names)

    @abstractmethod
    def _check(self, params: Sequence[object], names: Sequence[str]) -> CheckResult:
        """Checker body. Arity already validated."""

    def __repr__(self) -> str:
        """Checker display name."""
        return self._info.name
