"""Not combinator."""

from __future__ import annotations

from typing import TYPE_CHECKING

from suitecheck.application.checkers._base import BaseChecker
from suitecheck.domain.model.check_result import CheckResult

if TYPE_CHECKING:
    from collections.abc import Sequence

    from suitecheck.domain.ports.checker import CheckerProtocol


class Not(BaseChecker):
    """Inverts the result of another checker.

    Usage faults of the wrapped checker pass through untouched, so
    Not(Not(X)) behaves exactly like X. The wrapped checker's rewritten
    view is kept.

    Example:
        assert_that(value, Not(IsNil))
    """

    __slots__ = ("_sub",)

    def __init__(self, checker: CheckerProtocol) -> None:
        """Wrap checker.

        Args:
            checker: Checker to negate
        """
        sub_info = checker.info
        super().__init__(name=f"Not({sub_info.name})", params=sub_info.params)
        self._sub = checker

    @property
    def sub(self) -> CheckerProtocol:
        """The negated checker."""
        return self._sub

    def _check(self, params: Sequence[object], names: Sequence[str]) -> CheckResult:
        result = self._sub.check(params, names)
        if result.error:
            return result
        return CheckResult.of(not result.ok, result.rewrite)
