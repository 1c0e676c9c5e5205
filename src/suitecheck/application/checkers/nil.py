"""Nil checkers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from suitecheck.application.checkers._base import BaseChecker
from suitecheck.domain.model.check_result import CheckResult
from suitecheck.infrastructure.reflection import is_nil

if TYPE_CHECKING:
    from collections.abc import Sequence


class IsNilChecker(BaseChecker):
    """Passes if value is nil (None)."""

    __slots__ = ()

    name = "IsNil"
    params = ("value",)

    def _check(self, params: Sequence[object], names: Sequence[str]) -> CheckResult:
        return CheckResult.of(is_nil(params[0]))


class NotNilChecker(BaseChecker):
    """Passes if value is not nil. Same as Not(IsNil), clearer name."""

    __slots__ = ()

    name = "NotNil"
    params = ("value",)

    def _check(self, params: Sequence[object], names: Sequence[str]) -> CheckResult:
        return CheckResult.of(not is_nil(params[0]))


IsNil = IsNilChecker()
NotNil = NotNilChecker()
