"""Length checker."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from suitecheck.application.checkers._base import BaseChecker
from suitecheck.domain.model.check_result import CheckResult
from suitecheck.infrastructure.reflection import has_len

if TYPE_CHECKING:
    from collections.abc import Sequence, Sized


class HasLenChecker(BaseChecker):
    """Passes if obtained has length n.

    Example:
        assert_that(items, HasLen, 5)
    """

    __slots__ = ()

    name = "HasLen"
    params = ("obtained", "n")

    def _check(self, params: Sequence[object], names: Sequence[str]) -> CheckResult:
        obtained, n = params
        if isinstance(n, bool) or not isinstance(n, int):
            return CheckResult.usage_error("n must be an int")
        if not has_len(obtained):
            return CheckResult.usage_error("obtained value type has no length")
        return CheckResult.of(len(cast("Sized", obtained)) == n)


HasLen = HasLenChecker()
