"""Equality checkers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from suitecheck.application.checkers._base import BaseChecker
from suitecheck.domain.exceptions import UncomparableTypeError
from suitecheck.domain.model.check_result import CheckResult
from suitecheck.infrastructure.reflection import deep_equal, shallow_equal

if TYPE_CHECKING:
    from collections.abc import Sequence


class EqualsChecker(BaseChecker):
    """Passes if obtained and expected share a type and compare equal.

    1 and 1.0 are not equal (different types). Unhashable values such as
    lists or bytearrays cannot be compared; that is a usage fault.

    Example:
        assert_that(result, Equals, 42)
    """

    __slots__ = ()

    name = "Equals"
    params = ("obtained", "expected")

    def _check(self, params: Sequence[object], names: Sequence[str]) -> CheckResult:
        try:
            return CheckResult.of(shallow_equal(params[0], params[1]))
        except UncomparableTypeError as exc:
            return CheckResult.usage_error(str(exc))


class DeepEqualsChecker(BaseChecker):
    """Passes if obtained and expected are structurally equal.

    Walks containers, dataclasses, exceptions and object state.
    Never faults.

    Example:
        assert_that(value, DeepEquals, [1, 2, 3])
    """

    __slots__ = ()

    name = "DeepEquals"
    params = ("obtained", "expected")

    def _check(self, params: Sequence[object], names: Sequence[str]) -> CheckResult:
        return CheckResult.of(deep_equal(params[0], params[1]))


Equals = EqualsChecker()
DeepEquals = DeepEqualsChecker()
