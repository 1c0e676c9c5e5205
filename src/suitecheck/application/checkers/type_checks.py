"""Type and capability checkers."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from suitecheck.application.checkers._base import BaseChecker
from suitecheck.domain.model.check_result import CheckResult
from suitecheck.infrastructure.reflection import is_interface, is_nil

if TYPE_CHECKING:
    from collections.abc import Sequence


class FitsTypeOfChecker(BaseChecker):
    """Passes if obtained has exactly the dynamic type of sample.

    Subclasses do not fit: bool does not fit a sample of 0.

    Example:
        assert_that(value, FitsTypeOf, "")
    """

    __slots__ = ()

    name = "FitsTypeOf"
    params = ("obtained", "sample")

    def _check(self, params: Sequence[object], names: Sequence[str]) -> CheckResult:
        obtained, sample = params
        if is_nil(sample):
            return CheckResult.usage_error("Invalid sample value")
        if is_nil(obtained):
            return CheckResult.failed()
        return CheckResult.of(type(obtained) is type(sample))


class ImplementsChecker(BaseChecker):
    """Passes if obtained satisfies an interface.

    The interface is an abstract class or a runtime-checkable Protocol.

    Example:
        assert_that(store, Implements, collections.abc.MutableMapping)
    """

    __slots__ = ()

    name = "Implements"
    params = ("obtained", "ifaceptr")

    def _check(self, params: Sequence[object], names: Sequence[str]) -> CheckResult:
        obtained, iface = params
        if not is_interface(iface):
            return CheckResult.usage_error("ifaceptr should be an abstract class or runtime-checkable Protocol")
        if is_nil(obtained):
            return CheckResult.failed()
        return CheckResult.of(isinstance(obtained, cast("type", iface)))


FitsTypeOf = FitsTypeOfChecker()
Implements = ImplementsChecker()
