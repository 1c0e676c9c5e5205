"""Membership checkers.

Supported containers:
  - str: substring test, element must be a str
  - Mapping: membership over values, never keys
  - Sequence / Set (list, tuple, range, bytes, deque, set, frozenset...)

Element types are inferred from the items: the most derived class they
share. If that class is (or derives from) an interface, the element must
implement it. Otherwise a homogeneous container wants an element of
exactly that type and a mixed one an instance of the shared base.
Empty containers and containers of unrelated types accept any element.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence, Set
from typing import TYPE_CHECKING

from suitecheck.application.checkers._base import BaseChecker
from suitecheck.domain.exceptions import UncomparableTypeError
from suitecheck.domain.model.check_result import CheckResult
from suitecheck.infrastructure.reflection import (
    common_base,
    deep_equal,
    nearest_interface,
    shallow_equal,
    type_name,
    value_type_name,
)

if TYPE_CHECKING:
    from collections.abc import Callable


def container_items(container: object) -> tuple[object, ...] | None:
    """Items a membership test looks at. None if not a container."""
    if isinstance(container, Mapping):
        return tuple(container.values())
    if isinstance(container, (Sequence, Set)):
        return tuple(container)
    return None


def element_type_error(items: tuple[object, ...], elem: object) -> str:
    """Why elem cannot be a member of items, "" if it can."""
    if not items:
        return ""

    item_types = [type(item) for item in items]
    base = common_base(item_types)
    contract = nearest_interface(base)
    if contract is not None:
        if isinstance(elem, contract):
            return ""
        return (
            f"container has items of interface type {type_name(contract)} "
            "but expected element does not implement it"
        )

    if base is object:
        return ""
    homogeneous = len(set(item_types)) == 1
    fits = type(elem) is base if homogeneous else isinstance(elem, base)
    if fits:
        return ""
    return f"container has items of type {type_name(base)} but expected element is a {value_type_name(elem)}"


def _contains(
    container: object,
    elem: object,
    equal: Callable[[object, object], bool],
) -> CheckResult:
    if isinstance(container, str):
        if not isinstance(elem, str):
            return CheckResult.usage_error(f"element is a {value_type_name(elem)} but expected a str")
        return CheckResult.of(str(elem) in str(container))

    items = container_items(container)
    if items is None:
        return CheckResult.usage_error(f"{value_type_name(container)} is not a supported container")

    mismatch = element_type_error(items, elem)
    if mismatch:
        return CheckResult.usage_error(mismatch)

    try:
        return CheckResult.of(any(equal(item, elem) for item in items))
    except UncomparableTypeError as exc:
        return CheckResult.usage_error(str(exc))


class ContainsChecker(BaseChecker):
    """Passes if container holds an item equal (Equals) to elem.

    Example:
        assert_that(["a", "b"], Contains, "a")
        assert_that({"k": 1}, Contains, 1)  # values, not keys
    """

    __slots__ = ()

    name = "Contains"
    params = ("container", "elem")

    def _check(self, params: Sequence[object], names: Sequence[str]) -> CheckResult:
        return _contains(params[0], params[1], shallow_equal)


class DeepContainsChecker(BaseChecker):
    """Passes if container holds an item deep-equal (DeepEquals) to elem.

    Works for unhashable items where Contains faults.
    """

    __slots__ = ()

    name = "DeepContains"
    params = ("container", "elem")

    def _check(self, params: Sequence[object], names: Sequence[str]) -> CheckResult:
        return _contains(params[0], params[1], deep_equal)


Contains = ContainsChecker()
DeepContains = DeepContainsChecker()
