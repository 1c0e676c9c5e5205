"""Runtime type introspection for checkers.

The only place that inspects arbitrary values. Checkers call these
helpers; reporters never do.

Python rendering of the dynamic-type notions checkers rely on:
  - nil: None
  - error value: BaseException instance
  - uncomparable type: a value that cannot be hashed (list, dict, set,
    bytearray, eq dataclasses without frozen=True, tuples holding those)
  - interface: an abstract class or a runtime-checkable Protocol
"""

from __future__ import annotations

import dataclasses
import inspect
from collections.abc import Mapping, Sequence, Set
from numbers import Number
from types import BuiltinFunctionType, FunctionType, MethodType, ModuleType
from typing import TYPE_CHECKING, Protocol, cast

from suitecheck.domain.exceptions import UncomparableTypeError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

_MISSING = object()

# Sequences compared as opaque values, not element by element
_ATOMIC_SEQUENCES = (str, bytes, bytearray, memoryview, range)

# Values that only equal themselves
_IDENTITY_TYPES = (FunctionType, BuiltinFunctionType, MethodType, ModuleType, type)


# =============================================================================
# Names
# =============================================================================


def strip_locals(qualname: str) -> str:
    """Drop "<locals>" segments from a qualified name.

    Example: "test_x.<locals>.Helper" -> "test_x.Helper"
    """
    return ".".join(part for part in qualname.split(".") if part != "<locals>")


def type_name(tp: type) -> str:
    """Display name of a type: bare for builtins, module-qualified otherwise."""
    qualname = strip_locals(getattr(tp, "__qualname__", tp.__name__))
    module = getattr(tp, "__module__", None)
    if module in (None, "builtins"):
        return qualname
    return f"{module}.{qualname}"


def value_type_name(value: object) -> str:
    """type_name() of value's dynamic type."""
    return type_name(type(value))


# =============================================================================
# Capabilities
# =============================================================================


def is_nil(value: object) -> bool:
    """Nil is None, whatever the declared type."""
    return value is None


def is_error(value: object) -> bool:
    """Error-like values are exception instances."""
    return isinstance(value, BaseException)


def has_str(value: object) -> bool:
    """Whether value has its own string form.

    True for str and for objects whose class (not object) defines
    __str__. Numbers and byte strings do not count.
    """
    if isinstance(value, str):
        return True
    if isinstance(value, (Number, bytes, bytearray)):
        return False
    return any("__str__" in vars(cls) for cls in type(value).__mro__ if cls is not object)


def has_len(value: object) -> bool:
    """Whether value's type defines a length."""
    return hasattr(type(value), "__len__")


def accepts_no_arguments(function: object) -> bool:
    """Whether function can be called with no arguments."""
    if not callable(function):
        return False
    try:
        signature = inspect.signature(function)
    except (TypeError, ValueError):
        # builtins without introspectable signature
        return True
    try:
        signature.bind()
    except TypeError:
        return False
    return True


def is_interface(obj: object) -> bool:
    """Whether obj is a capability set instances can satisfy.

    Accepts abstract classes (inspect.isabstract) and runtime-checkable
    Protocols. Plain Protocols cannot be used with isinstance().
    """
    if not isinstance(obj, type) or obj is Protocol:
        return False
    if getattr(obj, "_is_protocol", False):
        return bool(getattr(obj, "_is_runtime_protocol", False))
    return inspect.isabstract(obj)


def nearest_interface(tp: type) -> type | None:
    """First interface in tp's MRO, tp included."""
    for cls in tp.__mro__:
        if is_interface(cls):
            return cls
    return None


def common_base(types: Iterable[type]) -> type:
    """Most derived class shared by all types (object at worst).

    Args:
        types: Non-empty iterable, first element decides MRO order
    """
    ordered = list(dict.fromkeys(types))
    if not ordered:
        raise ValueError("common_base() needs at least one type")
    for candidate in ordered[0].__mro__:
        if all(issubclass(tp, candidate) for tp in ordered):
            return candidate
    return object


# =============================================================================
# Equality
# =============================================================================


def is_comparable(value: object) -> bool:
    """Whether value supports shallow equality (is hashable)."""
    try:
        hash(value)
    except TypeError:
        return False
    return True


def shallow_equal(a: object, b: object) -> bool:
    """Equality of dynamic type and value.

    Values of different types are never equal. Values of the same
    uncomparable type cannot be compared at all.

    Raises:
        UncomparableTypeError: Both values share an unhashable type
    """
    if type(a) is not type(b):
        return False
    if not is_comparable(a) or not is_comparable(b):
        raise UncomparableTypeError(value_type_name(a))
    return bool(a == b)


def deep_equal(a: object, b: object) -> bool:
    """Structural equality, walking containers and object state.

    Types must match exactly at every level. Cycles are tolerated.
    Never raises: uncomparable leaves and failing __eq__ count as unequal.
    """
    return _deep_equal(a, b, set())


def _deep_equal(a: object, b: object, visited: set[tuple[int, int]]) -> bool:
    if a is b:
        return True
    if type(a) is not type(b):
        return False
    if isinstance(a, _IDENTITY_TYPES):
        return False

    key = (id(a), id(b))
    if key in visited:
        return True

    compare = _structural_comparator(a)
    if compare is None:
        return _plain_equal(a, b)

    visited.add(key)
    return compare(a, b, visited)


def _plain_equal(a: object, b: object) -> bool:
    """== for leaf values. An __eq__ that raises means unequal."""
    try:
        return bool(a == b)
    except Exception:  # noqa: BLE001
        return False


def _structural_comparator(
    value: object,
) -> Callable[[object, object, set[tuple[int, int]]], bool] | None:
    """Pick how two same-typed values are walked. None = plain ==."""
    if isinstance(value, Mapping):
        return _mappings_equal
    if isinstance(value, Sequence) and not isinstance(value, _ATOMIC_SEQUENCES):
        return _sequences_equal
    if isinstance(value, Set):
        return None
    if dataclasses.is_dataclass(value):
        return _dataclasses_equal
    if isinstance(value, BaseException):
        return _exceptions_equal
    if type(value).__eq__ is object.__eq__ and _instance_state(value) is not None:
        return _states_equal
    return None


def _mappings_equal(a: object, b: object, visited: set[tuple[int, int]]) -> bool:
    a = cast("Mapping[object, object]", a)
    b = cast("Mapping[object, object]", b)
    if len(a) != len(b):
        return False
    for key, value in a.items():
        other = b.get(key, _MISSING)
        if other is _MISSING or not _deep_equal(value, other, visited):
            return False
    return True


def _sequences_equal(a: object, b: object, visited: set[tuple[int, int]]) -> bool:
    a = cast("Sequence[object]", a)
    b = cast("Sequence[object]", b)
    if len(a) != len(b):
        return False
    return all(_deep_equal(x, y, visited) for x, y in zip(a, b, strict=True))


def _dataclasses_equal(a: object, b: object, visited: set[tuple[int, int]]) -> bool:
    return all(
        _deep_equal(getattr(a, f.name, _MISSING), getattr(b, f.name, _MISSING), visited)
        for f in dataclasses.fields(a)  # type: ignore[arg-type]
    )


def _exceptions_equal(a: object, b: object, visited: set[tuple[int, int]]) -> bool:
    a = cast("BaseException", a)
    b = cast("BaseException", b)
    if not _deep_equal(a.args, b.args, visited):
        return False
    return _deep_equal(_instance_state(a) or {}, _instance_state(b) or {}, visited)


def _states_equal(a: object, b: object, visited: set[tuple[int, int]]) -> bool:
    return _deep_equal(_instance_state(a), _instance_state(b), visited)


def _instance_state(obj: object) -> dict[str, object] | None:
    """Attribute values from __dict__ and __slots__. None if obj has neither."""
    state: dict[str, object] | None = None
    instance_dict = getattr(obj, "__dict__", None)
    if isinstance(instance_dict, dict):
        state = dict(instance_dict)

    for cls in type(obj).__mro__:
        slots = vars(cls).get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for slot in slots:
            if slot in ("__dict__", "__weakref__"):
                continue
            if state is None:
                state = {}
            state[slot] = getattr(obj, slot, _MISSING)
    return state
