"""Tests for FitsTypeOf and Implements."""

from abc import ABC, abstractmethod
from collections.abc import Sized
from typing import Protocol, runtime_checkable

from suitecheck.application.checkers import FitsTypeOf, Implements
from tests.factories import run_checker


class Animal(ABC):
    @abstractmethod
    def sound(self) -> str: ...


class Dog(Animal):
    def sound(self) -> str:
        return "woof"


class Tree:
    pass


@runtime_checkable
class Describable(Protocol):
    def describe(self) -> str: ...


class Opaque(Protocol):
    def describe(self) -> str: ...


class Report:
    def describe(self) -> str:
        return "report"


class TestFitsTypeOf:
    """Tests for FitsTypeOf."""

    def test_info(self) -> None:
        """Name and params."""
        assert FitsTypeOf.info.name == "FitsTypeOf"
        assert FitsTypeOf.info.params == ("obtained", "sample")

    def test_same_type(self) -> None:
        """Exact dynamic type matches."""
        assert run_checker(FitsTypeOf, 1, 0).as_tuple() == (True, "")
        assert run_checker(FitsTypeOf, "a", "").as_tuple() == (True, "")
        assert run_checker(FitsTypeOf, Dog(), Dog()).as_tuple() == (True, "")

    def test_other_type(self) -> None:
        """Different types fail."""
        assert run_checker(FitsTypeOf, 1, "").as_tuple() == (False, "")
        assert run_checker(FitsTypeOf, 1.0, 0).as_tuple() == (False, "")

    def test_subclass_does_not_fit(self) -> None:
        """bool is not int for this check."""
        assert run_checker(FitsTypeOf, True, 0).as_tuple() == (False, "")

    def test_none_obtained(self) -> None:
        """None never fits."""
        assert run_checker(FitsTypeOf, None, 0).as_tuple() == (False, "")

    def test_none_sample(self) -> None:
        """None sample is a usage fault."""
        assert run_checker(FitsTypeOf, 1, None).as_tuple() == (False, "Invalid sample value")


class TestImplements:
    """Tests for Implements."""

    def test_info(self) -> None:
        """Name and params."""
        assert Implements.info.name == "Implements"
        assert Implements.info.params == ("obtained", "ifaceptr")

    def test_abstract_class(self) -> None:
        """Abstract base classes are interfaces."""
        assert run_checker(Implements, Dog(), Animal).as_tuple() == (True, "")
        assert run_checker(Implements, Tree(), Animal).as_tuple() == (False, "")

    def test_standard_abcs(self) -> None:
        """collections.abc classes work too."""
        assert run_checker(Implements, [], Sized).as_tuple() == (True, "")
        assert run_checker(Implements, 1, Sized).as_tuple() == (False, "")

    def test_runtime_protocol(self) -> None:
        """Structural match against a runtime-checkable Protocol."""
        assert run_checker(Implements, Report(), Describable).as_tuple() == (True, "")
        assert run_checker(Implements, Tree(), Describable).as_tuple() == (False, "")

    def test_none_obtained(self) -> None:
        """None implements nothing."""
        assert run_checker(Implements, None, Animal).as_tuple() == (False, "")
        assert run_checker(Implements, None, Describable).as_tuple() == (False, "")

    def test_interface_checked_before_none(self) -> None:
        """A bad ifaceptr is a usage fault even for None."""
        expected = (False, "ifaceptr should be an abstract class or runtime-checkable Protocol")
        assert run_checker(Implements, None, 0).as_tuple() == expected
        assert run_checker(Implements, None, int).as_tuple() == expected

    def test_not_an_interface(self) -> None:
        """Concrete classes, plain Protocols and non-types are usage faults."""
        expected = (False, "ifaceptr should be an abstract class or runtime-checkable Protocol")
        assert run_checker(Implements, Dog(), Dog).as_tuple() == expected
        assert run_checker(Implements, 1, int).as_tuple() == expected
        assert run_checker(Implements, Report(), Opaque).as_tuple() == expected
        assert run_checker(Implements, Dog(), "Animal").as_tuple() == expected
