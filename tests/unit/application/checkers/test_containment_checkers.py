"""Tests for Contains and DeepContains."""

from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass, field

from suitecheck.application.checkers import Contains, DeepContains
from tests.factories import run_checker


class Animal(ABC):
    @abstractmethod
    def sound(self) -> str: ...


@dataclass(frozen=True)
class Dog(Animal):
    def sound(self) -> str:
        return "woof"


@dataclass(frozen=True)
class Cat(Animal):
    def sound(self) -> str:
        return "meow"


class Tree:
    pass


@dataclass
class MyStruct:
    attrs: dict[str, int] = field(default_factory=dict)


class TestContains:
    """Tests for Contains."""

    def test_info(self) -> None:
        """Name and params."""
        assert Contains.info.name == "Contains"
        assert Contains.info.params == ("container", "elem")

    def test_sequences(self) -> None:
        """Lists, tuples, ranges and deques."""
        assert run_checker(Contains, [1, 2, 3], 2).as_tuple() == (True, "")
        assert run_checker(Contains, [1, 2, 3], 4).as_tuple() == (False, "")
        assert run_checker(Contains, ("a", "b"), "b").as_tuple() == (True, "")
        assert run_checker(Contains, range(5), 3).as_tuple() == (True, "")
        assert run_checker(Contains, deque(["x"]), "x").as_tuple() == (True, "")

    def test_sets(self) -> None:
        """Sets and frozensets."""
        assert run_checker(Contains, {1, 2}, 1).as_tuple() == (True, "")
        assert run_checker(Contains, frozenset({1, 2}), 3).as_tuple() == (False, "")

    def test_mapping_values_not_keys(self) -> None:
        """Membership is over values."""
        assert run_checker(Contains, {"a": 1}, 1).as_tuple() == (True, "")
        assert run_checker(Contains, {"a": 1}, 2).as_tuple() == (False, "")
        assert run_checker(Contains, {"a": 1}, "a").as_tuple() == (
            False,
            "container has items of type int but expected element is a str",
        )

    def test_strings(self) -> None:
        """Substring test."""
        assert run_checker(Contains, "hello", "ell").as_tuple() == (True, "")
        assert run_checker(Contains, "hello", "").as_tuple() == (True, "")
        assert run_checker(Contains, "hello", "bye").as_tuple() == (False, "")

    def test_string_with_non_string_element(self) -> None:
        """Only str elements are looked up in a str."""
        assert run_checker(Contains, "hello", 1).as_tuple() == (False, "element is a int but expected a str")

    def test_empty_container(self) -> None:
        """Nothing to compare, any element accepted."""
        assert run_checker(Contains, [], 1).as_tuple() == (False, "")
        assert run_checker(Contains, {}, "x").as_tuple() == (False, "")

    def test_unsupported_container(self) -> None:
        """Scalars are not containers."""
        assert run_checker(Contains, 42, 1).as_tuple() == (False, "int is not a supported container")
        assert run_checker(Contains, None, 1).as_tuple() == (False, "NoneType is not a supported container")

    def test_homogeneous_container_wants_exact_type(self) -> None:
        """Element type must match the item type."""
        assert run_checker(Contains, [1, 2], "1").as_tuple() == (
            False,
            "container has items of type int but expected element is a str",
        )
        assert run_checker(Contains, [1, 2], True).as_tuple() == (
            False,
            "container has items of type int but expected element is a bool",
        )

    def test_mixed_container_accepts_subclass_of_shared_base(self) -> None:
        """bool and int share int."""
        assert run_checker(Contains, [True, 1], 5).as_tuple() == (False, "")
        assert run_checker(Contains, [True, 1], 1).as_tuple() == (True, "")

    def test_unrelated_items_accept_anything(self) -> None:
        """No shared base besides object."""
        assert run_checker(Contains, [1, "a"], 2.5).as_tuple() == (False, "")
        assert run_checker(Contains, [1, "a"], "a").as_tuple() == (True, "")

    def test_interface_items(self) -> None:
        """Items sharing an abstract base accept any implementation."""
        assert run_checker(Contains, [Dog(), Cat()], Dog()).as_tuple() == (True, "")
        assert run_checker(Contains, [Dog(), Dog()], Cat()).as_tuple() == (False, "")

    def test_interface_items_reject_non_implementation(self) -> None:
        """Element must implement the shared interface."""
        result = run_checker(Contains, [Dog(), Cat()], Tree())
        assert result.as_tuple() == (
            False,
            f"container has items of interface type {__name__}.Animal but expected element does not implement it",
        )

    def test_uncomparable_items(self) -> None:
        """Unhashable items cannot be compared shallowly."""
        result = run_checker(Contains, [[1]], [1])
        assert result.as_tuple() == (False, "runtime error: comparing uncomparable type list")

    def test_uncomparable_struct(self) -> None:
        """Mutable dataclasses are uncomparable too."""
        result = run_checker(Contains, [MyStruct()], MyStruct())
        assert result.as_tuple() == (
            False,
            f"runtime error: comparing uncomparable type {__name__}.MyStruct",
        )


class TestDeepContains:
    """Tests for DeepContains."""

    def test_info(self) -> None:
        """Name and params."""
        assert DeepContains.info.name == "DeepContains"
        assert DeepContains.info.params == ("container", "elem")

    def test_simple_values(self) -> None:
        """Behaves like Contains for comparable items."""
        assert run_checker(DeepContains, [1, 2, 3], 2).as_tuple() == (True, "")
        assert run_checker(DeepContains, "hello", "ell").as_tuple() == (True, "")
        assert run_checker(DeepContains, {"a": 1}, 2).as_tuple() == (False, "")

    def test_unhashable_items(self) -> None:
        """Lists and mutable structs are compared deeply."""
        assert run_checker(DeepContains, [[1], [2]], [2]).as_tuple() == (True, "")
        assert run_checker(DeepContains, [[1], [2]], [3]).as_tuple() == (False, "")
        assert run_checker(DeepContains, [MyStruct({"a": 1})], MyStruct({"a": 1})).as_tuple() == (True, "")
        assert run_checker(DeepContains, [MyStruct({"a": 1})], MyStruct({"a": 2})).as_tuple() == (False, "")

    def test_same_type_rules(self) -> None:
        """Element type checks apply as for Contains."""
        assert run_checker(DeepContains, [[1]], (1,)).as_tuple() == (
            False,
            "container has items of type list but expected element is a tuple",
        )
        assert run_checker(DeepContains, 3, 1).as_tuple() == (False, "int is not a supported container")
