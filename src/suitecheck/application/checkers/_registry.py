"""Checker registry for built-in checkers.

Central registry of all built-in checker singletons, looked up by name.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import TYPE_CHECKING

from suitecheck.application.checkers.containment import Contains, DeepContains
from suitecheck.application.checkers.equality import DeepEquals, Equals
from suitecheck.application.checkers.length import HasLen
from suitecheck.application.checkers.matching import ErrorMatches, Matches
from suitecheck.application.checkers.negation import Not
from suitecheck.application.checkers.nil import IsNil, NotNil
from suitecheck.application.checkers.panics import PanicMatches, Panics
from suitecheck.application.checkers.type_checks import FitsTypeOf, Implements
from suitecheck.domain.exceptions import UnknownCheckerError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from suitecheck.domain.ports.checker import CheckerProtocol


# Registry - tuple for immutability
_ALL_CHECKERS: tuple[CheckerProtocol, ...] = (
    IsNil,
    NotNil,
    Equals,
    DeepEquals,
    HasLen,
    Matches,
    ErrorMatches,
    Panics,
    PanicMatches,
    FitsTypeOf,
    Implements,
    Contains,
    DeepContains,
)

_BY_NAME: Mapping[str, CheckerProtocol] = MappingProxyType({c.info.name: c for c in _ALL_CHECKERS})

_NOT_NAME = re.compile(r"Not\((?P<inner>.+)\)")


def checker_registry() -> Mapping[str, CheckerProtocol]:
    """Read-only mapping of built-in checker name -> checker."""
    return _BY_NAME


def get_checker(name: str) -> CheckerProtocol:
    """Look up a built-in checker by display name.

    "Not(...)" names build the combinator around the inner checker,
    so get_checker("Not(IsNil)") works.

    Raises:
        UnknownCheckerError: No such checker
    """
    match = _NOT_NAME.fullmatch(name)
    if match is not None:
        return Not(get_checker(match.group("inner")))
    try:
        return _BY_NAME[name]
    except KeyError:
        raise UnknownCheckerError(name) from None
