"""Built-in checkers.

Each checker is a stateless singleton; Not wraps any checker.
Users can implement custom checkers against CheckerProtocol or by
subclassing BaseChecker.
"""

from suitecheck.application.checkers._base import BaseChecker
from suitecheck.application.checkers._registry import checker_registry, get_checker
from suitecheck.application.checkers.containment import (
    Contains,
    ContainsChecker,
    DeepContains,
    DeepContainsChecker,
)
from suitecheck.application.checkers.equality import (
    DeepEquals,
    DeepEqualsChecker,
    Equals,
    EqualsChecker,
)
from suitecheck.application.checkers.length import HasLen, HasLenChecker
from suitecheck.application.checkers.matching import (
    ErrorMatches,
    ErrorMatchesChecker,
    Matches,
    MatchesChecker,
)
from suitecheck.application.checkers.negation import Not
from suitecheck.application.checkers.nil import IsNil, IsNilChecker, NotNil, NotNilChecker
from suitecheck.application.checkers.panics import (
    PanicMatches,
    PanicMatchesChecker,
    Panics,
    PanicsChecker,
)
from suitecheck.application.checkers.type_checks import (
    FitsTypeOf,
    FitsTypeOfChecker,
    Implements,
    ImplementsChecker,
)

__all__ = [
    "BaseChecker",
    "Contains",
    "ContainsChecker",
    "DeepContains",
    "DeepContainsChecker",
    "DeepEquals",
    "DeepEqualsChecker",
    "Equals",
    "EqualsChecker",
    "ErrorMatches",
    "ErrorMatchesChecker",
    "FitsTypeOf",
    "FitsTypeOfChecker",
    "HasLen",
    "HasLenChecker",
    "Implements",
    "ImplementsChecker",
    "IsNil",
    "IsNilChecker",
    "Matches",
    "MatchesChecker",
    "Not",
    "NotNil",
    "NotNilChecker",
    "PanicMatches",
    "PanicMatchesChecker",
    "Panics",
    "PanicsChecker",
    "checker_registry",
    "get_checker",
]
