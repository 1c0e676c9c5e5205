"""Assertion entry points built on the checker engine.

    assert_that(obtained, Equals, 42)
    assert_that(items, Not(Contains), "x", comment=commentf("run %d", n))
    if not check(err, ErrorMatches, "boom.*"): ...
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from suitecheck.domain.exceptions import CheckerArityError, CheckFailure
from suitecheck.presentation.api._render import render_failure

if TYPE_CHECKING:
    from suitecheck.domain.ports.checker import CheckerProtocol

logger = logging.getLogger(__name__)


class Comment:
    """Lazily formatted comment attached to a failing check."""

    __slots__ = ("_args", "_template")

    def __init__(self, template: str, *args: object) -> None:
        self._template = template
        self._args = args

    def comment_string(self) -> str:
        """Rendered text (%-formatting)."""
        if not self._args:
            return self._template
        return self._template % self._args

    def __str__(self) -> str:
        """Same as comment_string()."""
        return self.comment_string()


def commentf(template: str, *args: object) -> Comment:
    """Comment for check()/assert_that(), formatted only if it fails."""
    return Comment(template, *args)


@dataclass(frozen=True, slots=True)
class CheckOutcome:
    """Result of check().

    Attributes:
        ok: Whether the checker held
        diagnostic: Failure block, "" when ok
    """

    ok: bool
    diagnostic: str = ""

    def __bool__(self) -> bool:
        """Truthy when the checker held."""
        return self.ok


def check(
    obtained: object,
    checker: CheckerProtocol,
    *args: object,
    comment: Comment | None = None,
) -> CheckOutcome:
    """Run checker on obtained and args.

    Args:
        obtained: First checker param
        checker: Checker to run
        *args: Remaining checker params
        comment: Extra text for the failure block

    Returns:
        Outcome with a rendered failure block if the check did not hold

    Raises:
        CheckerArityError: Param count differs from checker.info.params
    """
    info = checker.info
    params = (obtained, *args)
    if len(params) != info.arity:
        raise CheckerArityError(info.name, info.arity, len(params))

    names = tuple(info.params)
    result = checker.check(params, names)
    if result.ok:
        return CheckOutcome(ok=True)

    if result.error:
        logger.debug("%s usage fault: %s", info.name, result.error)
    shown_params, shown_names = result.view(params, names)
    comment_text = comment.comment_string() if comment is not None else None
    return CheckOutcome(ok=False, diagnostic=render_failure(shown_params, shown_names, comment_text, result.error))


def assert_that(
    obtained: object,
    checker: CheckerProtocol,
    *args: object,
    comment: Comment | None = None,
) -> None:
    """Like check(), but raise on failure.

    Raises:
        CheckFailure: The checker did not hold (an AssertionError)
        CheckerArityError: Param count differs from checker.info.params
    """
    outcome = check(obtained, checker, *args, comment=comment)
    if not outcome:
        raise CheckFailure(checker.info.name, outcome.diagnostic)
