"""Regular-expression checkers."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from suitecheck.application.checkers._base import BaseChecker
from suitecheck.domain.model.check_result import CheckResult, Rewrite
from suitecheck.infrastructure.reflection import has_str, is_error, is_nil

if TYPE_CHECKING:
    from collections.abc import Sequence


def match_full(value: object, regex: object, rewrite: Rewrite | None = None) -> CheckResult:
    """Whether value's string form matches regex from start to end.

    Args:
        value: str, or object with its own __str__
        regex: Pattern source
        rewrite: View to attach to the result

    Returns:
        Result; usage fault if regex is not a str, value has no string
        form or regex does not compile
    """
    if not isinstance(regex, str):
        return CheckResult.usage_error("Regex must be a string", rewrite)
    if isinstance(value, str):
        text = value
    elif has_str(value):
        text = str(value)
    else:
        return CheckResult.usage_error("Obtained value is not a string and has no __str__()", rewrite)

    try:
        pattern = re.compile(regex)
    except re.error as exc:
        return CheckResult.usage_error(f"Can't compile regex: {exc}", rewrite)
    return CheckResult.of(pattern.fullmatch(text) is not None, rewrite)


class MatchesChecker(BaseChecker):
    """Passes if value's string form fully matches regex.

    Anchored at both ends: "ab" does not match "abc".

    Example:
        assert_that(version, Matches, r"\\d+\\.\\d+")
    """

    __slots__ = ()

    name = "Matches"
    params = ("value", "regex")

    def _check(self, params: Sequence[object], names: Sequence[str]) -> CheckResult:
        return match_full(params[0], params[1])


class ErrorMatchesChecker(BaseChecker):
    """Passes if value is an exception whose message fully matches regex.

    On any non-nil exception the view shows the message under the
    name "error".

    Example:
        assert_that(err, ErrorMatches, "connection .* refused")
    """

    __slots__ = ()

    name = "ErrorMatches"
    params = ("value", "regex")

    def _check(self, params: Sequence[object], names: Sequence[str]) -> CheckResult:
        value = params[0]
        if is_nil(value):
            return CheckResult.usage_error("Error value is nil")
        if not is_error(value):
            return CheckResult.usage_error("Value is not an error")

        message = str(value)
        rewrite = Rewrite.replace_first(params, names, message, "error")
        return match_full(message, params[1], rewrite)


Matches = MatchesChecker()
ErrorMatches = ErrorMatchesChecker()
