"""Abrupt-fault checkers."""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

from suitecheck.application.checkers._base import BaseChecker
from suitecheck.application.checkers.matching import match_full
from suitecheck.domain.exceptions import Panic
from suitecheck.domain.model.check_result import CheckResult, Rewrite
from suitecheck.infrastructure.reflection import accepts_no_arguments, deep_equal, is_error

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

_NOT_CALLABLE = "Function must take zero arguments"
_NO_FAULT = "Function has not panicked"


class Fault(NamedTuple):
    """What a function raised.

    Attributes:
        payload: Panic payload (may be None), or the exception itself
        display: Payload as shown in diagnostics: message text for
            exceptions, the raw payload otherwise
    """

    payload: object
    display: object


def capture_fault(function: Callable[[], object]) -> Fault | None:
    """Call function and capture what it raises.

    KeyboardInterrupt and SystemExit are not faults and propagate.

    Returns:
        Fault, or None if function returned normally
    """
    try:
        function()
    except Panic as exc:
        payload = exc.payload
        return Fault(payload=payload, display=str(payload) if is_error(payload) else payload)
    except Exception as exc:  # noqa: BLE001
        return Fault(payload=exc, display=str(exc))
    return None


def _run(params: Sequence[object]) -> Fault | CheckResult:
    function = params[0]
    if not accepts_no_arguments(function):
        return CheckResult.usage_error(_NOT_CALLABLE)
    fault = capture_fault(function)  # type: ignore[arg-type]
    if fault is None:
        return CheckResult.usage_error(_NO_FAULT)
    return fault


class PanicsChecker(BaseChecker):
    """Passes if function raises and the payload deep-equals expected.

    The payload of Panic(x) is x (None included); for any other
    exception it is the exception itself.

    Example:
        assert_that(lambda: parse(""), Panics, ValueError("empty input"))
    """

    __slots__ = ()

    name = "Panics"
    params = ("function", "expected")

    def _check(self, params: Sequence[object], names: Sequence[str]) -> CheckResult:
        outcome = _run(params)
        if isinstance(outcome, CheckResult):
            return outcome

        rewrite = Rewrite.replace_first(params, names, outcome.display, "panic")
        return CheckResult.of(deep_equal(outcome.payload, params[1]), rewrite)


class PanicMatchesChecker(BaseChecker):
    """Passes if function raises with a message fully matching expected.

    The payload must be a string or an exception.

    Example:
        assert_that(lambda: connect(), PanicMatches, "timeout after .*")
    """

    __slots__ = ()

    name = "PanicMatches"
    params = ("function", "expected")

    def _check(self, params: Sequence[object], names: Sequence[str]) -> CheckResult:
        outcome = _run(params)
        if isinstance(outcome, CheckResult):
            return outcome

        payload = outcome.payload
        if is_error(payload):
            message = str(payload)
        elif isinstance(payload, str):
            message = payload
        else:
            return CheckResult.usage_error("Panic value is not a string or an error")

        rewrite = Rewrite.replace_first(params, names, message, "panic")
        return match_full(message, params[1], rewrite)


Panics = PanicsChecker()
PanicMatches = PanicMatchesChecker()
