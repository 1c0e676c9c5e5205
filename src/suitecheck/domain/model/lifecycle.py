"""Lifecycle enumerations for reported test cases."""

from enum import Enum, auto


class LifecycleEvent(Enum):
    """One discrete transition in a test case's life.

    Exactly one terminal event fires per case; STARTED may precede it.
    """

    STARTED = auto()
    FAILED = auto()
    PANICKED = auto()
    SUCCEEDED = auto()
    EXPECTED_FAILURE = auto()
    SKIPPED = auto()
    MISSED = auto()

    @property
    def is_terminal(self) -> bool:
        """Every event but STARTED ends a case."""
        return self is not LifecycleEvent.STARTED

    @property
    def is_problem(self) -> bool:
        """Failure-family event."""
        return self in (LifecycleEvent.FAILED, LifecycleEvent.PANICKED)


class CaseKind(Enum):
    """What kind of method a case runs."""

    TEST = auto()  # ordinary test method
    FIXTURE = auto()  # setup/teardown
    BENCHMARK = auto()


class CaseStatus(Enum):
    """Scheduler bookkeeping status of a case."""

    RUNNING = auto()
    SUCCEEDED = auto()
    FAILED = auto()
    SKIPPED = auto()
    PANICKED = auto()
    FIXTURE_PANICKED = auto()
    MISSED = auto()
