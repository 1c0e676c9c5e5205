"""Reporter protocol: contract for all reporters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from suitecheck.domain.model.lifecycle import LifecycleEvent
    from suitecheck.domain.ports.case_view import CaseView


class ReporterProtocol(Protocol):
    """Contract the scheduler drives, one instance per run.

    Called from many concurrently running test tasks. Every call is
    atomic with respect to other calls on the same instance.
    report() never raises because of the sink.
    """

    @property
    def stream(self) -> bool:
        """True if every event is rendered as a discrete record."""
        ...

    def report(self, event: LifecycleEvent, case: CaseView) -> None:
        """Render one lifecycle transition of case."""
        ...

    def write(self, content: str) -> int:
        """Raw output outside any lifecycle event.

        Returns:
            Number of characters (or bytes) accepted by the sink
        """
        ...

    def write_started(self, case: CaseView) -> None:
        """Case started."""
        ...

    def write_failure(self, case: CaseView) -> None:
        """Case failed a check."""
        ...

    def write_panic(self, case: CaseView) -> None:
        """Case raised unexpectedly."""
        ...

    def write_success(self, case: CaseView) -> None:
        """Case passed."""
        ...

    def write_skip(self, case: CaseView) -> None:
        """Case skipped."""
        ...

    def write_expected_failure(self, case: CaseView) -> None:
        """Case failed as expected."""
        ...

    def write_missed(self, case: CaseView) -> None:
        """Case never ran (earlier fixture failed)."""
        ...
