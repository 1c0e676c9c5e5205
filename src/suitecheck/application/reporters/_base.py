"""Base reporter class for lifecycle output.

Provides the event dispatch of ReporterProtocol.
Concrete reporters inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from suitecheck.domain.model.lifecycle import LifecycleEvent

if TYPE_CHECKING:
    from suitecheck.domain.ports.case_view import CaseView


class BaseReporter(ABC):
    """Base class for reporters implementing ReporterProtocol.

    Concrete reporters implement one write_* method per lifecycle event,
    the raw write() and the stream flag. report() routes events to them.
    suitecheck provides TextReporter and SubunitReporter.

    Example:
        class CountingReporter(BaseReporter):
            stream = True

            def write_failure(self, case: CaseView) -> None:
                self.failures += 1
            ...
    """

    @property
    @abstractmethod
    def stream(self) -> bool:
        """True if every event is rendered as a discrete record."""

    def report(self, event: LifecycleEvent, case: CaseView) -> None:
        """Render one lifecycle transition of case.

        Args:
            event: Transition to render
            case: Read-only case state at dispatch time
        """
        match event:
            case LifecycleEvent.STARTED:
                self.write_started(case)
            case LifecycleEvent.FAILED:
                self.write_failure(case)
            case LifecycleEvent.PANICKED:
                self.write_panic(case)
            case LifecycleEvent.SUCCEEDED:
                self.write_success(case)
            case LifecycleEvent.SKIPPED:
                self.write_skip(case)
            case LifecycleEvent.EXPECTED_FAILURE:
                self.write_expected_failure(case)
            case LifecycleEvent.MISSED:
                self.write_missed(case)

    @abstractmethod
    def write(self, content: str) -> int:
        """Raw output outside any lifecycle event.

        Sink errors propagate to the caller.

        Returns:
            Amount of content accepted by the sink
        """

    @abstractmethod
    def write_started(self, case: CaseView) -> None:
        """Case started."""

    @abstractmethod
    def write_failure(self, case: CaseView) -> None:
        """Case failed a check."""

    @abstractmethod
    def write_panic(self, case: CaseView) -> None:
        """Case raised unexpectedly."""

    @abstractmethod
    def write_success(self, case: CaseView) -> None:
        """Case passed."""

    @abstractmethod
    def write_skip(self, case: CaseView) -> None:
        """Case skipped."""

    @abstractmethod
    def write_expected_failure(self, case: CaseView) -> None:
        """Case failed as expected."""

    @abstractmethod
    def write_missed(self, case: CaseView) -> None:
        """Case never ran."""
