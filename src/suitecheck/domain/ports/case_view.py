"""Read-only view of a test case, as consumed by reporters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from typing import TextIO

    from suitecheck.domain.model.lifecycle import CaseKind, CaseStatus


class CaseView(Protocol):
    """Facade over scheduler-owned test case state.

    Reporters read it at dispatch time and never mutate it.
    Synchronizing the underlying object is the scheduler's job.
    """

    @property
    def call_site(self) -> object:
        """Token the call-site namer turns into path and function name."""
        ...

    @property
    def test_id(self) -> str:
        """Stable identifier used by protocol output."""
        ...

    @property
    def reason(self) -> str:
        """Skip or expected-failure reason, "" if none."""
        ...

    @property
    def kind(self) -> CaseKind:
        """Ordinary test or fixture."""
        ...

    @property
    def status(self) -> CaseStatus:
        """Bookkeeping status."""
        ...

    def elapsed(self) -> str:
        """Rendered elapsed time."""
        ...

    def log_text(self) -> str:
        """Accumulated log as one string."""
        ...

    def write_log(self, stream: TextIO) -> None:
        """Copy the log accumulated so far into stream."""
        ...
