"""Concrete, thread-safe test case state."""

from __future__ import annotations

import threading
import time
from io import StringIO
from typing import TYPE_CHECKING

from suitecheck.domain.model.lifecycle import CaseKind, CaseStatus

if TYPE_CHECKING:
    from typing import TextIO


class CaseRecord:
    """Test case state a scheduler can hand to reporters.

    Satisfies CaseView. The scheduler owns and mutates it; reporters only
    read. The log buffer has its own lock so tasks may log while a
    reporter copies it out.
    """

    def __init__(
        self,
        call_site: object,
        test_id: str,
        kind: CaseKind = CaseKind.TEST,
    ) -> None:
        """Initialize record.

        Args:
            call_site: Token the call-site namer understands (the method)
            test_id: Stable identifier, e.g. "MySuite.test_bar"
            kind: Ordinary test or fixture
        """
        if not test_id:
            raise ValueError("test_id must not be empty")

        self.call_site = call_site
        self.test_id = test_id
        self.kind = kind
        self.reason = ""
        self.status = CaseStatus.RUNNING
        self._log = StringIO()
        self._log_lock = threading.Lock()
        self._started: float | None = None
        self._duration: float | None = None

    def log(self, *args: object) -> None:
        """Append a line built like print()."""
        self._append(" ".join(str(a) for a in args))

    def logf(self, template: str, *args: object) -> None:
        """Append a %-formatted line."""
        self._append(template % args if args else template)

    def _append(self, line: str) -> None:
        if not line.endswith("\n"):
            line += "\n"
        with self._log_lock:
            self._log.write(line)

    def log_text(self) -> str:
        """Snapshot of the accumulated log."""
        with self._log_lock:
            return self._log.getvalue()

    def write_log(self, stream: TextIO) -> None:
        """Copy the log accumulated so far into stream."""
        with self._log_lock:
            text = self._log.getvalue()
        stream.write(text)

    def start_timer(self) -> None:
        """Mark the start of the case."""
        self._started = time.perf_counter()
        self._duration = None

    def stop_timer(self) -> None:
        """Freeze the elapsed time."""
        if self._started is not None:
            self._duration = time.perf_counter() - self._started

    def elapsed(self) -> str:
        """Elapsed time rendered as seconds with millisecond precision."""
        if self._duration is not None:
            seconds = self._duration
        elif self._started is not None:
            seconds = time.perf_counter() - self._started
        else:
            seconds = 0.0
        return f"{seconds:.3f}s"

    def __repr__(self) -> str:
        """Show id and status."""
        return f"CaseRecord({self.test_id!r}, {self.status.name})"
