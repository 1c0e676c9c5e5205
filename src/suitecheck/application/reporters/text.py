"""Text reporter: lifecycle events as human-readable blocks.

Output shape, with SEPARATOR a blank line plus 70 dashes:

    verbosity 0   failures only, each opened by SEPARATOR and followed
                  by the case log
    verbosity 1   as 0, plus PASS/SKIP/MISS/FAIL EXPECTED lines for
                  ordinary tests; the first such line after a failure
                  is prefixed with SEPARATOR to close the failure block
    verbosity 2+  streaming: START line per case, every result as its
                  own blank-line terminated block, no logs (assumed
                  already shown live)

Thread-safe: one lock per instance covers each whole render.
"""

from __future__ import annotations

import logging
import sys
import threading
from typing import TYPE_CHECKING

from suitecheck.application.reporters._base import BaseReporter
from suitecheck.domain.model.configuration import ReporterConfig
from suitecheck.domain.model.lifecycle import CaseKind, CaseStatus
from suitecheck.infrastructure.call_site import describe_call_site

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import TextIO

    from suitecheck.domain.model.call_site import CallSite
    from suitecheck.domain.ports.case_view import CaseView

logger = logging.getLogger(__name__)

SEPARATOR = "\n" + "-" * 70 + "\n"


class TextReporter(BaseReporter):
    """Verbosity-gated text reporter.

    Safe to call from many test tasks at once: writes of one call are
    never interleaved with another call's. No ordering across cases
    beyond the sink's own.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        verbosity: int = 0,
        *,
        namer: Callable[[object], CallSite] = describe_call_site,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            verbosity: 0 failures only, 1 adds test results, 2+ streams
            namer: Maps a case's call-site token to path and name

        Raises:
            ReporterConfigError: verbosity is negative or not an int
        """
        self._config = ReporterConfig(verbosity=verbosity)
        self._output = output if output is not None else sys.stdout
        self._namer = namer
        self._lock = threading.Lock()
        self._wrote_problem_last = False

    @property
    def stream(self) -> bool:
        """Streaming mode (verbosity > 1)."""
        return self._config.stream

    @property
    def verbose(self) -> bool:
        """Test results shown (verbosity > 0)."""
        return self._config.verbose

    @property
    def verbosity(self) -> int:
        """Configured verbosity."""
        return self._config.verbosity

    def write(self, content: str) -> int:
        """Write content as is, atomically."""
        with self._lock:
            return self._output.write(content)

    def write_started(self, case: CaseView) -> None:
        """START line, streaming mode only."""
        if not self.stream:
            return
        with self._lock:
            self._emit(self._header("START", case, "", "\n"))

    def write_failure(self, case: CaseView) -> None:
        """FAIL block."""
        self._write_problem("FAIL", case)

    def write_panic(self, case: CaseView) -> None:
        """PANIC block."""
        self._write_problem("PANIC", case)

    def write_success(self, case: CaseView) -> None:
        """PASS line."""
        self._write_success("PASS", case)

    def write_skip(self, case: CaseView) -> None:
        """SKIP line."""
        self._write_success("SKIP", case)

    def write_expected_failure(self, case: CaseView) -> None:
        """FAIL EXPECTED line."""
        self._write_success("FAIL EXPECTED", case)

    def write_missed(self, case: CaseView) -> None:
        """MISS line."""
        self._write_success("MISS", case)

    def _write_problem(self, label: str, case: CaseView) -> None:
        prefix = "" if self.stream else SEPARATOR
        with self._lock:
            self._wrote_problem_last = True
            if self._emit(self._header(label, case, prefix, "\n\n")) and not self.stream:
                self._emit_log(case)

    def _write_success(self, label: str, case: CaseView) -> None:
        if not (self.stream or (self.verbose and case.kind is CaseKind.TEST)):
            return
        with self._lock:
            suffix = ""
            if case.reason:
                suffix = f" ({case.reason})"
            if case.status is CaseStatus.SUCCEEDED:
                suffix += "\t" + case.elapsed()
            suffix += "\n"
            if self.stream:
                suffix += "\n"

            header = self._header(label, case, "", suffix)
            if not self.stream and self._wrote_problem_last:
                header = SEPARATOR + header
            self._wrote_problem_last = False
            self._emit(header)

    def _header(self, label: str, case: CaseView, prefix: str, suffix: str) -> str:
        """<prefix><LABEL>: <path>: <function><suffix>"""
        site = self._namer(case.call_site)
        return f"{prefix}{label}: {site.path}: {site.function}{suffix}"

    def _emit(self, text: str) -> bool:
        """Write under the held lock. Sink errors (broken, closed or binary sink) are logged, not raised."""
        try:
            self._output.write(text)
        except (OSError, TypeError, ValueError):
            logger.warning("text reporter could not write to %r", self._output, exc_info=True)
            return False
        return True

    def _emit_log(self, case: CaseView) -> None:
        try:
            case.write_log(self._output)
        except (OSError, TypeError, ValueError):
            logger.warning("text reporter could not copy log of %s", case.test_id, exc_info=True)
