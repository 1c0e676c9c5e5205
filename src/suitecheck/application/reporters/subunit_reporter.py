"""Subunit reporter: lifecycle events as a subunit v2 byte stream.

Each event becomes one status record keyed by the case's test id:

    STARTED           inprogress
    SUCCEEDED         success
    FAILED, PANICKED  fail, case log attached as "details"
    SKIPPED           skip, reason attached as "reason" when set
    EXPECTED_FAILURE  xfail
    MISSED            undefined (no status code on the wire)

Raw writes carry no test id; they become an anonymous "details"
attachment.
"""

from __future__ import annotations

import logging
import sys
import threading
from typing import TYPE_CHECKING

from subunit.v2 import StreamResultToBytes

from suitecheck.application.reporters._base import BaseReporter
from suitecheck.domain.model.lifecycle import LifecycleEvent
from suitecheck.domain.model.wire_event import WireEvent, WireStatus

if TYPE_CHECKING:
    from typing import BinaryIO

    from suitecheck.domain.ports.case_view import CaseView

logger = logging.getLogger(__name__)

# Attachment bytes per packet, well under the v2 packet size limit
CHUNK_SIZE = 65536


def wire_event_for(event: LifecycleEvent, case: CaseView) -> WireEvent:
    """Map a lifecycle event of case to its protocol record."""
    test_id = case.test_id
    match event:
        case LifecycleEvent.STARTED:
            return WireEvent(test_id, WireStatus.INPROGRESS)
        case LifecycleEvent.SUCCEEDED:
            return WireEvent(test_id, WireStatus.SUCCESS)
        case LifecycleEvent.FAILED | LifecycleEvent.PANICKED:
            return WireEvent.text_attachment(test_id, WireStatus.FAIL, "details", case.log_text())
        case LifecycleEvent.SKIPPED:
            if case.reason:
                return WireEvent.text_attachment(test_id, WireStatus.SKIP, "reason", case.reason)
            return WireEvent(test_id, WireStatus.SKIP)
        case LifecycleEvent.EXPECTED_FAILURE:
            return WireEvent(test_id, WireStatus.XFAIL)
        case LifecycleEvent.MISSED:
            return WireEvent(test_id, WireStatus.UNDEFINED)
    raise ValueError(f"unknown lifecycle event {event!r}")


def _protocol_status(status: WireStatus | None) -> str | None:
    """Status string for the encoder. Undefined is the absent status code."""
    if status is None or status is WireStatus.UNDEFINED:
        return None
    return status.value


class SubunitReporter(BaseReporter):
    """Reporter emitting subunit v2 for machine consumption.

    Always streaming. Thread-safe: records of one call are written
    contiguously.
    """

    def __init__(self, output: BinaryIO | None = None) -> None:
        """Initialize reporter.

        Args:
            output: Binary output stream (default: sys.stdout.buffer)
        """
        self._output = output if output is not None else sys.stdout.buffer
        self._streamer = StreamResultToBytes(self._output)
        self._lock = threading.Lock()

    @property
    def stream(self) -> bool:
        """Always True."""
        return True

    def write(self, content: str | bytes) -> int:  # type: ignore[override]
        """Send content as an anonymous "details" attachment.

        Returns:
            Number of bytes sent
        """
        event = WireEvent.text_attachment(None, None, "details", content)
        with self._lock:
            self._send(event)
        return len(event.file_bytes or b"")

    def write_started(self, case: CaseView) -> None:
        """inprogress record."""
        self._report(LifecycleEvent.STARTED, case)

    def write_failure(self, case: CaseView) -> None:
        """fail record with log."""
        self._report(LifecycleEvent.FAILED, case)

    def write_panic(self, case: CaseView) -> None:
        """fail record with log."""
        self._report(LifecycleEvent.PANICKED, case)

    def write_success(self, case: CaseView) -> None:
        """success record."""
        self._report(LifecycleEvent.SUCCEEDED, case)

    def write_skip(self, case: CaseView) -> None:
        """skip record with reason."""
        self._report(LifecycleEvent.SKIPPED, case)

    def write_expected_failure(self, case: CaseView) -> None:
        """xfail record."""
        self._report(LifecycleEvent.EXPECTED_FAILURE, case)

    def write_missed(self, case: CaseView) -> None:
        """undefined record."""
        self._report(LifecycleEvent.MISSED, case)

    def _report(self, event: LifecycleEvent, case: CaseView) -> None:
        wire = wire_event_for(event, case)
        with self._lock:
            try:
                self._send(wire)
            except (OSError, ValueError):
                logger.warning("subunit reporter could not write %s for %s", wire.status, wire.test_id, exc_info=True)

    def _send(self, event: WireEvent) -> None:
        """Write event, splitting large attachments. Caller holds the lock."""
        status = _protocol_status(event.status)
        if event.file_bytes is None:
            self._streamer.status(test_id=event.test_id, test_status=status)
            return

        body = event.file_bytes
        chunks = [body[i : i + CHUNK_SIZE] for i in range(0, len(body), CHUNK_SIZE)] or [b""]
        last = len(chunks) - 1
        for index, chunk in enumerate(chunks):
            self._streamer.status(
                test_id=event.test_id,
                test_status=status if index == last else None,
                file_name=event.file_name,
                file_bytes=chunk,
                mime_type=event.mime_type,
                eof=index == last,
            )
