"""Structured status record for the streaming protocol."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

TEXT_PLAIN_UTF8 = "text/plain;charset=utf8"


class WireStatus(Enum):
    """Test status values of the subunit v2 protocol."""

    INPROGRESS = "inprogress"
    SUCCESS = "success"
    FAIL = "fail"
    SKIP = "skip"
    XFAIL = "xfail"
    UNDEFINED = "undefined"


@dataclass(frozen=True, slots=True)
class WireEvent:
    """One protocol record.

    Attachment fields come together or not at all.

    Attributes:
        test_id: Stable test identifier, None for anonymous attachments
        status: Test status, None for a bare attachment
        file_name: Attachment name ("details", "reason")
        file_bytes: Attachment body
        mime_type: Attachment MIME type
    """

    test_id: str | None
    status: WireStatus | None
    file_name: str | None = None
    file_bytes: bytes | None = None
    mime_type: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        attachment = (self.file_name, self.file_bytes, self.mime_type)
        if any(part is not None for part in attachment) and any(part is None for part in attachment):
            raise ValueError("file_name, file_bytes and mime_type must be set together")
        if self.status is None and self.file_name is None:
            raise ValueError("event needs a status or an attachment")

    @property
    def has_attachment(self) -> bool:
        """Whether the record carries a file."""
        return self.file_name is not None

    @classmethod
    def text_attachment(
        cls,
        test_id: str | None,
        status: WireStatus | None,
        file_name: str,
        text: str | bytes,
    ) -> WireEvent:
        """Record with a text/plain attachment."""
        body = text.encode("utf-8") if isinstance(text, str) else bytes(text)
        return cls(
            test_id=test_id,
            status=status,
            file_name=file_name,
            file_bytes=body,
            mime_type=TEXT_PLAIN_UTF8,
        )
