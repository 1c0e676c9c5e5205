"""Reporter construction from configuration."""

from __future__ import annotations

import sys
from typing import IO, TYPE_CHECKING, cast

from suitecheck.application.reporters.subunit_reporter import SubunitReporter
from suitecheck.application.reporters.text import TextReporter
from suitecheck.domain.model.configuration import ReporterConfig, ReportProtocol

if TYPE_CHECKING:
    from typing import BinaryIO, TextIO

    from suitecheck.application.reporters._base import BaseReporter


def create_reporter(
    output: IO[str] | IO[bytes] | None = None,
    config: ReporterConfig | None = None,
) -> BaseReporter:
    """Build the reporter config asks for.

    Args:
        output: Sink. Text stream for TEXT; binary stream for SUBUNIT
            (a text stream's underlying .buffer is used if it has one).
            Default: sys.stdout
        config: Reporter configuration. Uses defaults if None.

    Returns:
        TextReporter or SubunitReporter
    """
    config = config or ReporterConfig()
    sink = output if output is not None else sys.stdout

    if config.protocol is ReportProtocol.SUBUNIT:
        binary = getattr(sink, "buffer", sink)
        return SubunitReporter(cast("BinaryIO", binary))
    return TextReporter(cast("TextIO", sink), config.verbosity)
