"""Reporter configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from suitecheck.domain.exceptions import ReporterConfigError


class ReportProtocol(Enum):
    """Output format of a reporter."""

    TEXT = "text"
    SUBUNIT = "subunit"


@dataclass(frozen=True, slots=True)
class ReporterConfig:
    """Reporter configuration DTO.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        verbosity: 0 shows failures only, 1 adds test results,
            2 and above stream every start and result line
        protocol: TEXT for human-readable output, SUBUNIT for the
            subunit v2 byte stream (verbosity is then ignored)
    """

    verbosity: int = 0
    protocol: ReportProtocol = ReportProtocol.TEXT

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if isinstance(self.verbosity, bool) or not isinstance(self.verbosity, int):
            raise ReporterConfigError("verbosity", f"must be an int, got {type(self.verbosity).__name__}")
        if self.verbosity < 0:
            raise ReporterConfigError("verbosity", f"must be >= 0, got {self.verbosity}")
        if not isinstance(self.protocol, ReportProtocol):
            raise ReporterConfigError("protocol", f"unknown protocol {self.protocol!r}")

    @property
    def stream(self) -> bool:
        """Every event is rendered as a discrete block."""
        return self.verbosity > 1

    @property
    def verbose(self) -> bool:
        """Ordinary test results are shown."""
        return self.verbosity > 0
