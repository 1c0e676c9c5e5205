"""Domain model: immutable value objects and case state."""

from suitecheck.domain.model.call_site import UNKNOWN_FUNCTION, UNKNOWN_PATH, CallSite
from suitecheck.domain.model.case_record import CaseRecord
from suitecheck.domain.model.check_result import CheckResult, Rewrite
from suitecheck.domain.model.checker_info import CheckerInfo
from suitecheck.domain.model.configuration import ReporterConfig, ReportProtocol
from suitecheck.domain.model.lifecycle import CaseKind, CaseStatus, LifecycleEvent
from suitecheck.domain.model.wire_event import TEXT_PLAIN_UTF8, WireEvent, WireStatus

__all__ = [
    "TEXT_PLAIN_UTF8",
    "UNKNOWN_FUNCTION",
    "UNKNOWN_PATH",
    "CallSite",
    "CaseKind",
    "CaseRecord",
    "CaseStatus",
    "CheckResult",
    "CheckerInfo",
    "LifecycleEvent",
    "ReportProtocol",
    "ReporterConfig",
    "Rewrite",
    "WireEvent",
    "WireStatus",
]
