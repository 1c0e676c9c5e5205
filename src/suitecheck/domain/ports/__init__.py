"""Domain ports: contracts between the engine and its callers."""

from suitecheck.domain.ports.case_view import CaseView
from suitecheck.domain.ports.checker import CheckerProtocol
from suitecheck.domain.ports.reporter import ReporterProtocol

__all__ = [
    "CaseView",
    "CheckerProtocol",
    "ReporterProtocol",
]
