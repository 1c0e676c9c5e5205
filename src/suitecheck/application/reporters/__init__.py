"""Reporters for test lifecycle events.

Users can implement custom reporters against ReporterProtocol or by
subclassing BaseReporter.
"""

from suitecheck.application.reporters._base import BaseReporter
from suitecheck.application.reporters.factory import create_reporter
from suitecheck.application.reporters.subunit_reporter import SubunitReporter, wire_event_for
from suitecheck.application.reporters.text import SEPARATOR, TextReporter

__all__ = [
    "SEPARATOR",
    "BaseReporter",
    "SubunitReporter",
    "TextReporter",
    "create_reporter",
    "wire_event_for",
]
