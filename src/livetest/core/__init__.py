"""Core models and the runner exposed at the package level."""
from .clock import Clock, SystemClock
from .events import EventKind, EventSink, RecordingSink, RunEvent, TerminalSink
from .models import Case, Suite, TagFilter, select_cases
from .results import CaseOutcome, CaseResult, FullResults, Report
from .runner import TestRunner
from .subject import NullSubject, SubjectAdapter

__all__ = [
    "Case",
    "CaseOutcome",
    "CaseResult",
    "Clock",
    "EventKind",
    "EventSink",
    "FullResults",
    "NullSubject",
    "RecordingSink",
    "Report",
    "RunEvent",
    "Suite",
    "SubjectAdapter",
    "SystemClock",
    "TagFilter",
    "TerminalSink",
    "TestRunner",
    "select_cases",
]
