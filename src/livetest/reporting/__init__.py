"""Reporting exports."""
from .base import (
    Callback,
    Deferred,
    DeferredReporter,
    Realtime,
    RealtimeReporter,
    ResolvedReporter,
    Unrecognized,
    resolve_reporter,
)
from .json_reporter import JsonReporter
from .jsonl import JsonLinesReporter
from .terminal import TerminalReporter

__all__ = [
    "Callback",
    "Deferred",
    "DeferredReporter",
    "JsonLinesReporter",
    "JsonReporter",
    "Realtime",
    "RealtimeReporter",
    "ResolvedReporter",
    "TerminalReporter",
    "Unrecognized",
    "resolve_reporter",
]
