"""Run events and the sinks that receive them."""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Protocol

import click
from colorama import Fore, Style


class EventKind(str, enum.Enum):
    RUN_STARTED = "run_started"
    RUN_STOPPED = "run_stopped"
    CASE_PASSED = "case_passed"
    CASE_FAILED = "case_failed"
    DEPRECATION = "deprecation"
    INVALID_REPORTER = "invalid_reporter"


INFO = "info"
WARNING = "warning"


@dataclass(frozen=True)
class RunEvent:
    """Human-readable line emitted by the runner, with structured extras."""

    kind: EventKind
    message: str
    level: str = INFO
    data: Mapping[str, Any] = field(default_factory=dict)


class EventSink(Protocol):
    def emit(self, event: RunEvent) -> None:
        ...


class RecordingSink:
    """Keeps every emitted event in memory."""

    def __init__(self) -> None:
        self.events: List[RunEvent] = []

    def emit(self, event: RunEvent) -> None:
        self.events.append(event)

    def of_kind(self, kind: EventKind) -> List[RunEvent]:
        return [event for event in self.events if event.kind == kind]

    def messages(self, kind: Optional[EventKind] = None) -> List[str]:
        return [event.message for event in self.events if kind is None or event.kind == kind]


EVENT_COLORS = {
    EventKind.RUN_STARTED: Fore.CYAN,
    EventKind.RUN_STOPPED: Fore.CYAN,
    EventKind.CASE_PASSED: Fore.GREEN,
    EventKind.CASE_FAILED: Fore.RED,
    EventKind.DEPRECATION: Fore.YELLOW,
    EventKind.INVALID_REPORTER: Fore.YELLOW,
}


class TerminalSink:
    """Echoes events to the terminal; warnings go to stderr."""

    def __init__(self, *, use_color: bool = True, warnings_to_stderr: bool = True) -> None:
        self._use_color = use_color
        self._warnings_to_stderr = warnings_to_stderr

    def emit(self, event: RunEvent) -> None:
        err = self._warnings_to_stderr and event.level == WARNING
        click.echo(self._styled(event), err=err)

    def _styled(self, event: RunEvent) -> str:
        if not self._use_color:
            return event.message
        color = EVENT_COLORS.get(event.kind, "")
        return f"{color}{event.message}{Style.RESET_ALL}"
