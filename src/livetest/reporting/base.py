"""Reporter interface definitions.

A reporter takes one of three shapes:

* callback: any callable invoked once with the final :class:`Report`;
* realtime: ``send(fragment)`` after every case plus ``on_finish(report)``;
* deferred: ``send(report)`` once at the end of the run.

:func:`resolve_reporter` turns whatever was configured into one of the
:class:`Callback`, :class:`Realtime`, :class:`Deferred` or
:class:`Unrecognized` variants once, before the run starts.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Mapping, Union

if TYPE_CHECKING:  # pragma: no cover
    from livetest.core.results import Report

REPORTER_DOCS = "docs/reporters.md"

REALTIME = "realtime"
DEFERRED = "deferred"


class RealtimeReporter:
    """Base class for reporters streaming each case as it completes."""

    type = REALTIME

    async def send(self, fragment: Mapping[str, Any]) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    async def on_finish(self, report: Report) -> None:  # pragma: no cover - interface
        raise NotImplementedError


class DeferredReporter:
    """Base class for reporters receiving the full report once."""

    type = DEFERRED

    async def send(self, report: Report) -> None:  # pragma: no cover - interface
        raise NotImplementedError


@dataclass(frozen=True)
class Callback:
    fn: Callable[[Report], Any]


@dataclass(frozen=True)
class Realtime:
    target: Any


@dataclass(frozen=True)
class Deferred:
    target: Any


@dataclass(frozen=True)
class Unrecognized:
    value: Any


ResolvedReporter = Union[Callback, Realtime, Deferred, Unrecognized]


def resolve_reporter(value: Any) -> ResolvedReporter:
    """Classify ``value`` into a reporter variant.

    The declared ``type`` marker wins over callability, so a realtime or
    deferred object that also happens to be callable keeps its shape.
    """

    if isinstance(value, (Callback, Realtime, Deferred, Unrecognized)):
        return value
    kind = getattr(value, "type", None)
    if kind == REALTIME and _has_methods(value, "send", "on_finish"):
        return Realtime(value)
    if kind == DEFERRED and _has_methods(value, "send"):
        return Deferred(value)
    if callable(value):
        return Callback(value)
    return Unrecognized(value)


def _has_methods(value: Any, *names: str) -> bool:
    return all(callable(getattr(value, name, None)) for name in names)
