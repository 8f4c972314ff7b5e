"""Test runner walking suites sequentially against a live subject."""
from __future__ import annotations

from typing import Any, Iterable, List, Optional, Sequence

from livetest.reporting.base import (
    REPORTER_DOCS,
    Callback,
    Deferred,
    Realtime,
    resolve_reporter,
)
from livetest.utils import maybe_await

from .clock import Clock, SystemClock
from .events import INFO, WARNING, EventKind, EventSink, RunEvent, TerminalSink
from .models import Case, Suite, TagFilter, select_cases
from .results import CaseOutcome, CaseResult, Report
from .subject import SubjectAdapter

DEPRECATION_MESSAGE = (
    "Deprecation warning: using the `send_report` option is deprecated. "
    "By default, the report is always delivered to the configured reporter."
)
INVALID_REPORTER_MESSAGE = (
    "Could not find a valid reporter. For more information on custom "
    f"reporters, see the documentation here: {REPORTER_DOCS}"
)


class TestRunner:
    """Runs every suite, case by case, and hands the report to a reporter.

    Cases execute strictly one after another; each starts with a cleared and
    resynchronized subject. A failing case is recorded and the run moves on.
    An instance performs a single run.
    """

    __test__ = False

    def __init__(
        self,
        subject: SubjectAdapter,
        suites: Sequence[Suite],
        *,
        start_delay_ms: Optional[float] = None,
        reporter: Any = None,
        send_report: Optional[bool] = None,
        tag_filter: Optional[Iterable[str]] = None,
        sink: Optional[EventSink] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self._subject = subject
        self._suites = tuple(suites)
        self._start_delay_ms = start_delay_ms
        self._reporter = resolve_reporter(reporter)
        # Deprecated: ``None`` means the caller never set it.
        self._send_report = send_report
        self._filter = TagFilter.from_tags(tag_filter)
        self._sink: EventSink = sink if sink is not None else TerminalSink()
        self._clock: Clock = clock if clock is not None else SystemClock()
        self._results: List[CaseResult] = []
        self._error_count = 0

    @property
    def results(self) -> List[CaseResult]:
        return self._results

    @property
    def error_count(self) -> int:
        return self._error_count

    @property
    def reporter(self):
        return self._reporter

    async def run(self) -> Optional[Report]:
        """Start the run after the optional start delay."""

        if self._start_delay_ms:
            await self.pause(self._start_delay_ms)
        return await self.run_test_suites()

    async def run_test_suites(self) -> Optional[Report]:
        """Run each selected case in order, then build and deliver the report.

        Returns ``None`` when the deprecated ``send_report`` flag is false.
        Reporter errors propagate to the caller.
        """

        start = self._clock.now()
        started = self._clock.monotonic()
        self._emit(EventKind.RUN_STARTED, f"Test run started at {start}.", start=start)

        for suite, case in select_cases(self._suites, self._filter):
            await self.run_test(suite, case)

        stop = self._clock.now()
        duration = max(self._clock.monotonic() - started, 0.0)
        self._emit(
            EventKind.RUN_STOPPED,
            f"Test run stopped at {stop}, duration: {duration} seconds.",
            stop=stop,
            duration=duration,
        )

        if self._send_report is not None:
            self._emit(EventKind.DEPRECATION, DEPRECATION_MESSAGE, level=WARNING)
            if not self._send_report:
                return None

        report = Report.build(self._results, self._error_count, duration, start)
        await self._deliver(report)
        return report

    async def run_test(self, suite: Suite, case: Case) -> CaseResult:
        """Run one case: clear state, before_each, re-render, then the body."""

        started = self._clock.monotonic()
        outcome = await self._execute(suite, case)
        elapsed = self._clock.monotonic() - started

        result = CaseResult.build(case.describe_label, case.label, outcome, elapsed)
        if result.passed:
            self._emit(EventKind.CASE_PASSED, result.message, description=result.description)
        else:
            self._emit(
                EventKind.CASE_FAILED,
                result.message,
                level=WARNING,
                description=result.description,
                error_message=result.error_message,
            )
        self._results.append(result)
        if not result.passed:
            self._error_count += 1

        if isinstance(self._reporter, Realtime):
            await maybe_await(self._reporter.target.send(result.fragment()))
        return result

    async def pause(self, duration_ms: float) -> None:
        await self._clock.sleep(duration_ms / 1000)

    async def _execute(self, suite: Suite, case: Case) -> CaseOutcome:
        try:
            await self._subject.clear_async()
            if suite.before_each is not None:
                await maybe_await(suite.before_each(suite))
            await maybe_await(self._subject.re_render())
            await maybe_await(case.body(suite))
        except Exception as exc:
            return CaseOutcome.failure(str(exc) or type(exc).__name__)
        return CaseOutcome.success()

    async def _deliver(self, report: Report) -> None:
        reporter = self._reporter
        if isinstance(reporter, Callback):
            await maybe_await(reporter.fn(report))
        elif isinstance(reporter, Realtime):
            await maybe_await(reporter.target.on_finish(report))
        elif isinstance(reporter, Deferred):
            await maybe_await(reporter.target.send(report))
        else:
            self._emit(EventKind.INVALID_REPORTER, INVALID_REPORTER_MESSAGE)

    def _emit(self, kind: EventKind, message: str, *, level: str = INFO, **data: Any) -> None:
        self._sink.emit(RunEvent(kind=kind, message=message, level=level, data=data))
