"""Terminal reporter rendering the end-of-run summary."""
from __future__ import annotations

import click

from livetest.core.results import Report


class TerminalReporter:
    """Callback reporter printing a summary and failure details to stdout."""

    def __init__(self, *, use_color: bool = True) -> None:
        self._use_color = use_color

    def __call__(self, report: Report) -> None:
        total = len(report.results)
        passed = total - report.error_count
        color = "green" if report.passed else "red"
        click.echo(
            self._styled(
                f"Summary: total={total} passed={passed} failed={report.error_count} "
                f"duration={report.duration:.2f}s",
                color,
            )
        )
        failures = [result for result in report.results if not result.passed]
        if not failures:
            return
        click.echo(self._styled("Failure details:", "red"))
        for index, result in enumerate(failures, start=1):
            click.echo(f"  [{index}] {result.description} ({result.time * 1000:.2f} ms)")
            click.echo(f"    error: {result.error_message}")

    def _styled(self, text: str, color: str) -> str:
        if not self._use_color:
            return text
        return click.style(text, fg=color)
