"""Embed the runner directly and stream results as JSON lines."""
from __future__ import annotations

import asyncio
import sys

from app import TodoSubject
from suites import suites

from livetest.core import TestRunner
from livetest.reporting import JsonLinesReporter


async def main() -> int:
    runner = TestRunner(
        TodoSubject(),
        suites,
        start_delay_ms=100,
        reporter=JsonLinesReporter(stream=sys.stdout),
        tag_filter=sys.argv[1:] or None,
    )
    report = await runner.run()
    return 0 if report is None or report.passed else 1


if __name__ == "__main__":
    raise SystemExit(asyncio.run(main()))
