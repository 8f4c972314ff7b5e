"""Realtime reporter streaming one JSON line per case."""
from __future__ import annotations

import json
import pathlib
import sys
from typing import IO, Any, Mapping, Optional

from jsonschema import validate

from livetest.core.results import Report

from .base import RealtimeReporter
from .schema import FRAGMENT_SCHEMA


class JsonLinesReporter(RealtimeReporter):
    """Appends each case fragment as it completes, then a summary line.

    Lines go to ``path`` when given, otherwise to stdout.
    """

    def __init__(self, path: Optional[str] = None, *, stream: Optional[IO[str]] = None) -> None:
        self._path = pathlib.Path(path) if path else None
        self._stream = stream
        self._opened = False

    async def send(self, fragment: Mapping[str, Any]) -> None:
        validate(instance=dict(fragment), schema=FRAGMENT_SCHEMA)
        self._write({"event": "case", **fragment})

    async def on_finish(self, report: Report) -> None:
        self._write(
            {
                "event": "finish",
                "total": len(report.results),
                "errorCount": report.error_count,
                "duration": report.duration,
            }
        )

    def _write(self, record: Mapping[str, Any]) -> None:
        line = json.dumps(record, ensure_ascii=False)
        if self._path is None:
            stream = self._stream or sys.stdout
            stream.write(line + "\n")
            stream.flush()
            return
        # First write truncates so a rerun does not mix with old lines.
        mode = "a" if self._opened else "w"
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open(mode, encoding="utf-8") as handle:
            handle.write(line + "\n")
        self._opened = True
