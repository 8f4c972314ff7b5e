"""JSON reporter writing the final report to disk."""
from __future__ import annotations

import datetime as dt
import json
import pathlib
from typing import Any, Dict

import click
from jsonschema import validate

from livetest.core.results import Report

from .base import DeferredReporter
from .schema import JSON_SCHEMA_V1, SCHEMA_VERSION


class JsonReporter(DeferredReporter):
    """Writes the report to a JSON file validated against the schema."""

    def __init__(self, path: str) -> None:
        self._path = pathlib.Path(path)

    @property
    def path(self) -> pathlib.Path:
        return self._path

    async def send(self, report: Report) -> None:
        payload = build_payload(report)
        validate(instance=payload, schema=JSON_SCHEMA_V1)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError as exc:  # pragma: no cover - filesystem protection
            raise RuntimeError(f"Failed to write JSON report to {self._path}: {exc}") from exc
        click.echo(f"JSON report written to {self._path}")


def build_payload(report: Report) -> Dict[str, Any]:
    return {
        "schema_version": SCHEMA_VERSION,
        "generated_at": dt.datetime.now(dt.timezone.utc).isoformat(timespec="seconds"),
        "report": report.to_dict(),
    }
