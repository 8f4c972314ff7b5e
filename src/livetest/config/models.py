"""Data models for run configuration files."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Sequence


@dataclass(frozen=True)
class ReportConfig:
    format: str = "terminal"
    path: Optional[str] = None


@dataclass(frozen=True)
class RunConfig:
    suites: Sequence[str] = field(default_factory=tuple)
    subject: Optional[str] = None
    start_delay_ms: Optional[int] = None
    tags: Optional[Sequence[str]] = None
    send_report: Optional[bool] = None
    report: ReportConfig = field(default_factory=ReportConfig)
    color: bool = True
    config_dir: Optional[Path] = None

    def merged(self, **overrides: Any) -> "RunConfig":
        """Return a copy with every non-``None`` override applied."""

        values = {key: value for key, value in overrides.items() if value is not None}
        report_format = values.pop("report_format", None)
        report_path = values.pop("report_path", None)
        if report_format is not None or report_path is not None:
            values["report"] = ReportConfig(
                format=report_format or self.report.format,
                path=report_path if report_path is not None else self.report.path,
            )
        return dataclasses.replace(self, **values)
