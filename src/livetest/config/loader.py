"""YAML loader and validation for run configuration files."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Optional

import yaml
from jsonschema import Draft7Validator

from livetest.errors import ConfigError

from .models import ReportConfig, RunConfig

_STRING_LIST = {"type": "array", "items": {"type": "string", "minLength": 1}}

CONFIG_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "required": ["suites"],
    "additionalProperties": False,
    "properties": {
        "suites": {**_STRING_LIST, "minItems": 1},
        "subject": {"type": "string", "minLength": 1},
        "start_delay_ms": {"type": "integer", "minimum": 0},
        "tags": _STRING_LIST,
        "send_report": {"type": "boolean"},
        "report": {
            "oneOf": [
                {"type": "string", "minLength": 1},
                {
                    "type": "object",
                    "additionalProperties": False,
                    "properties": {
                        "format": {"type": "string", "minLength": 1},
                        "path": {"type": "string", "minLength": 1},
                    },
                },
            ]
        },
        "color": {"type": "boolean"},
    },
}

_validator = Draft7Validator(CONFIG_SCHEMA)


def load_config(path: str) -> RunConfig:
    """Load and validate a run configuration file."""

    config_path = Path(path).expanduser().resolve()
    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Config file {config_path} is not valid YAML: {exc}") from exc
    if not isinstance(raw, Mapping):
        raise ConfigError("Config file must contain a mapping at the top level")
    return parse_config(raw, config_path.parent)


def parse_config(raw: Mapping[str, Any], base: Optional[Path] = None) -> RunConfig:
    errors = sorted(_validator.iter_errors(dict(raw)), key=lambda e: list(e.path))
    if errors:
        messages = "; ".join(f"{'/'.join(map(str, err.path)) or 'root'}: {err.message}" for err in errors)
        raise ConfigError(f"Config schema validation failed: {messages}")
    tags = raw.get("tags")
    return RunConfig(
        suites=tuple(raw["suites"]),
        subject=raw.get("subject"),
        start_delay_ms=raw.get("start_delay_ms"),
        tags=tuple(tags) if tags is not None else None,
        send_report=raw.get("send_report"),
        report=_parse_report(raw.get("report"), base),
        color=bool(raw.get("color", True)),
        config_dir=base,
    )


def _parse_report(raw: Any, base: Optional[Path]) -> ReportConfig:
    if raw is None:
        return ReportConfig()
    if isinstance(raw, str):
        return ReportConfig(format=raw)
    path = raw.get("path")
    if path and base is not None and not Path(path).is_absolute():
        path = str(base / path)
    return ReportConfig(format=raw.get("format", "terminal"), path=path)
