from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from livetest.config import ReportConfig, RunConfig, load_config, parse_config
from livetest.errors import ConfigError


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "livetest.yaml"
    path.write_text(textwrap.dedent(text), encoding="utf-8")
    return path


def test_load_full_config(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
        suites: ["tests.sample_suites:suites"]
        subject: tests.sample_suites:CounterSubject
        start_delay_ms: 200
        tags: [smoke, toolbar]
        send_report: true
        report:
          format: json
          path: out/report.json
        color: false
        """,
    )
    config = load_config(str(path))
    assert config.suites == ("tests.sample_suites:suites",)
    assert config.subject == "tests.sample_suites:CounterSubject"
    assert config.start_delay_ms == 200
    assert config.tags == ("smoke", "toolbar")
    assert config.send_report is True
    assert config.report == ReportConfig(format="json", path=str(tmp_path.resolve() / "out/report.json"))
    assert config.color is False
    assert config.config_dir == tmp_path.resolve()


def test_minimal_config_defaults() -> None:
    config = parse_config({"suites": ["a:b"]})
    assert config.tags is None
    assert config.start_delay_ms is None
    assert config.send_report is None
    assert config.report == ReportConfig()
    assert config.color is True


def test_report_shorthand_string() -> None:
    assert parse_config({"suites": ["a:b"], "report": "jsonl"}).report.format == "jsonl"


def test_empty_tag_list_is_kept() -> None:
    assert parse_config({"suites": ["a:b"], "tags": []}).tags == ()


@pytest.mark.parametrize(
    "raw, fragment",
    [
        ({}, "'suites' is a required property"),
        ({"suites": []}, "suites"),
        ({"suites": ["a:b"], "start_delay_ms": -5}, "start_delay_ms"),
        ({"suites": ["a:b"], "unknown": 1}, "Additional properties"),
        ({"suites": ["a:b"], "send_report": "yes"}, "send_report"),
    ],
)
def test_schema_errors(raw, fragment) -> None:
    with pytest.raises(ConfigError) as excinfo:
        parse_config(raw)
    assert "Config schema validation failed" in str(excinfo.value)
    assert fragment in str(excinfo.value)


def test_non_mapping_file_rejected(tmp_path: Path) -> None:
    path = _write(tmp_path, "- just\n- a list\n")
    with pytest.raises(ConfigError, match="mapping"):
        load_config(str(path))


def test_invalid_yaml_rejected(tmp_path: Path) -> None:
    path = _write(tmp_path, "suites: [unclosed\n")
    with pytest.raises(ConfigError, match="not valid YAML"):
        load_config(str(path))


def test_merged_applies_overrides() -> None:
    base = RunConfig(suites=("a:b",), tags=("smoke",), report=ReportConfig(format="json", path="r.json"))
    merged = base.merged(tags=None, start_delay_ms=50, report_format="terminal", color=False)
    assert merged.tags == ("smoke",)
    assert merged.start_delay_ms == 50
    assert merged.report == ReportConfig(format="terminal", path="r.json")
    assert merged.color is False
    assert base.start_delay_ms is None
