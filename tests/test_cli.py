import json

from click.testing import CliRunner

from livetest.cli.main import cli, main


def test_cli_help_short_flag() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["-h"])
    assert result.exit_code == 0
    assert "Usage:" in result.output
    assert "run" in result.output


def test_cli_version() -> None:
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert result.output.startswith("livetest ")


def test_cli_run_passing_suite() -> None:
    result = CliRunner().invoke(
        cli,
        [
            "run",
            "--suite",
            "tests.sample_suites:passing",
            "--subject",
            "tests.sample_suites:CounterSubject",
            "--no-color",
        ],
    )
    assert result.exit_code == 0, result.output
    assert "Form: echoes input  ✅" in result.output
    assert "Summary: total=2 passed=2 failed=0" in result.output


def test_cli_run_with_failures_exits_nonzero() -> None:
    result = CliRunner().invoke(cli, ["run", "--suite", "tests.sample_suites:suites", "--no-color"])
    assert result.exit_code == 1
    assert "Toolbar: has save button" in result.output
    assert "expected a button labelled 'Save'" in result.output


def test_cli_tags_filter() -> None:
    result = CliRunner().invoke(
        cli, ["run", "--suite", "tests.sample_suites:suites", "--tags", "smoke", "--no-color"]
    )
    assert result.exit_code == 0, result.output
    assert "Summary: total=1 passed=1 failed=0" in result.output


def test_cli_list_only() -> None:
    result = CliRunner().invoke(
        cli, ["run", "--suite", "tests.sample_suites:suites", "--tags", "smoke,toolbar", "--list"]
    )
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["Form: echoes input", "Toolbar: has save button"]


def test_cli_config_with_json_report(tmp_path) -> None:
    report_path = tmp_path / "report.json"
    config = tmp_path / "livetest.yaml"
    config.write_text(
        f"""
suites: ["tests.sample_suites:suites"]
subject: tests.sample_suites:CounterSubject
tags: [smoke, toolbar]
report:
  format: json
  path: {report_path.as_posix()}
color: false
""",
        encoding="utf-8",
    )
    result = CliRunner().invoke(cli, ["run", "--config", str(config)])
    assert result.exit_code == 1, result.output
    payload = json.loads(report_path.read_text(encoding="utf-8"))
    assert payload["report"]["errorCount"] == 1
    assert [case["description"] for case in payload["report"]["results"]] == [
        "Form: echoes input",
        "Toolbar: has save button",
    ]


def test_cli_send_report_false_skips_reporter(tmp_path) -> None:
    report_path = tmp_path / "report.json"
    config = tmp_path / "livetest.yaml"
    config.write_text(
        'suites: ["tests.sample_suites:passing"]\nsend_report: false\ncolor: false\n',
        encoding="utf-8",
    )
    result = CliRunner().invoke(
        cli, ["run", "--config", str(config), "--report", "json", "--report-path", str(report_path)]
    )
    assert result.exit_code == 0, result.output
    assert "Deprecation warning" in result.output
    assert not report_path.exists()


def test_cli_unknown_reporter() -> None:
    result = CliRunner().invoke(
        cli, ["run", "--suite", "tests.sample_suites:passing", "--report", "carrier-pigeon"]
    )
    assert result.exit_code == 2
    assert "unknown reporter 'carrier-pigeon'" in result.output


def test_cli_requires_suites() -> None:
    result = CliRunner().invoke(cli, ["run"])
    assert result.exit_code == 2
    assert "No suites given" in result.output


def test_cli_bad_suite_path() -> None:
    result = CliRunner().invoke(cli, ["run", "--suite", "tests.sample_suites:nothing_here"])
    assert result.exit_code == 1
    assert "has no attribute" in result.output


def test_cli_invalid_config(tmp_path) -> None:
    config = tmp_path / "livetest.yaml"
    config.write_text("subject: x:y\n", encoding="utf-8")
    result = CliRunner().invoke(cli, ["run", "--config", str(config)])
    assert result.exit_code == 1
    assert "Config schema validation failed" in result.output


def test_main_returns_exit_code() -> None:
    assert main(["run", "--suite", "tests.sample_suites:passing", "--no-color"]) == 0
