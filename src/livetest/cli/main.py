"""CLI entry point for livetest."""
from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Optional, Tuple

import click
from colorama import init as colorama_init

from livetest import __version__, bootstrap
from livetest.config import RunConfig, load_config
from livetest.core import TagFilter, TerminalSink, TestRunner, select_cases
from livetest.core.loading import load_subject, load_suites
from livetest.errors import LivetestError
from livetest.reporting.registry import ReporterOptions, registry


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


class CliState:
    """Holds global CLI state (future expansion)."""

    def __init__(self, verbose: bool) -> None:
        self.verbose = verbose


def _print_version(_: click.Context, __: click.Parameter, value: bool) -> None:
    if not value or click.get_current_context().resilient_parsing:
        return
    click.echo(f"livetest {__version__}")
    raise click.exceptions.Exit()


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option("--verbose", is_flag=True, help="Show full tracebacks on errors.")
@click.option(
    "--version",
    is_flag=True,
    callback=_print_version,
    expose_value=False,
    is_eager=True,
    help="Show the livetest version and exit.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Top level CLI group for livetest."""

    bootstrap()
    ctx.obj = CliState(verbose=verbose)


@cli.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML run configuration file.",
)
@click.option("--suite", "suite_paths", multiple=True, help="Suite path as module:attr (repeatable).")
@click.option("--subject", "subject_path", type=str, help="Subject adapter as module:attr.")
@click.option("--tags", "tag_filters", type=str, help="Comma-separated tags to include.")
@click.option("--start-delay", "start_delay_ms", type=click.IntRange(min=0), help="Delay in ms before the first suite.")
@click.option("--report", "report_format", type=str, help="Reporter name (terminal, json, jsonl or a plugin).")
@click.option("--report-path", type=str, help="Output path for file-writing reporters.")
@click.option("--no-color", is_flag=True, help="Disable ANSI colors in terminal output.")
@click.option("--list", "list_only", is_flag=True, help="List matched cases without running.")
@click.pass_obj
def run(
    state: CliState,
    config_path: Optional[str],
    suite_paths: Tuple[str, ...],
    subject_path: Optional[str],
    tag_filters: Optional[str],
    start_delay_ms: Optional[int],
    report_format: Optional[str],
    report_path: Optional[str],
    no_color: bool,
    list_only: bool,
) -> None:
    """Run test suites against a live subject."""

    try:
        base = load_config(config_path) if config_path else RunConfig()
    except LivetestError as exc:
        raise click.ClickException(str(exc)) from exc
    config = base.merged(
        suites=suite_paths or None,
        subject=subject_path,
        tags=_split_csv(tag_filters),
        start_delay_ms=start_delay_ms,
        report_format=report_format,
        report_path=report_path,
        color=False if no_color else None,
    )
    if not config.suites:
        raise click.UsageError("No suites given; pass --suite or a --config file with 'suites'.")
    if config.report.format not in registry:
        available = ", ".join(sorted(registry.names()))
        raise click.BadParameter(
            f"unknown reporter '{config.report.format}' (available: {available})", param_hint="--report"
        )
    _ensure_importable(config.config_dir)
    try:
        suites = load_suites(config.suites)
        if list_only:
            for _, case in select_cases(suites, TagFilter.from_tags(config.tags)):
                click.echo(case.description)
            raise click.exceptions.Exit(0)
        if config.color:
            colorama_init()
        reporter = registry.create(
            config.report.format,
            ReporterOptions(path=config.report.path, use_color=config.color),
        )
        runner = TestRunner(
            load_subject(config.subject),
            suites,
            start_delay_ms=config.start_delay_ms,
            reporter=reporter,
            send_report=config.send_report,
            tag_filter=config.tags,
            sink=TerminalSink(use_color=config.color),
        )
        asyncio.run(runner.run())
    except LivetestError as exc:
        if state.verbose:
            raise
        raise click.ClickException(str(exc)) from exc
    raise click.exceptions.Exit(0 if runner.error_count == 0 else 1)


def main(argv: Optional[list[str]] = None) -> int:
    """Program entry point for console_scripts shim."""

    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=argv, prog_name="livetest", standalone_mode=True)
    except click.ClickException as err:  # pragma: no cover - click handles display
        err.show()
        return err.exit_code
    except SystemExit as exc:  # click may raise exit code
        return int(exc.code or 0)
    return 0


def _ensure_importable(directory: Optional[Path]) -> None:
    # Suites named in a config file usually live beside it.
    if directory is not None and str(directory) not in sys.path:
        sys.path.insert(0, str(directory))


def _split_csv(value: Optional[str]) -> Optional[Tuple[str, ...]]:
    if not value:
        return None
    parts = [part.strip() for part in value.split(",") if part.strip()]
    return tuple(parts) or None


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
