"""Entry point for the defdiff CLI."""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError
from rich.markup import escape

from defdiff.cli.arg_parser import parse_args
from defdiff.config import Config, GitConfig, load_config
from defdiff.core.errors import DefDiffError, LoadError
from defdiff.definitions import load_definitions
from defdiff.diff.source import DiffSource, GitDiffSource, StaticDiffSource, get_all_diff_data
from defdiff.display import get_console, render_json, render_markdown, render_table
from defdiff.report import build_report

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Send defdiff.* log records to stderr.

    WARNING and above by default, DEBUG with verbose. Reconfiguring
    replaces the previous handler.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))

    defdiff_logger = logging.getLogger("defdiff")
    defdiff_logger.handlers.clear()
    defdiff_logger.addHandler(handler)
    defdiff_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    defdiff_logger.propagate = False


def _read_text(path: Path | None, what: str) -> str:
    if path is None:
        return ""
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise LoadError(f"{what}: Failed to read file {path}: {e}") from e


def _resolve_config(args: argparse.Namespace) -> Config:
    config = load_config(path=args.config, cwd=args.dir.resolve())
    try:
        if args.base:
            git = GitConfig.model_validate({**config.git.model_dump(), "base_ref": args.base})
            config = config.model_copy(update={"git": git})
    except ValidationError as e:
        raise DefDiffError(f"Invalid --base: {e.errors()[0]['msg']}") from e
    if args.format:
        config = config.model_copy(
            update={"report": config.report.model_copy(update={"format": args.format})}
        )
    if args.show_unchanged:
        config = config.model_copy(
            update={"report": config.report.model_copy(update={"show_unchanged": True})}
        )
    return config


def _build_source(args: argparse.Namespace, config: Config) -> DiffSource:
    if args.numstat_file is not None or args.diff_file is not None:
        return StaticDiffSource(
            numstat=_read_text(args.numstat_file, "numstat"),
            unified_diff=_read_text(args.diff_file, "diff"),
        )
    return GitDiffSource(args.dir, config.git)


def run(args: argparse.Namespace) -> int:
    """Run a report for parsed arguments and return the exit code."""
    config = _resolve_config(args)
    fmt = config.report.format
    if args.output and fmt == "table":
        raise DefDiffError("--output needs --format markdown or json")
    source = _build_source(args, config)

    diff_data = get_all_diff_data(source)
    logger.debug(
        "Diff data: %d files with stats, %d with hunks",
        len(diff_data.file_stats),
        len(diff_data.file_diffs),
    )
    definitions = load_definitions(args.definitions) if args.definitions else {}

    reports = build_report(
        definitions,
        diff_data,
        include_unchanged=config.report.show_unchanged,
        sort_paths=config.report.sort_paths,
    )

    if fmt == "table":
        render_table(reports)
        return 0

    content = render_json(reports) if fmt == "json" else render_markdown(reports)
    console = get_console()
    if args.output:
        args.output.write_text(content + "\n", encoding="utf-8")
        console.print(f"[dim]Wrote report to {escape(str(args.output))}[/dim]")
    elif content:
        # JSON on stdout stays a bare document, even when empty
        print(content)
    if not reports and (args.output or fmt != "json"):
        console.print("[dim]No changes detected.[/dim]")
    return 0


def main(argv: list[str] | None = None) -> None:
    """Entry point for the defdiff CLI."""
    args = parse_args(argv)
    configure_logging(args.verbose)
    try:
        exit_code = run(args)
    except DefDiffError as e:
        get_console().print(f"[bold red]Error:[/bold red] {escape(e.message)}")
        exit_code = 1
    except OSError as e:
        get_console().print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        exit_code = 1
    raise SystemExit(exit_code)
