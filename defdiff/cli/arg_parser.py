"""Argument parsing for the defdiff CLI."""

import argparse
from pathlib import Path

from defdiff import __version__


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="defdiff",
        description="Report added/updated definitions from git diff output",
    )
    parser.add_argument(
        "dir",
        nargs="?",
        type=Path,
        default=Path("."),
        help="Repository directory to inspect (default: current directory)",
    )
    parser.add_argument(
        "--definitions", "-d",
        type=Path,
        metavar="FILE",
        help="JSON file mapping paths to definition records",
    )
    parser.add_argument(
        "--base", "-b",
        metavar="REF",
        help="Ref to diff the working tree against (default from config: HEAD)",
    )
    parser.add_argument(
        "--format", "-f",
        choices=["table", "markdown", "json"],
        help="Output format (default from config: table)",
    )
    parser.add_argument(
        "--output", "-o",
        type=Path,
        metavar="FILE",
        help="Write markdown/json output to a file instead of stdout (not valid with table)",
    )
    parser.add_argument(
        "--numstat-file",
        type=Path,
        metavar="FILE",
        help="Read numstat text from a file instead of running git",
    )
    parser.add_argument(
        "--diff-file",
        type=Path,
        metavar="FILE",
        help="Read unified diff text from a file instead of running git",
    )
    parser.add_argument(
        "--all", "-a",
        action="store_true",
        dest="show_unchanged",
        help="Also list unchanged files and definitions",
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        metavar="FILE",
        help="Explicit config file (skips layered config lookup)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)
