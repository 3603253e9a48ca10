"""Rendering change reports as a Rich table, Markdown, or JSON."""

import json
from collections.abc import Sequence
from typing import Any

from rich.console import Console
from rich.table import Table
from rich.text import Text

from defdiff.diff.types import Definition, FileDiffStats
from defdiff.display.console import get_console
from defdiff.display.theme import DEFAULT_THEME, Theme
from defdiff.report import FileReport


def _format_stats(stats: FileDiffStats | None) -> str:
    if stats is None:
        return ""
    return f"+{stats.added} -{stats.deleted}"


def _status_label(definition: Definition) -> str:
    return definition.diff.status.value if definition.diff else "unchanged"


def build_table(reports: Sequence[FileReport], theme: Theme = DEFAULT_THEME) -> Table:
    """Build a Rich table with one row per file and one per definition."""
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Path / Definition")
    table.add_column("Status")
    table.add_column("Added", justify="right", style=theme.added)
    table.add_column("Deleted", justify="right", style=theme.deleted)

    for report in reports:
        stats = report.stats
        table.add_row(
            Text(report.path, style=theme.path),
            "",
            f"+{stats.added}" if stats else "",
            f"-{stats.deleted}" if stats else "",
        )
        for definition in report.definitions:
            label = Text("  ")
            label.append(definition.name)
            label.append(
                f" {definition.type}:{definition.line}-{definition.end_line}",
                style=theme.definition_type,
            )
            diff = definition.diff
            status_style = theme.status_style(diff.status if diff else None)
            table.add_row(
                label,
                Text(_status_label(definition), style=status_style),
                f"+{diff.added}" if diff else "",
                f"-{diff.deleted}" if diff else "",
            )

    return table


def render_table(
    reports: Sequence[FileReport],
    console: Console | None = None,
    theme: Theme = DEFAULT_THEME,
) -> None:
    """Print reports to the console as a table."""
    console = console or get_console()
    if not reports:
        console.print(f"[{theme.info}]No changes detected.[/]")
        return
    console.print(build_table(reports, theme))


def render_markdown(reports: Sequence[FileReport]) -> str:
    """Render reports as a Markdown bullet list.

    Example output:
        - **src/app.py** +12 -3
          - `main`:10 updated +4 -2
    """
    lines: list[str] = []
    for report in reports:
        stats = _format_stats(report.stats)
        lines.append(f"- **{report.path}**" + (f" {stats}" if stats else ""))
        for definition in report.definitions:
            entry = f"  - `{definition.name}`:{definition.line} {_status_label(definition)}"
            if definition.diff:
                entry += f" +{definition.diff.added} -{definition.diff.deleted}"
            lines.append(entry)
    return "\n".join(lines)


def _definition_to_dict(definition: Definition) -> dict[str, Any]:
    data: dict[str, Any] = {
        "name": definition.name,
        "line": definition.line,
        "endLine": definition.end_line,
        "type": definition.type,
        "exported": definition.exported,
    }
    if definition.diff:
        data["diff"] = {
            "status": definition.diff.status.value,
            "added": definition.diff.added,
            "deleted": definition.diff.deleted,
        }
    return data


def report_to_dict(report: FileReport) -> dict[str, Any]:
    """Convert a FileReport to a JSON-compatible dict."""
    data: dict[str, Any] = {"path": report.path}
    if report.stats:
        data["added"] = report.stats.added
        data["deleted"] = report.stats.deleted
    data["definitions"] = [_definition_to_dict(d) for d in report.definitions]
    return data


def render_json(reports: Sequence[FileReport]) -> str:
    """Render reports as an indented JSON array."""
    return json.dumps([report_to_dict(r) for r in reports], indent=2)
