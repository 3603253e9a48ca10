"""defdiff display system.

Renders change reports as a Rich table, Markdown, or JSON.
"""

from defdiff.display.console import get_console, set_console
from defdiff.display.report import (
    build_table,
    render_json,
    render_markdown,
    render_table,
    report_to_dict,
)
from defdiff.display.theme import DEFAULT_THEME, Theme

__all__ = [
    # Console
    "get_console",
    "set_console",
    # Report rendering
    "build_table",
    "render_json",
    "render_markdown",
    "render_table",
    "report_to_dict",
    # Theme
    "DEFAULT_THEME",
    "Theme",
]
