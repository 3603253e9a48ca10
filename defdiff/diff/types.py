"""Types for git diff change information.

This module provides dataclasses for the structured results of parsing
`git diff` output: hunk ranges, per-file hunk lists and line totals, and
the definition records that diff information is attached to.
"""

from dataclasses import dataclass, field
from enum import Enum


class DiffStatus(str, Enum):
    """Change classification for a single definition."""

    ADDED = "added"  # Every line of the definition is new
    UPDATED = "updated"  # Some lines changed or were removed


@dataclass
class DiffHunk:
    """A single hunk header from a unified diff.

    Only the line ranges are kept; hunk content is never inspected.

    Attributes:
        old_start: First line in the original file (1-indexed)
        old_count: Number of original lines in the hunk (0 for pure insertion)
        new_start: First line in the new file (1-indexed)
        new_count: Number of new lines in the hunk (0 for pure deletion)

    A zero-count side still carries a valid anchor line: the line after
    which the insertion or deletion happened.
    """

    old_start: int
    old_count: int
    new_start: int
    new_count: int

    @property
    def new_end(self) -> int:
        """Last line of the new-side span (inclusive)."""
        return self.new_start + self.new_count - 1


@dataclass
class FileDiff:
    """All hunks for one file, in source order.

    Attributes:
        path: Normalized destination path (the b/ side of the diff)
        hunks: Hunk headers for this file; never empty when built by the parser
    """

    path: str
    hunks: list[DiffHunk] = field(default_factory=list)


@dataclass
class FileDiffStats:
    """File-level added/deleted line totals."""

    added: int
    deleted: int


@dataclass
class DefinitionDiff:
    """Diff information attached to a definition.

    Attributes:
        status: ADDED when the whole definition is new, UPDATED otherwise
        added: Lines of the definition inside changed/inserted regions
        deleted: Removed lines attributed to the definition
    """

    status: DiffStatus
    added: int
    deleted: int


@dataclass
class Definition:
    """A named source construct (function, class, type...) with its line range.

    Definitions come from an external extractor. Lines are 1-based and
    inclusive, with line <= end_line.
    """

    name: str
    line: int
    end_line: int
    type: str = "function"
    exported: bool = False
    diff: DefinitionDiff | None = None


@dataclass
class DiffData:
    """File stats and hunk data gathered for one working tree."""

    file_stats: dict[str, FileDiffStats] = field(default_factory=dict)
    file_diffs: dict[str, FileDiff] = field(default_factory=dict)
