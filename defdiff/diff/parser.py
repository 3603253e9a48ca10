"""Parsers for `git diff` text output.

This module turns the two git diff formats defdiff consumes into
structured objects:

- `--numstat` rows into per-file FileDiffStats
- `--unified=0` text into per-file FileDiff hunk lists

Parsing is best-effort. Malformed rows and headers are skipped, never
raised, so a partially garbled diff still yields everything readable.
"""

import re

from defdiff.diff.types import DiffHunk, FileDiff, FileDiffStats

# Pattern for hunk header: @@ -old_start[,old_count] +new_start[,new_count] @@ [context]
HUNK_HEADER_RE = re.compile(
    r"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@(.*)$"
)

# Pattern for git extended diff header: diff --git a/src/x.py b/src/x.py
GIT_DIFF_RE = re.compile(r"^diff --git a/.+ b/(?P<path>.+)$")

# Quoted form, used when either path needs escaping:
#   diff --git "a/with space.py" "b/with space.py"
GIT_DIFF_QUOTED_RE = re.compile(
    r'^diff --git "a/(?:[^"\\]|\\.)*" "b/(?P<path>(?:[^"\\]|\\.)*)"$'
)

FILE_HEADER_PREFIX = "diff --git "
BINARY_PREFIX = "Binary files "
HUNK_PREFIX = "@@"
BINARY_COUNT = "-"


def normalize_path(path: str) -> str:
    """Canonicalize a path token from git output.

    Git wraps paths containing special or non-ASCII characters in double
    quotes and escapes quotes and backslashes inside them. Quoted tokens
    are unwrapped and unescaped; backslashes are then turned into forward
    slashes so Windows-style paths compare equal.

    Args:
        path: Raw path token from a diff or numstat line.

    Returns:
        Normalized path. Malformed input is returned on a best-effort basis.
    """
    if len(path) >= 2 and path.startswith('"') and path.endswith('"'):
        path = path[1:-1]
        path = path.replace('\\"', '"').replace("\\\\", "\\")
    return path.replace("\\", "/")


def _split_lines(text: str) -> list[str]:
    """Split on newlines only, dropping a trailing carriage return."""
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


def _parse_count(value: str) -> int | None:
    """Parse a plain decimal count, returning None when it isn't one."""
    if not (value.isascii() and value.isdigit()):
        return None
    return int(value)


def parse_numstat(text: str) -> dict[str, FileDiffStats]:
    """Parse `git diff --numstat` output into per-file stats.

    Row format is ``added<TAB>deleted<TAB>path``; binary files show ``-``
    for both counts and are skipped, as are rows with no changes and rows
    that don't parse. When a path repeats, the later row wins.

    Args:
        text: Full numstat output.

    Returns:
        Mapping of normalized path to FileDiffStats.

    Example:
        >>> parse_numstat("10\\t5\\tsrc/foo.py")
        {'src/foo.py': FileDiffStats(added=10, deleted=5)}
    """
    stats: dict[str, FileDiffStats] = {}
    if not text or not text.strip():
        return stats

    for line in _split_lines(text):
        if not line.strip():
            continue

        parts = line.split("\t")
        if len(parts) < 3:
            continue

        added_str, deleted_str = parts[0], parts[1]
        # Paths may contain literal tabs
        path = normalize_path("\t".join(parts[2:]))

        if added_str == BINARY_COUNT or deleted_str == BINARY_COUNT:
            continue

        added = _parse_count(added_str)
        deleted = _parse_count(deleted_str)
        if added is None or deleted is None:
            continue
        if added == 0 and deleted == 0:
            continue

        stats[path] = FileDiffStats(added=added, deleted=deleted)

    return stats


def parse_hunk_header(line: str) -> DiffHunk | None:
    """Parse a hunk header line into a DiffHunk.

    Args:
        line: A line such as ``@@ -10,5 +12,7 @@ def name():``.

    Returns:
        DiffHunk with the header's ranges, or None if the line is not a
        well-formed hunk header. Omitted counts default to 1.
    """
    match = HUNK_HEADER_RE.match(line)
    if not match:
        return None

    old_start, old_count, new_start, new_count = match.group(1, 2, 3, 4)
    # Count defaults to 1 if omitted (e.g., @@ -10 +12,7 @@)
    return DiffHunk(
        old_start=int(old_start),
        old_count=int(old_count) if old_count else 1,
        new_start=int(new_start),
        new_count=int(new_count) if new_count else 1,
    )


def _destination_path(line: str) -> str | None:
    """Extract the normalized b/ path from a ``diff --git`` line."""
    match = GIT_DIFF_QUOTED_RE.match(line)
    if match:
        return normalize_path(f'"{match.group("path")}"')
    match = GIT_DIFF_RE.match(line)
    if not match:
        return None
    return normalize_path(match.group("path"))


def parse_diff(text: str) -> dict[str, FileDiff]:
    """Parse `git diff --unified=0` output into per-file hunk lists.

    Only hunk boundaries are read; content, index and mode lines are
    ignored. Files are keyed by their destination (b/) path. Sections
    without hunks (renames, mode changes) and binary sections are dropped.

    Args:
        text: Full unified diff output.

    Returns:
        Mapping of normalized path to FileDiff, in order of first
        appearance in the input.
    """
    files: dict[str, FileDiff] = {}
    if not text or not text.strip():
        return files

    current_path: str | None = None
    current_hunks: list[DiffHunk] = []

    def flush() -> None:
        if current_path and current_hunks:
            files[current_path] = FileDiff(path=current_path, hunks=current_hunks)

    for line in _split_lines(text):
        if line.startswith(FILE_HEADER_PREFIX):
            flush()
            current_path = _destination_path(line)
            current_hunks = []
            continue

        if line.startswith(BINARY_PREFIX):
            current_path = None
            current_hunks = []
            continue

        if line.startswith(HUNK_PREFIX) and current_path:
            hunk = parse_hunk_header(line)
            if hunk is not None:
                current_hunks.append(hunk)

    flush()
    return files
