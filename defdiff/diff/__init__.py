"""Diff module for parsing git diff output and classifying definition changes.

Main components:
- Types: DiffHunk, FileDiff, FileDiffStats, Definition, DefinitionDiff
- Parser: parse_numstat(), parse_diff(), parse_hunk_header(), normalize_path()
- Classifier: calculate_definition_diff(), apply_diff_to_definitions()
- Source: DiffSource protocol, GitDiffSource, get_all_diff_data()

Example usage:
    >>> from defdiff.diff import Definition, parse_diff, apply_diff_to_definitions
    >>> diff_text = '''\\
    ... diff --git a/app.py b/app.py
    ... @@ -5,0 +10,6 @@
    ... '''
    >>> files = parse_diff(diff_text)
    >>> defs = [Definition(name="handler", line=10, end_line=15)]
    >>> apply_diff_to_definitions(defs, files["app.py"])[0].diff.status.value
    'added'
"""

from defdiff.diff.classifier import (
    apply_diff_to_definitions,
    calculate_definition_diff,
    calculate_file_diff,
)
from defdiff.diff.parser import normalize_path, parse_diff, parse_hunk_header, parse_numstat
from defdiff.diff.source import (
    DiffSource,
    GitDiffSource,
    StaticDiffSource,
    get_all_diff_data,
    get_file_stats,
    get_hunk_diff,
)
from defdiff.diff.types import (
    Definition,
    DefinitionDiff,
    DiffData,
    DiffHunk,
    DiffStatus,
    FileDiff,
    FileDiffStats,
)

__all__ = [
    # Types
    "Definition",
    "DefinitionDiff",
    "DiffData",
    "DiffHunk",
    "DiffStatus",
    "FileDiff",
    "FileDiffStats",
    # Parser
    "normalize_path",
    "parse_diff",
    "parse_hunk_header",
    "parse_numstat",
    # Classifier
    "apply_diff_to_definitions",
    "calculate_definition_diff",
    "calculate_file_diff",
    # Source
    "DiffSource",
    "GitDiffSource",
    "StaticDiffSource",
    "get_all_diff_data",
    "get_file_stats",
    "get_hunk_diff",
]
