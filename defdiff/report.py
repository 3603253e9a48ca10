"""Assembling per-file change reports.

Combines file-level stats, hunk data and externally extracted
definitions into one FileReport per changed file.
"""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from defdiff.diff.classifier import apply_diff_to_definitions, calculate_file_diff
from defdiff.diff.types import Definition, DiffData, FileDiffStats

logger = logging.getLogger(__name__)


@dataclass
class FileReport:
    """Change summary for one file.

    Attributes:
        path: Normalized file path
        stats: File totals (numstat, or summed hunks when numstat is missing)
        definitions: Definitions to show, annotated with diff where changed
    """

    path: str
    stats: FileDiffStats | None = None
    definitions: list[Definition] = field(default_factory=list)

    @property
    def changed_definitions(self) -> list[Definition]:
        return [d for d in self.definitions if d.diff is not None]


def build_report(
    definitions_by_path: Mapping[str, Sequence[Definition]],
    diff_data: DiffData,
    include_unchanged: bool = False,
    sort_paths: bool = True,
) -> list[FileReport]:
    """Build file reports from diff data and definitions.

    A file is reported when git shows a change for it. With
    include_unchanged, files that only have definitions are reported too
    and unchanged definitions are kept in each file's list.

    Args:
        definitions_by_path: Definitions keyed by normalized path.
        diff_data: File stats and hunks from get_all_diff_data().
        include_unchanged: Keep unchanged files and definitions.
        sort_paths: Sort by path; otherwise diff order, then definitions order.

    Returns:
        List of FileReport.
    """
    paths: list[str] = []
    for path in [*diff_data.file_stats, *diff_data.file_diffs]:
        if path not in paths:
            paths.append(path)
    if include_unchanged:
        paths.extend(p for p in definitions_by_path if p not in paths)
    if sort_paths:
        paths.sort()

    reports: list[FileReport] = []
    for path in paths:
        file_diff = diff_data.file_diffs.get(path)
        stats = diff_data.file_stats.get(path)
        if stats is None and file_diff is not None:
            stats = calculate_file_diff(file_diff.hunks)

        definitions = apply_diff_to_definitions(definitions_by_path.get(path, []), file_diff)
        if not include_unchanged:
            definitions = [d for d in definitions if d.diff is not None]

        reports.append(FileReport(path=path, stats=stats, definitions=definitions))

    logger.debug("Built report for %d files", len(reports))
    return reports
