"""Definition-level change classification from hunk ranges.

Works purely on line-number arithmetic: a definition's [line, end_line]
span is intersected with each hunk's new-side span. File contents are
never read.
"""

import logging
from collections.abc import Sequence
from dataclasses import replace

from defdiff.diff.types import (
    Definition,
    DefinitionDiff,
    DiffHunk,
    DiffStatus,
    FileDiff,
    FileDiffStats,
)

logger = logging.getLogger(__name__)


def calculate_definition_diff(
    definition: Definition,
    hunks: Sequence[DiffHunk] | None,
) -> DefinitionDiff | None:
    """Calculate diff stats for a single definition from its file's hunks.

    Added lines are the definition lines inside a hunk's new-side span.
    Deleted lines are counted coarsely: when a hunk with removed lines
    touches the definition's span, the hunk's whole old_count is
    attributed to it, so a large deletion next to a boundary can count
    against more than one definition.

    A definition is ADDED when all of its lines are new and nothing was
    removed; otherwise it is UPDATED.

    Args:
        definition: Definition with 1-based inclusive line range.
        hunks: Hunks for the definition's file (may be None or empty).

    Returns:
        DefinitionDiff, or None when no change touches the definition or
        the calculation fails.
    """
    if not hunks:
        return None

    try:
        def_start = definition.line
        def_end = definition.end_line
        def_line_count = def_end - def_start + 1

        added_in_def = 0
        deleted_in_def = 0

        for hunk in hunks:
            hunk_new_start = hunk.new_start
            hunk_new_end = hunk.new_end

            overlap_start = max(def_start, hunk_new_start)
            overlap_end = min(def_end, hunk_new_end)
            if overlap_start <= overlap_end:
                added_in_def += overlap_end - overlap_start + 1

            if hunk.old_count > 0:
                if hunk_new_start <= def_end and hunk_new_end >= def_start:
                    deleted_in_def += hunk.old_count

        if added_in_def == 0 and deleted_in_def == 0:
            return None

        if added_in_def >= def_line_count and deleted_in_def == 0:
            status = DiffStatus.ADDED
        else:
            status = DiffStatus.UPDATED

        return DefinitionDiff(status=status, added=added_in_def, deleted=deleted_in_def)
    except Exception as e:
        logger.debug("Skipping diff for definition %r: %s", getattr(definition, "name", "?"), e)
        return None


def calculate_file_diff(hunks: Sequence[DiffHunk]) -> FileDiffStats | None:
    """Calculate total diff stats for a file by summing its hunks.

    Deprecated: numstat output (`parse_numstat`) gives file totals that
    don't depend on hunk boundaries. Kept for callers with hunk data only.

    Args:
        hunks: Hunks for one file.

    Returns:
        FileDiffStats with summed new/old counts, or None if there are no
        hunks or both sums are zero.
    """
    if not hunks:
        return None

    added = sum(hunk.new_count for hunk in hunks)
    deleted = sum(hunk.old_count for hunk in hunks)
    if added == 0 and deleted == 0:
        return None

    return FileDiffStats(added=added, deleted=deleted)


def apply_diff_to_definitions(
    definitions: Sequence[Definition],
    file_diff: FileDiff | None,
) -> list[Definition]:
    """Attach diff information to the definitions of one file.

    Definitions with a detected change are returned as copies carrying
    `diff`; the input objects are not modified. A failure on one
    definition leaves only that definition unannotated.

    Args:
        definitions: Definitions extracted from the file.
        file_diff: The file's hunks, or None when the file is unchanged.

    Returns:
        New list of definitions in the original order.
    """
    if file_diff is None or not file_diff.hunks:
        return list(definitions)

    result: list[Definition] = []
    for definition in definitions:
        diff = calculate_definition_diff(definition, file_diff.hunks)
        result.append(replace(definition, diff=diff) if diff else definition)
    return result
