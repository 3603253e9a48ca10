"""Acquiring diff text from git.

The parsers in `defdiff.diff.parser` are pure; this module is the one
place that runs a process. Anything implementing the two-method
`DiffSource` protocol can feed them, so callers and tests can supply
pre-captured text without spawning git.
"""

import logging
import subprocess
from pathlib import Path
from typing import Protocol

from defdiff.config.schema import GitConfig
from defdiff.core.constants import GIT_DIFF_OPTIONS
from defdiff.diff.parser import parse_diff, parse_numstat
from defdiff.diff.types import DiffData, FileDiff, FileDiffStats

logger = logging.getLogger(__name__)


class DiffSource(Protocol):
    """Protocol for anything that can supply raw git diff text."""

    def fetch_numstat(self) -> str:
        """Return `git diff --numstat` style text ("" when unavailable)."""
        ...

    def fetch_unified_diff(self) -> str:
        """Return `git diff --unified=0` style text ("" when unavailable)."""
        ...


class GitDiffSource:
    """DiffSource backed by `git diff` against a base ref.

    Process failures (git missing, non-zero exit, timeout, oversized
    output) are logged as warnings and reported as empty text, so the
    parsers simply yield empty mappings.
    """

    def __init__(self, repo_dir: str | Path, config: GitConfig | None = None) -> None:
        self.repo_dir = Path(repo_dir)
        self.config = config or GitConfig()

    def _command(self, *mode_args: str) -> list[str]:
        return [
            self.config.git_binary,
            "diff",
            *GIT_DIFF_OPTIONS,
            *mode_args,
            self.config.base_ref,
        ]

    def _run(self, args: list[str]) -> str:
        try:
            result = subprocess.run(
                args,
                cwd=str(self.repo_dir),
                capture_output=True,
                text=True,
                timeout=self.config.timeout,
                encoding="utf-8",
                errors="replace",
            )
        except (OSError, subprocess.TimeoutExpired, ValueError) as e:
            logger.warning("git diff failed: %s", e)
            return ""

        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            logger.warning(
                "git diff failed (exit %d): %s", result.returncode, stderr or "no output"
            )
            return ""

        if len(result.stdout) > self.config.max_output_chars:
            logger.warning(
                "git diff output too large (%d chars, limit %d), ignoring",
                len(result.stdout),
                self.config.max_output_chars,
            )
            return ""

        return result.stdout

    def fetch_numstat(self) -> str:
        return self._run(self._command("--numstat"))

    def fetch_unified_diff(self) -> str:
        return self._run(self._command("--unified=0"))


class StaticDiffSource:
    """DiffSource over text captured elsewhere (files, CI artifacts, tests)."""

    def __init__(self, numstat: str = "", unified_diff: str = "") -> None:
        self.numstat = numstat
        self.unified_diff = unified_diff

    def fetch_numstat(self) -> str:
        return self.numstat

    def fetch_unified_diff(self) -> str:
        return self.unified_diff


def get_file_stats(source: DiffSource) -> dict[str, FileDiffStats]:
    """Get file-level stats from numstat output."""
    return parse_numstat(source.fetch_numstat())


def get_hunk_diff(source: DiffSource) -> dict[str, FileDiff]:
    """Get per-file hunks for definition analysis."""
    return parse_diff(source.fetch_unified_diff())


def get_all_diff_data(source: DiffSource) -> DiffData:
    """Collect file stats and hunk data, isolating failures of each half.

    Args:
        source: Where to read diff text from.

    Returns:
        DiffData; a half whose source raised is left empty.
    """
    try:
        file_stats = get_file_stats(source)
    except Exception as e:
        logger.warning("Failed to get file stats: %s", e)
        file_stats = {}

    try:
        file_diffs = get_hunk_diff(source)
    except Exception as e:
        logger.warning("Failed to get hunk diff: %s", e)
        file_diffs = {}

    return DiffData(file_stats=file_stats, file_diffs=file_diffs)
