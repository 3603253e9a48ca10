"""Tests for defdiff.diff.source module."""

import logging
import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from defdiff.config.schema import GitConfig
from defdiff.diff.source import (
    GitDiffSource,
    StaticDiffSource,
    get_all_diff_data,
    get_file_stats,
    get_hunk_diff,
)
from defdiff.diff.types import DiffHunk, FileDiffStats

NUMSTAT = "3\t1\tsrc/app.py\n-\t-\tlogo.png\n"
UNIFIED = """\
diff --git a/src/app.py b/src/app.py
index 1..2 100644
--- a/src/app.py
+++ b/src/app.py
@@ -4,0 +5,3 @@
+a
+b
+c
@@ -20 +23,0 @@
-gone
"""


def completed(stdout: str = "", returncode: int = 0, stderr: str = "") -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(args=["git"], returncode=returncode, stdout=stdout, stderr=stderr)


class TestGitDiffSource:
    """Tests for GitDiffSource subprocess handling."""

    def test_numstat_command(self, tmp_path: Path) -> None:
        source = GitDiffSource(tmp_path)
        with patch("defdiff.diff.source.subprocess.run", return_value=completed(NUMSTAT)) as run:
            assert source.fetch_numstat() == NUMSTAT

        args = run.call_args.args[0]
        assert args[:2] == ["git", "diff"]
        assert "--numstat" in args
        assert "--no-renames" in args
        assert "--no-color" in args
        assert args[-1] == "HEAD"
        assert run.call_args.kwargs["cwd"] == str(tmp_path)
        assert run.call_args.kwargs["timeout"] == 30.0

    def test_unified_diff_command_uses_config(self, tmp_path: Path) -> None:
        config = GitConfig(base_ref="origin/main", git_binary="/usr/bin/git", timeout=5)
        source = GitDiffSource(tmp_path, config)
        with patch("defdiff.diff.source.subprocess.run", return_value=completed(UNIFIED)) as run:
            assert source.fetch_unified_diff() == UNIFIED

        args = run.call_args.args[0]
        assert args[0] == "/usr/bin/git"
        assert "--unified=0" in args
        assert args[-1] == "origin/main"
        assert run.call_args.kwargs["timeout"] == 5

    def test_nonzero_exit_returns_empty_and_warns(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        source = GitDiffSource(tmp_path)
        failed = completed(returncode=128, stderr="fatal: not a git repository")
        with patch("defdiff.diff.source.subprocess.run", return_value=failed):
            with caplog.at_level(logging.WARNING, logger="defdiff"):
                assert source.fetch_numstat() == ""

        assert "not a git repository" in caplog.text

    def test_missing_git_returns_empty(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        source = GitDiffSource(tmp_path)
        with patch("defdiff.diff.source.subprocess.run", side_effect=FileNotFoundError("git")):
            with caplog.at_level(logging.WARNING, logger="defdiff"):
                assert source.fetch_unified_diff() == ""

        assert "git diff failed" in caplog.text

    def test_timeout_returns_empty(self, tmp_path: Path) -> None:
        source = GitDiffSource(tmp_path)
        timeout = subprocess.TimeoutExpired(cmd="git", timeout=30)
        with patch("defdiff.diff.source.subprocess.run", side_effect=timeout):
            assert source.fetch_numstat() == ""

    def test_oversized_output_discarded(self, tmp_path: Path) -> None:
        source = GitDiffSource(tmp_path, GitConfig(max_output_chars=10))
        with patch("defdiff.diff.source.subprocess.run", return_value=completed(NUMSTAT)):
            assert source.fetch_numstat() == ""


class TestDiffDataHelpers:
    """Tests for get_file_stats, get_hunk_diff and get_all_diff_data."""

    def test_static_source(self) -> None:
        source = StaticDiffSource(numstat=NUMSTAT, unified_diff=UNIFIED)

        assert get_file_stats(source) == {"src/app.py": FileDiffStats(added=3, deleted=1)}
        diffs = get_hunk_diff(source)
        assert diffs["src/app.py"].hunks == [DiffHunk(4, 0, 5, 3), DiffHunk(20, 1, 23, 0)]

    def test_all_diff_data(self) -> None:
        data = get_all_diff_data(StaticDiffSource(numstat=NUMSTAT, unified_diff=UNIFIED))

        assert list(data.file_stats) == ["src/app.py"]
        assert list(data.file_diffs) == ["src/app.py"]

    def test_empty_source(self) -> None:
        data = get_all_diff_data(StaticDiffSource())
        assert data.file_stats == {}
        assert data.file_diffs == {}

    def test_failures_isolated_per_half(self, caplog: pytest.LogCaptureFixture) -> None:
        source = MagicMock()
        source.fetch_numstat.side_effect = RuntimeError("boom")
        source.fetch_unified_diff.return_value = UNIFIED

        with caplog.at_level(logging.WARNING, logger="defdiff"):
            data = get_all_diff_data(source)

        assert data.file_stats == {}
        assert "src/app.py" in data.file_diffs
        assert "Failed to get file stats" in caplog.text

    def test_git_failure_degrades_to_empty(self, tmp_path: Path) -> None:
        with patch(
            "defdiff.diff.source.subprocess.run",
            return_value=completed(returncode=1, stderr="bad revision"),
        ):
            data = get_all_diff_data(GitDiffSource(tmp_path))

        assert data.file_stats == {}
        assert data.file_diffs == {}
