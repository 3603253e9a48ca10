"""Pydantic models for defdiff configuration validation."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

ReportFormat = Literal["table", "markdown", "json"]


class GitConfig(BaseModel):
    """Configuration for running `git diff`.

    Example in config.json:
        "git": {
            "base_ref": "origin/main",
            "timeout": 30
        }
    """

    model_config = ConfigDict(extra="forbid")

    base_ref: str = "HEAD"
    """Ref the working tree is compared against."""

    git_binary: str = "git"
    """Executable used to invoke git."""

    timeout: float = Field(default=30.0, gt=0)
    """Timeout in seconds for each git invocation."""

    max_output_chars: int = Field(default=10 * 1024 * 1024, gt=0)
    """Diff output larger than this is discarded with a warning."""

    @field_validator("base_ref")
    @classmethod
    def validate_base_ref(cls, v: str) -> str:
        """Reject refs that git would read as an option."""
        v = v.strip()
        if not v:
            raise ValueError("base_ref must not be empty")
        if v.startswith("-"):
            raise ValueError(f"base_ref must not start with '-': {v!r}")
        return v


class ReportConfig(BaseModel):
    """Configuration for change reports.

    Example in config.json:
        "report": {
            "format": "markdown",
            "show_unchanged": true
        }
    """

    model_config = ConfigDict(extra="forbid")

    format: ReportFormat = "table"
    """Output format: table (rich), markdown, or json."""

    show_unchanged: bool = False
    """List definitions without detected changes."""

    sort_paths: bool = True
    """Sort files by path instead of diff order."""


class Config(BaseModel):
    """Root configuration model.

    Example config.json:
        {
            "git": {"base_ref": "HEAD~1"},
            "report": {"format": "json"}
        }
    """

    model_config = ConfigDict(extra="forbid")

    git: GitConfig = GitConfig()
    report: ReportConfig = ReportConfig()
