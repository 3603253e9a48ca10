"""Core constants and paths for defdiff.

Single source of truth for global paths. Modules import from here instead of
hardcoding `Path.home() / ".defdiff"`.
"""

from pathlib import Path

DEFDIFF_DIR_NAME = ".defdiff"
CONFIG_FILE_NAME = "config.json"

# Defensive options so output is stable across user git configs
GIT_DIFF_OPTIONS: tuple[str, ...] = (
    "--no-color",      # No ANSI color codes
    "--no-ext-diff",   # No external diff tools
    "--no-textconv",   # No text conversion filters
    "--no-renames",    # Renamed files appear under their new path only
)


def get_defdiff_dir() -> Path:
    """Get ~/.defdiff (global config directory)."""
    return Path.home() / DEFDIFF_DIR_NAME


def get_default_config_path() -> Path:
    """Get default config file path."""
    return get_defdiff_dir() / CONFIG_FILE_NAME


def get_local_config_path(cwd: Path) -> Path:
    """Get project-local config file path for a working directory."""
    return cwd / DEFDIFF_DIR_NAME / CONFIG_FILE_NAME
