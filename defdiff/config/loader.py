"""Configuration loading with layered merging.

Layers, later ones overriding earlier ones:
1. Global user config (~/.defdiff/config.json)
2. Project local config (<cwd>/.defdiff/config.json)

When no file exists the Pydantic defaults are used.
"""

import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from defdiff.config.load_utils import load_json_file, load_json_file_optional
from defdiff.config.schema import Config
from defdiff.core.constants import get_default_config_path, get_local_config_path
from defdiff.core.errors import ConfigError, LoadError
from defdiff.core.utils import deep_merge

logger = logging.getLogger(__name__)


def load_config(path: Path | None = None, cwd: Path | None = None) -> Config:
    """Load configuration from file with layered merging.

    Args:
        path: Explicit config file path. If provided, skips layered loading.
        cwd: Working directory for the local layer. Defaults to Path.cwd().

    Returns:
        Validated Config object.

    Raises:
        ConfigError: If any config file contains invalid JSON or the merged
            config fails validation.
    """
    if path is not None:
        return _load_from_path(path)

    effective_cwd = cwd or Path.cwd()
    merged: dict[str, Any] = {}
    loaded_from: list[Path] = []

    layers = [get_default_config_path(), get_local_config_path(effective_cwd)]
    for layer in layers:
        if layer.resolve() in {p.resolve() for p in loaded_from}:
            # cwd is the home directory
            continue
        try:
            data = load_json_file_optional(layer, error_context="config")
        except LoadError as e:
            raise ConfigError(e.message) from e
        if data:
            merged = deep_merge(merged, data)
            loaded_from.append(layer)

    if not merged:
        logger.debug("No config files found, using defaults")
        return Config()

    logger.info("Config loaded from: %s", [str(p) for p in loaded_from])
    try:
        return Config.model_validate(merged)
    except ValidationError as e:
        sources = ", ".join(str(p) for p in loaded_from)
        raise ConfigError(f"Config validation failed (merged from {sources}): {e}") from e


def _load_from_path(path: Path) -> Config:
    """Load and validate config from a specific path.

    Raises:
        ConfigError: If file doesn't exist, contains invalid JSON, or fails validation.
    """
    try:
        data = load_json_file(path, error_context="config")
    except LoadError as e:
        raise ConfigError(e.message) from e

    try:
        return Config.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Config validation failed for {path}: {e}") from e
