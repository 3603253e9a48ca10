"""Reading JSON objects from disk for config layers and definitions files.

Both readers take an ``error_context`` label ("config", "definitions", ...)
that prefixes every LoadError message and every debug log line, so a
failure names the kind of file involved. The top-level value must be a
JSON object; an empty or whitespace-only file reads as ``{}``.
"""

import json
import logging
from pathlib import Path
from typing import Any

from defdiff.core.errors import LoadError

logger = logging.getLogger(__name__)


def _label(error_context: str) -> str:
    return error_context or "JSON"


def _decode_object(text: str, path: Path, prefix: str) -> dict[str, Any]:
    if not text.strip():
        return {}
    try:
        value = json.loads(text)
    except json.JSONDecodeError as e:
        raise LoadError(f"{prefix}Invalid JSON in {path}: {e}") from e
    if isinstance(value, dict):
        return value
    raise LoadError(f"{prefix}Expected object in {path}, got {type(value).__name__}")


def load_json_file(path: Path, error_context: str = "") -> dict[str, Any]:
    """Read a required JSON object file.

    A UTF-8 byte order mark is tolerated.

    Raises:
        LoadError: Missing or unreadable file, malformed JSON, or a top-level
            value that is not an object.
    """
    prefix = f"{error_context}: " if error_context else ""
    target = path.resolve()
    if not target.exists():
        raise LoadError(f"{prefix}File not found: {path}")

    logger.debug("Reading %s file: %s", _label(error_context), target)
    try:
        text = target.read_text(encoding="utf-8-sig")
    except OSError as e:
        raise LoadError(f"{prefix}Failed to read file {path}: {e}") from e
    return _decode_object(text, path, prefix)


def load_json_file_optional(path: Path, error_context: str = "") -> dict[str, Any] | None:
    """Like load_json_file, but a path that is not a regular file gives None."""
    target = path.resolve()
    if target.is_file():
        return load_json_file(target, error_context)
    logger.debug("No %s file at %s, skipping", _label(error_context), target)
    return None
