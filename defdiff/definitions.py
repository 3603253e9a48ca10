"""Loading definition records produced by an external extractor.

The extractor writes a JSON object mapping each file path to its
definitions:

    {
        "src/app.py": [
            {"name": "main", "line": 10, "endLine": 24, "type": "function", "exported": true}
        ]
    }

`end_line` is accepted as an alias of `endLine`; a missing end line means a
single-line definition.
"""

import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from defdiff.config.load_utils import load_json_file
from defdiff.core.errors import DefinitionsLoadError, LoadError
from defdiff.diff.parser import normalize_path
from defdiff.diff.types import Definition

logger = logging.getLogger(__name__)


class DefinitionRecord(BaseModel):
    """Wire shape of one definition record."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: str
    line: int = Field(ge=1)
    end_line: int | None = Field(default=None, alias="endLine")
    type: str = "function"
    exported: bool = False

    @model_validator(mode="after")
    def validate_range(self) -> "DefinitionRecord":
        """Default end_line to line and require line <= end_line."""
        if self.end_line is None:
            self.end_line = self.line
        if self.end_line < self.line:
            raise ValueError(
                f"endLine ({self.end_line}) is before line ({self.line}) for {self.name!r}"
            )
        return self

    def to_definition(self) -> Definition:
        return Definition(
            name=self.name,
            line=self.line,
            end_line=self.end_line if self.end_line is not None else self.line,
            type=self.type,
            exported=self.exported,
        )


def parse_definitions(data: dict[str, Any]) -> dict[str, list[Definition]]:
    """Validate raw definition data keyed by file path.

    Args:
        data: Mapping of path to a list of definition records.

    Returns:
        Mapping of normalized path to Definition objects, in record order.

    Raises:
        DefinitionsLoadError: If a value isn't a list or a record is invalid.
    """
    result: dict[str, list[Definition]] = {}
    for raw_path, records in data.items():
        if not isinstance(records, list):
            raise DefinitionsLoadError(
                f"Expected a list of definitions for {raw_path!r}, got {type(records).__name__}",
                path=raw_path,
            )
        path = normalize_path(raw_path)
        try:
            definitions = [DefinitionRecord.model_validate(r).to_definition() for r in records]
        except ValidationError as e:
            raise DefinitionsLoadError(
                f"Invalid definition record for {raw_path!r}: {e}", path=raw_path
            ) from e
        result.setdefault(path, []).extend(definitions)

    logger.debug(
        "Parsed %d definitions across %d files",
        sum(len(defs) for defs in result.values()),
        len(result),
    )
    return result


def load_definitions(path: Path) -> dict[str, list[Definition]]:
    """Load definition records from a JSON file.

    Raises:
        DefinitionsLoadError: If the file is missing, malformed, or invalid.
    """
    try:
        data = load_json_file(path, error_context="definitions")
    except LoadError as e:
        raise DefinitionsLoadError(e.message, path=str(path)) from e
    return parse_definitions(data)
