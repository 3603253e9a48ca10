"""Core errors, constants and helpers."""

from defdiff.core.errors import ConfigError, DefDiffError, DefinitionsLoadError, LoadError
from defdiff.core.utils import deep_merge

__all__ = [
    "DefDiffError",
    "ConfigError",
    "LoadError",
    "DefinitionsLoadError",
    "deep_merge",
]
