"""Typed exception hierarchy for defdiff."""


class DefDiffError(Exception):
    """Base class for all defdiff errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigError(DefDiffError):
    """Raised for configuration issues (missing file, invalid JSON, validation failure)."""


class LoadError(DefDiffError):
    """Base class for loading errors (config, definitions, diff text files)."""

    pass


class DefinitionsLoadError(LoadError):
    """Definition records could not be read or validated."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        super().__init__(message)
