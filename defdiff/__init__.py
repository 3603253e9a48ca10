"""defdiff: definition-level change detection from git diff output."""

__version__ = "0.1.0"
