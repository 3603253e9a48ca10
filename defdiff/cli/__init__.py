"""Command-line interface for defdiff."""

from defdiff.cli.main import main

__all__ = ["main"]
