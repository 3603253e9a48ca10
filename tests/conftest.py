"""Shared pytest fixtures and configuration for pytest."""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from rich.console import Console

from defdiff.display import console as console_module


@pytest.fixture(autouse=True)
def reset_defdiff_logger() -> Iterator[None]:
    """Undo CLI logging setup so caplog keeps seeing defdiff records."""
    yield
    defdiff_logger = logging.getLogger("defdiff")
    defdiff_logger.handlers.clear()
    defdiff_logger.setLevel(logging.NOTSET)
    defdiff_logger.propagate = True


@pytest.fixture
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point Path.home() at an empty temp directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: home))
    return home


@pytest.fixture
def recording_console(monkeypatch: pytest.MonkeyPatch) -> Console:
    """Install a recording, colorless console as the shared console."""
    console = Console(record=True, width=120, color_system=None, force_terminal=False)
    monkeypatch.setattr(console_module, "_console", console)
    return console
