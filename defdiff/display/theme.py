"""Theme definitions for defdiff reports."""

from dataclasses import dataclass, field

from defdiff.diff.types import DiffStatus


@dataclass
class Theme:
    """Visual theme configuration.

    All styling in one place for easy customization.
    """
    # Status labels with Rich styles
    status_styles: dict[DiffStatus, str] = field(default_factory=lambda: {
        DiffStatus.ADDED: "green",
        DiffStatus.UPDATED: "yellow",
    })

    # Text styles (Rich style strings)
    path: str = "bold"
    added: str = "green"
    deleted: str = "red"
    unchanged: str = "dim"
    definition_type: str = "dim"
    info: str = "dim"

    def status_style(self, status: DiffStatus | None) -> str:
        """Get the style for a definition status (None means unchanged)."""
        if status is None:
            return self.unchanged
        return self.status_styles.get(status, "")


DEFAULT_THEME = Theme()
