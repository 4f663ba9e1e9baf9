"""Marker file remembering the currently selected project."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class SelectedProject:
    """Reads and writes the selected project name."""

    def __init__(self, path: Path | str):
        """
        Initialize the marker.

        Args:
            path: Path to the marker file (usually <data dir>/selected.txt)
        """
        self.path = Path(path)

    def read(self) -> str:
        """Return the selected project name, or "" when nothing is selected."""
        if not self.path.exists():
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text("", encoding="utf-8")
            return ""
        return self.path.read_text(encoding="utf-8").strip()

    def write(self, name: str) -> None:
        """Select a project by name."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(name, encoding="utf-8")
        logger.debug("Selected project %s", name)

    def __repr__(self) -> str:
        return f"SelectedProject({self.path})"
