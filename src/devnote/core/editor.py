"""Note editors: a built-in full-screen editor and external editor programs."""

import logging
import shlex
import subprocess
from datetime import datetime
from pathlib import Path
from typing import Protocol
from uuid import uuid4

from prompt_toolkit.application import Application
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import HSplit, Layout, VSplit, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.layout.dimension import Dimension
from prompt_toolkit.widgets import TextArea

from devnote.core.config import AppConfig
from devnote.core.errors import EditorError
from devnote.core.filters import string_optional
from devnote.core.types import TIMESTAMP_FORMAT

logger = logging.getLogger(__name__)

INTERNAL_EDITOR = "internal"

HEADER_MARKER = "DO NOT EDIT ABOVE THE LINE, CAUSE IT WILL NOT BE RECORDED(===)"
HEADER_SEPARATOR = "===================="


class Editor(Protocol):
    """Produces note text, optionally starting from existing text."""

    def edit(self, name: str | None, date: datetime, text: str | None) -> str: ...


class InternalEditor:
    """Full-screen terminal editor. Esc or Ctrl-Q saves and quits."""

    def edit(self, name: str | None, date: datetime, text: str | None) -> str:
        text_area = TextArea(text=text or "", multiline=True, wrap_lines=True)

        title = VSplit(
            [
                Window(
                    FormattedTextControl(f"{name}|" if name else ""),
                    width=Dimension(weight=1),
                ),
                Window(
                    FormattedTextControl(date.strftime(TIMESTAMP_FORMAT)),
                    width=Dimension(weight=3),
                ),
            ],
            height=1,
        )

        kb = KeyBindings()

        @kb.add("escape", eager=True)
        @kb.add("c-q")
        def _(event):
            event.app.exit(result=text_area.text)

        app: Application[str] = Application(
            layout=Layout(HSplit([title, text_area]), focused_element=text_area),
            key_bindings=kb,
            full_screen=True,
        )
        result = app.run()
        return "\n".join((result or "").splitlines())


class ExternalEditor:
    """Edits notes by running an editor program on a temporary file."""

    def __init__(self, command: str, work_dir: Path | str):
        """
        Initialize external editor.

        Args:
            command: Editor command line; the file path is appended
            work_dir: Directory for the temporary file and the editor's cwd
        """
        self.command = command
        self.work_dir = Path(work_dir)

    def render(self, name: str | None, date: datetime, text: str | None) -> str:
        """Build the temporary file contents."""
        header = f"{name}|" if name else ""
        lines = [
            f"{header}{date.strftime(TIMESTAMP_FORMAT)}",
            HEADER_MARKER,
            HEADER_SEPARATOR,
        ]
        return "\n".join(lines) + "\n" + (text or "")

    @staticmethod
    def parse(content: str) -> str:
        """Extract the note text below the separator line."""
        lines = content.splitlines()
        for index, line in enumerate(lines):
            if line.rstrip() == HEADER_SEPARATOR:
                return "\n".join(lines[index + 1 :]).rstrip("\n")
        raise EditorError(f"Separator line {HEADER_SEPARATOR!r} was removed")

    def edit(self, name: str | None, date: datetime, text: str | None) -> str:
        """
        Open the editor on a temporary file and return what was written.

        Raises:
            EditorError: If the editor cannot be started, exits with an
                error status, or the header separator is missing.
        """
        self.work_dir.mkdir(parents=True, exist_ok=True)
        path = self.work_dir / f"{uuid4()}.txt"
        path.write_text(self.render(name, date, text), encoding="utf-8")

        args = shlex.split(self.command) + [str(path)]
        logger.debug("Running editor: %s", args)
        try:
            try:
                completed = subprocess.run(args, cwd=self.work_dir)
            except OSError as e:
                raise EditorError(
                    f"Could not start editor {self.command!r}: {e}"
                ) from e

            if completed.returncode != 0:
                raise EditorError(
                    f"Editor {self.command!r} exited with status {completed.returncode}"
                )
            return self.parse(path.read_text(encoding="utf-8"))
        finally:
            path.unlink(missing_ok=True)

    def __repr__(self) -> str:
        return f"ExternalEditor({self.command!r}, {self.work_dir})"


def create_editor(config: AppConfig, work_dir: Path | str) -> Editor:
    """Pick the editor configured by edit_app."""
    command = string_optional(config.edit_app)
    if command is None or command == INTERNAL_EDITOR:
        return InternalEditor()
    return ExternalEditor(command, work_dir)
