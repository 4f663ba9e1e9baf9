"""devnote core library - records, filters, editors and the notebook service."""

from typing import TYPE_CHECKING

from devnote.core.errors import DevnoteError
from devnote.core.types import Note, Project

if TYPE_CHECKING:
    from devnote.core.notebook import Notebook

__all__ = [
    "DevnoteError",
    "Note",
    "Notebook",
    "Project",
]


def __getattr__(name: str):
    if name == "Notebook":
        from devnote.core.notebook import Notebook

        return Notebook
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
