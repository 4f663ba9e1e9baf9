"""Storage layer for devnote - SQLite database and repositories."""

from devnote.storage.db import connect
from devnote.storage.repos import NotesRepo, ProjectsRepo
from devnote.storage.sqlite import SqliteRepository

__all__ = [
    "connect",
    "NotesRepo",
    "ProjectsRepo",
    "SqliteRepository",
]
