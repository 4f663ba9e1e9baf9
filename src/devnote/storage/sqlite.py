"""SQLite-backed repository owning the connection for projects and notes."""

import logging
import sqlite3
from pathlib import Path

from devnote.core.config import get_db_path
from devnote.core.types import NoteRepository, ProjectRepository
from devnote.storage.db import connect
from devnote.storage.repos import NotesRepo, ProjectsRepo

logger = logging.getLogger(__name__)


class SqliteRepository:
    """Project and note repositories sharing one SQLite connection.

    The schema is created on construction, so a fresh database file is
    usable immediately:

        with SqliteRepository(tmp_path / "note.db") as repo:
            repo.projects.list()
    """

    def __init__(self, db_path: Path | str | None = None):
        """
        Open (and create if missing) the database.

        Args:
            db_path: Path to SQLite database (defaults to <data dir>/note.db)
        """
        self.db_path = db_path if db_path is not None else get_db_path()
        self.conn: sqlite3.Connection = connect(self.db_path)
        self.projects: ProjectRepository = ProjectsRepo(self.conn)
        self.notes: NoteRepository = NotesRepo(self.conn)
        self._initialized = False
        self.init()

    @property
    def initialized(self) -> bool:
        """Whether the schema has been created."""
        return self._initialized

    def init(self) -> None:
        """Create the project and note tables once."""
        if not self._initialized:
            self.projects.create_table()
            self.notes.create_table()
            logger.debug("Schema ready in %s", self.db_path)
        self._initialized = True

    def close(self) -> None:
        """Close the underlying connection."""
        self.conn.close()

    def __enter__(self) -> "SqliteRepository":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"SqliteRepository({self.db_path})"
