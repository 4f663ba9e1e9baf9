"""Projects repository - pure data access for project persistence."""

from __future__ import annotations

import sqlite3

from devnote.core.errors import ProjectNotFoundError
from devnote.core.filters import apply_filter
from devnote.core.types import Project, ProjectPredicate
from devnote.storage.db import from_db_timestamp, to_db_timestamp


class ProjectsRepo:
    """Repository for project data access."""

    def __init__(self, conn: sqlite3.Connection):
        """
        Initialize projects repository.

        Args:
            conn: SQLite connection with row_factory set
        """
        self.conn = conn

    def create_table(self) -> None:
        """Create the project table if not exists."""
        with self.conn:
            self.conn.execute(
                """
                CREATE TABLE IF NOT EXISTS project (
                    id NVARCHAR(256) PRIMARY KEY,
                    name NVARCHAR(150) UNIQUE,
                    ts DATETIME
                )
                """
            )

    def insert(self, entity: Project) -> None:
        """Insert a new project. Duplicate names raise sqlite3.IntegrityError."""
        with self.conn:
            self.conn.execute(
                "INSERT INTO project (id, name, ts) VALUES (?, ?, ?)",
                (entity.guid, entity.name, to_db_timestamp(entity.ts)),
            )

    def remove(self, key: str) -> int:
        """Delete a project by guid. Returns the number of rows removed."""
        with self.conn:
            cursor = self.conn.execute("DELETE FROM project WHERE id = ?", (key,))
        return cursor.rowcount

    def get(self, key: str) -> Project:
        """Get a project by guid."""
        row = self.conn.execute(
            "SELECT id, name, ts FROM project WHERE id = ?", (key,)
        ).fetchone()
        if row is None:
            raise ProjectNotFoundError(f"Project not found: {key}")
        return self._from_row(row)

    def list(self, pred: ProjectPredicate | None = None) -> list[Project]:
        """Get all projects, ordered by creation time."""
        rows = self.conn.execute(
            "SELECT id, name, ts FROM project ORDER BY ts, id"
        ).fetchall()
        projects = [self._from_row(row) for row in rows]
        if pred is None:
            return projects
        return apply_filter(pred, projects)

    def list_with_filter(self, pred: ProjectPredicate) -> list[Project]:
        """Get the projects accepted by pred."""
        return self.list(pred)

    @staticmethod
    def _from_row(row: sqlite3.Row) -> Project:
        return Project(
            guid=row["id"],
            name=row["name"],
            ts=from_db_timestamp(row["ts"]),
        )
