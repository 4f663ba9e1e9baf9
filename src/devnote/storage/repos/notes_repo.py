"""Notes repository - pure data access for note persistence."""

from __future__ import annotations

import logging
import sqlite3

from devnote.core.errors import NoteNotFoundError
from devnote.core.filters import apply_filter
from devnote.core.types import Note, NotePredicate
from devnote.storage.db import from_db_timestamp, to_db_timestamp

logger = logging.getLogger(__name__)


class NotesRepo:
    """Repository for note data access."""

    def __init__(self, conn: sqlite3.Connection):
        """
        Initialize notes repository.

        Args:
            conn: SQLite connection with row_factory set
        """
        self.conn = conn

    def create_table(self) -> None:
        """Create the note table if not exists."""
        with self.conn:
            self.conn.execute(
                """
                CREATE TABLE IF NOT EXISTS note (
                    id NVARCHAR(256) PRIMARY KEY,
                    project_id NVARCHAR(256) REFERENCES project(id),
                    name NVARCHAR(150),
                    content TEXT,
                    ts DATETIME
                )
                """
            )
            self.conn.execute(
                "CREATE INDEX IF NOT EXISTS idx_note_project ON note(project_id)"
            )

    def insert(self, entity: Note) -> None:
        """Insert a note, or update content and ts if the guid already exists."""
        with self.conn:
            cursor = self.conn.execute(
                "UPDATE note SET content = ?, ts = ? WHERE id = ?",
                (entity.content, to_db_timestamp(entity.ts), entity.guid),
            )
            if cursor.rowcount == 0:
                self.conn.execute(
                    """
                    INSERT INTO note (id, project_id, name, content, ts)
                    VALUES (?, ?, ?, ?, ?)
                    """,
                    (
                        entity.guid,
                        entity.project_id,
                        entity.name,
                        entity.content,
                        to_db_timestamp(entity.ts),
                    ),
                )
            else:
                logger.debug("Upsert updated existing note %s", entity.guid)

    def remove(self, key: str) -> int:
        """Delete a note by guid. Returns the number of rows removed."""
        with self.conn:
            cursor = self.conn.execute("DELETE FROM note WHERE id = ?", (key,))
        return cursor.rowcount

    def get(self, key: str) -> Note:
        """Get a note by guid."""
        row = self.conn.execute(
            "SELECT id, project_id, name, content, ts FROM note WHERE id = ?",
            (key,),
        ).fetchone()
        if row is None:
            raise NoteNotFoundError(f"Note not found: {key}")
        return self._from_row(row)

    def list(self, pred: NotePredicate | None = None) -> list[Note]:
        """Get all notes, oldest first."""
        rows = self.conn.execute(
            "SELECT id, project_id, name, content, ts FROM note ORDER BY ts, id"
        ).fetchall()
        notes = [self._from_row(row) for row in rows]
        if pred is None:
            return notes
        return apply_filter(pred, notes)

    def list_with_filter(self, pred: NotePredicate) -> list[Note]:
        """Get the notes accepted by pred."""
        return self.list(pred)

    def update(self, key: str, text: str, project_id: str) -> int:
        """Set content and project of a note. Returns rows affected."""
        with self.conn:
            cursor = self.conn.execute(
                "UPDATE note SET project_id = ?, content = ? WHERE id = ?",
                (project_id, text, key),
            )
        return cursor.rowcount

    @staticmethod
    def _from_row(row: sqlite3.Row) -> Note:
        return Note(
            guid=row["id"],
            project_id=row["project_id"],
            name=row["name"] or "",
            content=row["content"] or "",
            ts=from_db_timestamp(row["ts"]),
        )
