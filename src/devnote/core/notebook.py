"""Note-taking business logic.

This module provides the operations behind each CLI command, wrapping the
storage layer with the selected-project and empty-text rules.
"""

import logging
from datetime import datetime, timezone
from uuid import uuid4

from devnote.core.config import AppConfig
from devnote.core.editor import Editor
from devnote.core.errors import (
    InvalidDateError,
    InvalidProjectNameError,
    NoProjectSelectedError,
    ProjectNotFoundError,
    UpdateFailedError,
)
from devnote.core.filters import (
    check_guid_prefix_match,
    first_project,
    match_guid_prefix,
    match_name,
    match_project_id,
    string_optional,
)
from devnote.core.selection import SelectedProject
from devnote.core.types import TIMESTAMP_FORMAT, Note, Project
from devnote.storage.sqlite import SqliteRepository

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    """Current UTC time without tzinfo, as stored in the database."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def parse_date(value: str) -> datetime:
    """Parse a user supplied "YYYY-MM-DD HH:MM:SS" timestamp."""
    try:
        return datetime.strptime(value, TIMESTAMP_FORMAT)
    except ValueError as e:
        raise InvalidDateError(
            f"Invalid date {value!r}, expected format YYYY-MM-DD HH:MM:SS"
        ) from e


class Notebook:
    """Projects and notes, scoped by the selected project."""

    def __init__(
        self,
        repo: SqliteRepository,
        selection: SelectedProject,
        config: AppConfig | None = None,
    ):
        """
        Initialize notebook.

        Args:
            repo: Open repository
            selection: Selected project marker
            config: User preferences (defaults if omitted)
        """
        self.repo = repo
        self.selection = selection
        self.config = config or AppConfig()

    @property
    def selected_name(self) -> str:
        """Name in the selection marker, "" when nothing is selected."""
        return self.selection.read()

    def require_selection(self) -> str:
        """Return the selected project name or raise NoProjectSelectedError."""
        name = self.selected_name
        if not name:
            raise NoProjectSelectedError()
        return name

    def selected_project(self) -> Project:
        """Get the selected project record."""
        name = self.require_selection()
        project = first_project(self.repo.projects.list_with_filter(match_name(name)))
        if project is None:
            raise ProjectNotFoundError(f"Selected project {name!r} does not exist")
        return project

    def use_project(self, name: str) -> bool:
        """
        Select a project, creating it first if needed.

        Surrounding whitespace is dropped, matching how the marker is read.

        Returns:
            True if the project was created

        Raises:
            InvalidProjectNameError: If the name is blank
        """
        name = name.strip()
        if not name:
            raise InvalidProjectNameError("Project name must not be empty")

        created = False
        if not self.repo.projects.list_with_filter(match_name(name)):
            project = Project(guid=str(uuid4()), name=name, ts=utc_now())
            self.repo.projects.insert(project)
            logger.info("Created project %s", name)
            created = True
        self.selection.write(name)
        return created

    def list_projects(self) -> list[Project]:
        """Get all projects."""
        return self.repo.projects.list()

    def list_notes(self) -> list[Note]:
        """Get the notes of the selected project."""
        project = self.selected_project()
        return self.repo.notes.list_with_filter(match_project_id(project.guid))

    def find_note(self, prefix: str) -> Note:
        """Resolve a guid prefix to exactly one note."""
        self.require_selection()
        return check_guid_prefix_match(
            self.repo.notes.list_with_filter(match_guid_prefix(prefix))
        )

    def _should_store(self, text: str) -> bool:
        return bool(text) or not self.config.no_empty_adds_or_updates

    def add_note(
        self,
        editor: Editor,
        name: str | None = None,
        date: str | None = None,
    ) -> Note | None:
        """
        Write a new note in the selected project.

        Args:
            editor: Editor that produces the note text
            name: Note name (falls back to default_name from config)
            date: Timestamp as "YYYY-MM-DD HH:MM:SS" (defaults to now)

        Returns:
            The stored note, or None if it was empty and empty adds are disabled
        """
        project = self.selected_project()
        final_name = name
        if final_name is None:
            final_name = string_optional(self.config.default_name)
        ts = parse_date(date) if date is not None else utc_now()

        text = editor.edit(final_name, ts, None)
        if not self._should_store(text):
            logger.info("Empty note not added")
            return None

        note = Note(
            guid=str(uuid4()),
            project_id=project.guid,
            name=final_name or "",
            content=text,
            ts=ts,
        )
        self.repo.notes.insert(note)
        return note

    def remove_note(self, prefix: str) -> Note:
        """Delete the note matching a guid prefix."""
        note = self.find_note(prefix)
        self.repo.notes.remove(note.guid)
        logger.info("Removed note %s", note.guid)
        return note

    def edit_note(self, editor: Editor, prefix: str) -> Note | None:
        """
        Edit the content of the note matching a guid prefix.

        Returns:
            The updated note, or None if the edit was empty and skipped
        """
        note = self.find_note(prefix)
        text = editor.edit(note.name, note.ts, note.content)
        if not self._should_store(text):
            logger.info("Empty edit of %s not saved", note.guid)
            return None

        if self.repo.notes.update(note.guid, text, note.project_id) == 0:
            raise UpdateFailedError("Update failed")
        return self.repo.notes.get(note.guid)

    def move_note(self, prefix: str) -> Note:
        """Move the note matching a guid prefix into the selected project."""
        project = self.selected_project()
        note = self.find_note(prefix)
        if self.repo.notes.update(note.guid, note.content, project.guid) == 0:
            raise UpdateFailedError("Update failed")
        logger.info("Moved note %s to %s", note.guid, project.name)
        return self.repo.notes.get(note.guid)
