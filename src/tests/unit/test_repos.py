"""Tests for the SQLite repositories."""

import sqlite3
from datetime import datetime

import pytest

from devnote.core.errors import NoteNotFoundError, ProjectNotFoundError
from devnote.core.filters import match_guid_prefix, match_name
from devnote.core.types import Project
from devnote.storage.sqlite import SqliteRepository


@pytest.fixture
def repo_with_project(repo, sample_project):
    """Repository holding the sample project."""
    repo.projects.insert(sample_project)
    return repo


class TestSqliteRepository:
    """Tests for SqliteRepository setup."""

    def test_creates_database_file(self, tmp_path):
        """The database file and parent directories are created."""
        db_file = tmp_path / "nested" / "note.db"

        with SqliteRepository(db_file) as repo:
            assert repo.db_path == db_file
            assert repo.initialized is True

        assert db_file.exists()

    def test_creates_tables(self, repo):
        """Both tables exist after construction."""
        tables = {
            row["name"]
            for row in repo.conn.execute(
                "SELECT name FROM sqlite_master WHERE type = 'table'"
            ).fetchall()
        }

        assert {"project", "note"} <= tables

    def test_init_is_idempotent(self, repo):
        """Calling init again is harmless."""
        repo.init()
        repo.init()

        assert repo.initialized is True

    def test_data_persists_after_reopen(self, tmp_path, sample_project):
        """Records persist across repository instances."""
        db_file = tmp_path / "note.db"
        with SqliteRepository(db_file) as first:
            first.projects.insert(sample_project)

        with SqliteRepository(db_file) as second:
            assert second.projects.get(sample_project.guid) == sample_project


class TestProjectsRepo:
    """Tests for ProjectsRepo."""

    def test_insert_and_get(self, repo, sample_project):
        """Inserted projects round-trip through get."""
        repo.projects.insert(sample_project)

        assert repo.projects.get("p-0001") == sample_project

    def test_get_missing_raises(self, repo):
        """get raises ProjectNotFoundError for unknown guids."""
        with pytest.raises(ProjectNotFoundError):
            repo.projects.get("missing")

    def test_duplicate_name_rejected(self, repo_with_project):
        """Project names are unique."""
        duplicate = Project(guid="p-0002", name="alpha", ts=datetime(2024, 6, 1))

        with pytest.raises(sqlite3.IntegrityError):
            repo_with_project.projects.insert(duplicate)

    def test_list_ordered_by_ts(self, repo):
        """Projects are listed oldest first."""
        repo.projects.insert(Project("p-2", "later", datetime(2024, 6, 1)))
        repo.projects.insert(Project("p-1", "earlier", datetime(2024, 1, 1)))

        assert [p.name for p in repo.projects.list()] == ["earlier", "later"]

    def test_list_with_filter(self, repo):
        """list_with_filter applies the predicate."""
        repo.projects.insert(Project("p-1", "alpha", datetime(2024, 1, 1)))
        repo.projects.insert(Project("p-2", "beta", datetime(2024, 1, 2)))

        result = repo.projects.list_with_filter(match_name("beta"))

        assert [p.guid for p in result] == ["p-2"]
        assert repo.projects.list(match_name("gamma")) == []

    def test_remove_returns_count(self, repo_with_project):
        """remove reports affected rows."""
        assert repo_with_project.projects.remove("p-0001") == 1
        assert repo_with_project.projects.remove("p-0001") == 0
        assert repo_with_project.projects.list() == []


class TestNotesRepo:
    """Tests for NotesRepo."""

    def test_insert_and_get(self, repo_with_project, make_note):
        """Inserted notes round-trip through get."""
        note = make_note(name="standup", content="did things")
        repo_with_project.notes.insert(note)

        assert repo_with_project.notes.get(note.guid) == note

    def test_get_missing_raises(self, repo):
        """get raises NoteNotFoundError for unknown guids."""
        with pytest.raises(NoteNotFoundError):
            repo.notes.get("missing")

    def test_insert_upserts_content_and_ts(self, repo_with_project, make_note):
        """Inserting an existing guid updates content and ts only."""
        beta = Project("p-0002", "beta", datetime(2024, 1, 1))
        repo_with_project.projects.insert(beta)
        original = make_note(name="first", content="old")
        repo_with_project.notes.insert(original)

        replacement = make_note(
            name="second",
            project_id="p-0002",
            content="new",
            ts=datetime(2024, 7, 1, 8, 0, 0),
        )
        repo_with_project.notes.insert(replacement)

        stored = repo_with_project.notes.get(original.guid)
        assert stored.content == "new"
        assert stored.ts == datetime(2024, 7, 1, 8, 0, 0)
        assert stored.name == "first"
        assert stored.project_id == "p-0001"
        assert len(repo_with_project.notes.list()) == 1

    def test_note_requires_existing_project(self, repo, make_note):
        """Foreign keys reject notes of unknown projects."""
        with pytest.raises(sqlite3.IntegrityError):
            repo.notes.insert(make_note(project_id="nope"))

    def test_update_sets_content_and_project(self, repo_with_project, make_note):
        """update changes content and project."""
        beta = Project("p-0002", "beta", datetime(2024, 1, 1))
        repo_with_project.projects.insert(beta)
        note = make_note()
        repo_with_project.notes.insert(note)

        count = repo_with_project.notes.update(note.guid, "edited", "p-0002")

        stored = repo_with_project.notes.get(note.guid)
        assert count == 1
        assert stored.content == "edited"
        assert stored.project_id == "p-0002"
        assert stored.ts == note.ts

    def test_update_missing_returns_zero(self, repo):
        """update reports zero rows for unknown guids."""
        assert repo.notes.update("missing", "text", "p-0001") == 0

    def test_remove_returns_count(self, repo_with_project, make_note):
        """remove reports affected rows."""
        repo_with_project.notes.insert(make_note())

        assert repo_with_project.notes.remove("n-0001") == 1
        assert repo_with_project.notes.remove("n-0001") == 0

    def test_list_ordered_by_ts(self, repo_with_project, make_note):
        """Notes are listed oldest first."""
        repo_with_project.notes.insert(make_note(guid="n-2", ts=datetime(2024, 5, 2)))
        repo_with_project.notes.insert(make_note(guid="n-1", ts=datetime(2024, 5, 1)))

        assert [n.guid for n in repo_with_project.notes.list()] == ["n-1", "n-2"]

    def test_list_with_filter(self, repo_with_project, make_note):
        """list_with_filter applies the predicate."""
        repo_with_project.notes.insert(make_note(guid="abc-1"))
        repo_with_project.notes.insert(make_note(guid="xyz-1"))

        result = repo_with_project.notes.list_with_filter(match_guid_prefix("abc"))

        assert [n.guid for n in result] == ["abc-1"]

    def test_microsecond_timestamps_round_trip(self, repo_with_project, make_note):
        """Sub-second precision survives storage."""
        ts = datetime(2024, 5, 1, 10, 30, 0, 123456)
        repo_with_project.notes.insert(make_note(ts=ts))

        assert repo_with_project.notes.get("n-0001").ts == ts
