"""Shared test fixtures and configuration."""

from __future__ import annotations

from datetime import datetime

import pytest

from devnote.core.config import AppConfig
from devnote.core.notebook import Notebook
from devnote.core.selection import SelectedProject
from devnote.core.types import Note, Project
from devnote.storage.sqlite import SqliteRepository


class FakeEditor:
    """Editor double returning canned text and recording its calls."""

    def __init__(self, result: str = ""):
        self.result = result
        self.calls: list[tuple[str | None, datetime, str | None]] = []

    def edit(self, name: str | None, date: datetime, text: str | None) -> str:
        self.calls.append((name, date, text))
        return self.result


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """Point DEVNOTE_DATA_DIR at a temporary directory."""
    path = tmp_path / "devnote"
    monkeypatch.setenv("DEVNOTE_DATA_DIR", str(path))
    return path


@pytest.fixture
def repo(tmp_path):
    """Create a SqliteRepository with a temp database."""
    repository = SqliteRepository(tmp_path / "note.db")
    yield repository
    repository.close()


@pytest.fixture
def selection(tmp_path):
    """Selected project marker in a temp directory."""
    return SelectedProject(tmp_path / "selected.txt")


@pytest.fixture
def make_notebook(repo, selection):
    """Factory for a Notebook with custom config."""

    def _make_notebook(**config_values) -> Notebook:
        return Notebook(repo, selection, AppConfig(**config_values))

    return _make_notebook


@pytest.fixture
def notebook(make_notebook):
    """Notebook with default config."""
    return make_notebook()


@pytest.fixture
def make_editor():
    """Factory for FakeEditor instances."""

    def _make_editor(result: str = "") -> FakeEditor:
        return FakeEditor(result)

    return _make_editor


@pytest.fixture
def sample_project():
    """A project record."""
    return Project(
        guid="p-0001",
        name="alpha",
        ts=datetime(2024, 5, 1, 9, 0, 0),
    )


@pytest.fixture
def make_note():
    """Factory for Note records."""

    def _make_note(
        guid: str = "n-0001",
        project_id: str = "p-0001",
        name: str = "",
        content: str = "text",
        ts: datetime = datetime(2024, 5, 1, 10, 30, 0),
    ) -> Note:
        return Note(
            guid=guid,
            project_id=project_id,
            name=name,
            content=content,
            ts=ts,
        )

    return _make_note
