"""Shared types and data structures for devnote."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

__all__ = [
    "Initable",
    "Note",
    "NotePredicate",
    "NoteRepository",
    "Project",
    "ProjectPredicate",
    "ProjectRepository",
    "TIMESTAMP_FORMAT",
    "DATE_FORMAT",
]

# Display and input format for full timestamps
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
DATE_FORMAT = "%Y-%m-%d"


@dataclass(frozen=True)
class Project:
    """Named container for notes."""

    guid: str
    name: str
    ts: datetime


@dataclass(frozen=True)
class Note:
    """Timestamped text entry scoped to a project."""

    guid: str
    project_id: str
    name: str
    content: str
    ts: datetime


ProjectPredicate = Callable[[Project], bool]
NotePredicate = Callable[[Note], bool]


class Initable(Protocol):
    """Storage that must create its schema before first use."""

    @property
    def initialized(self) -> bool: ...

    def init(self) -> None: ...


class ProjectRepository(Protocol):
    """CRUD and filtering over projects."""

    def create_table(self) -> None: ...

    def insert(self, entity: Project) -> None: ...

    def remove(self, key: str) -> int: ...

    def get(self, key: str) -> Project: ...

    def list(self, pred: ProjectPredicate | None = None) -> list[Project]: ...

    def list_with_filter(self, pred: ProjectPredicate) -> list[Project]: ...


class NoteRepository(Protocol):
    """CRUD and filtering over notes, with upsert on insert."""

    def create_table(self) -> None: ...

    def insert(self, entity: Note) -> None: ...

    def remove(self, key: str) -> int: ...

    def get(self, key: str) -> Note: ...

    def list(self, pred: NotePredicate | None = None) -> list[Note]: ...

    def list_with_filter(self, pred: NotePredicate) -> list[Note]: ...

    def update(self, key: str, text: str, project_id: str) -> int: ...
