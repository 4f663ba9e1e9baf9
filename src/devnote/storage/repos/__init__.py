"""Repository classes for data access."""

from devnote.storage.repos.notes_repo import NotesRepo
from devnote.storage.repos.projects_repo import ProjectsRepo

__all__ = [
    "NotesRepo",
    "ProjectsRepo",
]
