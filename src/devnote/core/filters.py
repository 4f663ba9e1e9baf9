"""Predicates and guid-prefix resolution over repository results."""

from collections.abc import Callable, Iterable
from typing import TypeVar

from devnote.core.errors import AmbiguousNoteError, NoteNotFoundError
from devnote.core.types import Note, NotePredicate, Project, ProjectPredicate

T = TypeVar("T")


def match_guid_prefix(prefix: str) -> NotePredicate:
    """Match notes whose guid starts with prefix."""
    return lambda note: note.guid.startswith(prefix)


def match_name(name: str) -> ProjectPredicate:
    """Match projects with exactly this name."""
    return lambda project: project.name == name


def match_project_id(project_id: str) -> NotePredicate:
    """Match notes belonging to a project."""
    return lambda note: note.project_id == project_id


def apply_filter(pred: Callable[[T], bool], items: Iterable[T]) -> list[T]:
    """Return the items accepted by pred, preserving order."""
    return [item for item in items if pred(item)]


def check_guid_prefix_match(notes: list[Note]) -> Note:
    """
    Ensure a guid prefix lookup resolved to exactly one note.

    Args:
        notes: Notes matched by a guid prefix

    Returns:
        The single matching note

    Raises:
        NoteNotFoundError: If nothing matched
        AmbiguousNoteError: If more than one note matched
    """
    if not notes:
        raise NoteNotFoundError("This gid does not exist in this database")
    if len(notes) > 1:
        raise AmbiguousNoteError(
            "This gid prefix holds multiple results in this database"
        )
    return notes[0]


def empty_or_value(text: str, value: str) -> str:
    """Return value when text is empty, else text."""
    return value if not text else text


def string_optional(value: str | None) -> str | None:
    """Treat the empty string as unset."""
    if not value:
        return None
    return value


def first_project(projects: list[Project]) -> Project | None:
    """First project of a filtered listing, if any."""
    return projects[0] if projects else None
