"""Plain-text rendering of notes for listings."""

from devnote.core.filters import empty_or_value
from devnote.core.types import DATE_FORMAT, TIMESTAMP_FORMAT, Note

NOTE_SEPARATOR = "=" * 37
GROUP_SEPARATOR = "\n================\n"
EMPTY_CONTENT = "<EMPTY>"


def note_header(note: Note, include_time: bool) -> str:
    """Name and date line, e.g. "standup|2024-05-01"."""
    date = note.ts.strftime(TIMESTAMP_FORMAT if include_time else DATE_FORMAT)
    if note.name:
        return f"{note.name}|{date}"
    return date


def format_note(note: Note, include_time: bool, show_guid: bool) -> str:
    """Render one note followed by a separator line."""
    parts = []
    if show_guid:
        parts.append(note.guid)
    parts.append(note_header(note, include_time))
    parts.append(empty_or_value(note.content, EMPTY_CONTENT))
    parts.append(NOTE_SEPARATOR)
    return "\n".join(parts)


def group_notes(
    notes: list[Note], include_time: bool, show_guid: bool
) -> dict[str, list[str]]:
    """Group note bodies under their header, in first-seen order."""
    groups: dict[str, list[str]] = {}
    for note in notes:
        body = f"{note.guid}\n{note.content}" if show_guid else note.content
        groups.setdefault(note_header(note, include_time), []).append(body)
    return groups


def format_groups(groups: dict[str, list[str]]) -> str:
    """Render grouped notes: each header, then its entries."""
    return "\n".join(
        f"{header}\n{GROUP_SEPARATOR.join(bodies)}" for header, bodies in groups.items()
    )
