"""Error types raised by devnote."""


class DevnoteError(Exception):
    """Base error for all devnote failures."""


class ConfigError(DevnoteError):
    """Raised when config.toml cannot be parsed or validated."""


class EditorError(DevnoteError):
    """Raised when an editor fails to produce note text."""


class NoProjectSelectedError(DevnoteError):
    """Raised when a command needs a selected project and none is set."""

    def __init__(self) -> None:
        super().__init__(
            'No project selected please run with the "use <proj_name>" command first'
        )


class ProjectNotFoundError(DevnoteError):
    """Raised when a project lookup has no result."""


class NoteNotFoundError(DevnoteError):
    """Raised when a guid or guid prefix matches no note."""


class AmbiguousNoteError(DevnoteError):
    """Raised when a guid prefix matches more than one note."""


class UpdateFailedError(DevnoteError):
    """Raised when an update affected no rows."""


class InvalidDateError(DevnoteError):
    """Raised when a user supplied date cannot be parsed."""


class InvalidProjectNameError(DevnoteError):
    """Raised when a project name is empty."""
