"""SQLite database connection handling."""

import logging
import sqlite3
from datetime import datetime
from pathlib import Path

logger = logging.getLogger(__name__)


def connect(db_path: Path | str) -> sqlite3.Connection:
    """
    Open a database connection, creating the file if missing.

    Args:
        db_path: Path to SQLite database, or ":memory:"

    Returns:
        SQLite connection with row factory and foreign keys enabled
    """
    if str(db_path) != ":memory:":
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    logger.debug("Opening database %s", db_path)
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys=ON")
    return conn


def to_db_timestamp(ts: datetime) -> str:
    """Serialize a timestamp for storage."""
    return ts.isoformat(sep=" ")


def from_db_timestamp(value: str) -> datetime:
    """Parse a stored timestamp."""
    return datetime.fromisoformat(value)
