"""
db/connection.py
----------------
Manages the single SQLite connection used for the whole process lifetime.
"""

import sqlite3

from utils.errors import StorageError
from utils.logger import get_logger

logger = get_logger(__name__)

_conn: sqlite3.Connection | None = None


def init_connection(path: str) -> None:
    """
    Open the SQLite database file (created if missing).

    Args:
        path: Filesystem path of the database, or ":memory:".

    Raises:
        StorageError: If the database cannot be opened.
    """
    global _conn
    if _conn is not None:
        return
    try:
        conn = sqlite3.connect(path)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
    except sqlite3.Error as e:
        logger.error(f"Failed to open SQLite database at {path}: {e}")
        raise StorageError(f"Cannot open database {path}: {e}") from e
    _conn = conn
    logger.info(f"Connected to SQLite database at {path}")


def get_connection() -> sqlite3.Connection:
    """
    Get the open connection.

    Raises:
        StorageError: If init_connection() has not been called.
    """
    if _conn is None:
        raise StorageError("Database not initialized. Call init_connection() first.")
    return _conn


def close_connection() -> None:
    """Close the connection if it is open."""
    global _conn
    if _conn is not None:
        _conn.close()
        _conn = None
        logger.info("Database connection closed.")
