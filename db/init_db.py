"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize and seed a fresh database:
    python -m db.init_db
"""

import sqlite3

from db.connection import get_connection
from utils.errors import StorageError
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Questions table: one row per multiple-choice question
CREATE TABLE IF NOT EXISTS questions (
    id              INTEGER PRIMARY KEY AUTOINCREMENT,
    question_text   TEXT NOT NULL,
    options         TEXT NOT NULL,          -- JSON array of 4 strings
    correct_index   INTEGER NOT NULL,
    category        TEXT,
    created_at      TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);
"""


def create_tables() -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).

    Raises:
        StorageError: If the schema cannot be created.
    """
    conn = get_connection()
    try:
        conn.executescript(SCHEMA_SQL)
        conn.commit()
        logger.info("Database schema initialized successfully.")
    except sqlite3.Error as e:
        conn.rollback()
        logger.error(f"Failed to initialize schema: {e}")
        raise StorageError(f"Schema creation failed: {e}") from e


if __name__ == "__main__":
    from config import load_config
    from db.connection import init_connection, close_connection
    from db.seed_data import DEFAULT_QUESTIONS
    from repositories.question_repo import QuestionRepository

    cfg = load_config()
    init_connection(cfg.sqlite_path)
    try:
        create_tables()
        added = QuestionRepository().seed_if_empty(DEFAULT_QUESTIONS)
        logger.info(f"Database ready at {cfg.sqlite_path} ({added} questions seeded).")
    finally:
        close_connection()
