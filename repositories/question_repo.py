"""
repositories/question_repo.py
-----------------------------
Data access layer for quiz questions.
All SQL queries related to the `questions` table live here.
"""

import json
import sqlite3
from datetime import datetime
from typing import Iterable

from db.connection import get_connection
from models.question import Question
from utils.errors import NoQuestionsError, StorageError
from utils.logger import get_logger

logger = get_logger(__name__)

_INSERT_SQL = """
    INSERT INTO questions (question_text, options, correct_index, category)
    VALUES (?, ?, ?, ?);
"""


class QuestionRepository:
    """Repository for insert and random lookup on the questions table."""

    # ── CREATE ────────────────────────────────────────────

    def add(self, question: Question) -> Question:
        """
        Insert a new question.

        Args:
            question: The Question to persist (its `id` is ignored).

        Returns:
            A copy of the Question with its `id` populated.

        Raises:
            StorageError: If the row cannot be written.
        """
        conn = get_connection()
        try:
            cur = conn.execute(_INSERT_SQL, self._to_params(question))
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            logger.error(f"Failed to add question '{question.question_text}': {e}")
            raise StorageError(f"Insert failed: {e}") from e

        saved = Question(
            question_text=question.question_text,
            options=question.options,
            correct_index=question.correct_index,
            category=question.category,
            id=cur.lastrowid,
        )
        logger.info(f"Added question #{saved.id} ({saved.category})")
        return saved

    def seed_if_empty(self, defaults: Iterable[Question]) -> int:
        """
        Insert the default question set, but only into an empty table.
        The batch runs in one transaction: any failure inserts nothing.

        Args:
            defaults: Questions to insert.

        Returns:
            Number of rows inserted (0 if the table already had data).

        Raises:
            StorageError: If counting or inserting fails.
        """
        existing = self.count()
        if existing > 0:
            logger.info(f"Question store already holds {existing} questions.")
            return 0

        rows = [self._to_params(q) for q in defaults]
        conn = get_connection()
        try:
            with conn:
                conn.executemany(_INSERT_SQL, rows)
        except sqlite3.Error as e:
            logger.error(f"Failed to seed default questions: {e}")
            raise StorageError(f"Seeding failed: {e}") from e

        logger.info(f"Seeded {len(rows)} default questions.")
        return len(rows)

    # ── READ ──────────────────────────────────────────────

    def get_random(self) -> Question:
        """
        Fetch one uniformly random question.

        Raises:
            NoQuestionsError: If the table is empty.
            StorageError: On a query fault or a malformed stored row.
        """
        sql = """
            SELECT id, question_text, options, correct_index, category, created_at
            FROM questions
            ORDER BY RANDOM()
            LIMIT 1;
        """
        conn = get_connection()
        try:
            row = conn.execute(sql).fetchone()
        except sqlite3.Error as e:
            logger.error(f"Failed to fetch random question: {e}")
            raise StorageError(f"Random fetch failed: {e}") from e

        if row is None:
            raise NoQuestionsError("The question store is empty")
        return self._row_to_question(row)

    def count(self) -> int:
        """Number of stored questions."""
        conn = get_connection()
        try:
            return conn.execute("SELECT COUNT(*) FROM questions;").fetchone()[0]
        except sqlite3.Error as e:
            logger.error(f"Failed to count questions: {e}")
            raise StorageError(f"Count failed: {e}") from e

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _to_params(question: Question) -> tuple:
        return (
            question.question_text,
            json.dumps(list(question.options), ensure_ascii=False),
            question.correct_index,
            question.category,
        )

    @staticmethod
    def _row_to_question(row: sqlite3.Row) -> Question:
        """
        Convert a database row to a Question domain object.

        Raises:
            StorageError: If the options column is not a JSON list of strings,
                or the row violates the Question invariants.
        """
        try:
            options = json.loads(row["options"])
            if not isinstance(options, list):
                raise ValueError(f"options is {type(options).__name__}, expected list")
            created_at = (
                datetime.fromisoformat(row["created_at"]) if row["created_at"] else None
            )
            return Question(
                id=row["id"],
                question_text=row["question_text"],
                options=tuple(options),
                correct_index=row["correct_index"],
                category=row["category"] or "",
                created_at=created_at,
            )
        except (TypeError, ValueError) as e:
            # json.JSONDecodeError is a ValueError
            logger.error(f"Malformed question row #{row['id']}: {e}")
            raise StorageError(f"Question #{row['id']} is malformed: {e}") from e
