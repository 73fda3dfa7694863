from __future__ import annotations

import json

import pytest

from db.connection import close_connection
from db.init_db import create_tables
from db.seed_data import DEFAULT_QUESTIONS
from models.question import Question
from repositories.question_repo import QuestionRepository
from tests.helpers import HTTP_PORT_QUESTION
from utils.errors import NoQuestionsError, StorageError


def test_add_assigns_id_and_round_trips_options(repo, db) -> None:
    saved = repo.add(HTTP_PORT_QUESTION)

    assert saved.id is not None
    stored = db.execute("SELECT options, correct_index FROM questions WHERE id = ?", (saved.id,)).fetchone()
    assert json.loads(stored["options"]) == ["80", "443", "21", "25"]
    assert stored["correct_index"] == 0


def test_get_random_returns_the_only_row(repo, http_question) -> None:
    q = repo.get_random()

    assert q.id == http_question.id
    assert q.options == ("80", "443", "21", "25")
    assert q.correct_index == 0
    assert q.category == "Protocols"
    assert q.created_at is not None


def test_get_random_on_empty_store_raises(repo) -> None:
    with pytest.raises(NoQuestionsError):
        repo.get_random()


def test_get_random_covers_all_rows(repo) -> None:
    for q in DEFAULT_QUESTIONS:
        repo.add(q)

    seen = {repo.get_random().question_text for _ in range(200)}

    assert seen == {q.question_text for q in DEFAULT_QUESTIONS}


@pytest.mark.parametrize(
    "options",
    ["not json", json.dumps({"a": 1}), json.dumps(["only", "three", "items"]), json.dumps([1, 2, 3, 4])],
)
def test_get_random_rejects_malformed_options(repo, db, options) -> None:
    db.execute(
        "INSERT INTO questions (question_text, options, correct_index, category) VALUES (?, ?, ?, ?)",
        ("Broken?", options, 0, "Misc"),
    )
    db.commit()

    with pytest.raises(StorageError, match="malformed"):
        repo.get_random()


def test_seed_if_empty_is_idempotent(repo) -> None:
    assert repo.seed_if_empty(DEFAULT_QUESTIONS) == len(DEFAULT_QUESTIONS)
    assert repo.seed_if_empty(DEFAULT_QUESTIONS) == 0
    assert repo.count() == len(DEFAULT_QUESTIONS)


def test_seed_if_empty_skips_non_empty_store(repo, http_question) -> None:
    assert repo.seed_if_empty(DEFAULT_QUESTIONS) == 0
    assert repo.count() == 1


def test_seed_is_all_or_nothing(repo, db) -> None:
    # NOT NULL on question_text makes the last row fail inside the batch
    broken = Question.__new__(Question)
    object.__setattr__(broken, "question_text", None)
    object.__setattr__(broken, "options", ("a", "b", "c", "d"))
    object.__setattr__(broken, "correct_index", 0)
    object.__setattr__(broken, "category", "Misc")

    with pytest.raises(StorageError, match="Seeding failed"):
        repo.seed_if_empty([*DEFAULT_QUESTIONS, broken])

    assert repo.count() == 0


def test_create_tables_is_idempotent(repo, http_question) -> None:
    create_tables()
    assert repo.count() == 1


def test_repository_without_connection_raises_storage_error() -> None:
    close_connection()
    with pytest.raises(StorageError, match="not initialized"):
        QuestionRepository().count()
