from __future__ import annotations

import pytest

from db.connection import close_connection, get_connection, init_connection
from db.init_db import create_tables
from models.question import Question
from repositories.question_repo import QuestionRepository
from tests.helpers import HTTP_PORT_QUESTION


@pytest.fixture
def db():
    close_connection()
    init_connection(":memory:")
    create_tables()
    yield get_connection()
    close_connection()


@pytest.fixture
def repo(db) -> QuestionRepository:
    return QuestionRepository()


@pytest.fixture
def http_question(repo) -> Question:
    return repo.add(HTTP_PORT_QUESTION)
