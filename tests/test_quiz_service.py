from __future__ import annotations

import pytest

from models.question import Question
from services.quiz_service import INVALID_ANSWER_TEXT, NEXT_QUESTION_PROMPT, QuizService
from tests.helpers import HTTP_PORT_QUESTION

DNS_QUESTION = Question(
    question_text="What is DNS?",
    options=("Domain Name System", "A network protocol", "A type of server", "A programming language"),
    correct_index=0,
    category="Protocols",
)


@pytest.mark.parametrize("reply, expected", [("1", 0), ("2", 1), ("3", 2), ("4", 3), ("  3 \n", 2)])
def test_numeric_replies_map_to_zero_based_index(reply, expected) -> None:
    assert QuizService.resolve_choice(DNS_QUESTION, reply) == expected


@pytest.mark.parametrize("i", range(4))
def test_option_text_matches_case_insensitively(i) -> None:
    option = DNS_QUESTION.options[i]
    assert QuizService.resolve_choice(DNS_QUESTION, f"  {option.upper()}  ") == i
    assert QuizService.resolve_choice(DNS_QUESTION, option.lower()) == i


def test_number_out_of_range_falls_back_to_option_text() -> None:
    # "80" is not in 1..4, but it is the text of option 1
    assert QuizService.resolve_choice(HTTP_PORT_QUESTION, "80") == 0
    assert QuizService.resolve_choice(HTTP_PORT_QUESTION, "443") == 1


def test_in_range_number_wins_over_option_text() -> None:
    q = Question(question_text="Pick", options=("4", "3", "2", "1"), correct_index=0)
    assert QuizService.resolve_choice(q, "1") == 0


@pytest.mark.parametrize("reply", ["", "0", "5", "-1", "seven", "Domain Name", "1.0"])
def test_unrecognized_replies_resolve_to_none(reply) -> None:
    assert QuizService.resolve_choice(DNS_QUESTION, reply) is None


def test_grade_correct_answer() -> None:
    result = QuizService().grade(HTTP_PORT_QUESTION, "80")

    assert result.is_valid and result.is_correct
    text = QuizService.format_result(result)
    assert "Correct!" in text
    assert "1. 80" in text
    assert text.endswith(NEXT_QUESTION_PROMPT)


def test_grade_incorrect_answer_names_both_options() -> None:
    result = QuizService().grade(HTTP_PORT_QUESTION, "2")

    assert result.is_valid and not result.is_correct
    text = QuizService.format_result(result)
    assert "Incorrect." in text
    assert "Your answer: 2. 443" in text
    assert "Correct answer: 1. 80" in text
    assert text.endswith(NEXT_QUESTION_PROMPT)


def test_invalid_answer_asks_for_a_number() -> None:
    result = QuizService().grade(HTTP_PORT_QUESTION, "port eighty")

    assert not result.is_valid
    assert not result.is_correct
    assert QuizService.format_result(result) == INVALID_ANSWER_TEXT
    assert "1 to 4" in INVALID_ANSWER_TEXT


def test_format_question_lists_numbered_options() -> None:
    text = QuizService.format_question(HTTP_PORT_QUESTION)
    lines = text.splitlines()

    assert lines[0] == "📚 Category: Protocols"
    assert "Which port does HTTP use?" in lines
    assert ["1) 80", "2) 443", "3) 21", "4) 25"] == [l for l in lines if l[:2] in {"1)", "2)", "3)", "4)"}]
    assert text.endswith("*Send the answer number (1, 2, 3 or 4):*")


def test_format_question_escapes_markdown() -> None:
    q = Question(
        question_text="What does *nix_like mean?",
        options=("snake_case", "a", "b", "c"),
        correct_index=0,
        category="Shell_basics",
    )
    text = QuizService.format_question(q)

    assert "\\*nix\\_like" in text
    assert "1) snake\\_case" in text
    assert "Shell\\_basics" in text


def test_next_question_reads_from_repository(repo, http_question) -> None:
    assert QuizService(repo).next_question().id == http_question.id
