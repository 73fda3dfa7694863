"""
services/quiz_service.py
------------------------
Business logic for the quiz: picking a question, rendering it, and grading
the user's reply. Orchestrates between the handlers and QuestionRepository.
"""

from dataclasses import dataclass
from typing import Optional

from telegram.helpers import escape_markdown

from models.question import OPTION_COUNT, Question
from repositories.question_repo import QuestionRepository
from utils.logger import get_logger

logger = get_logger(__name__)

NEXT_QUESTION_PROMPT = "Want another question? Send /quiz"
INVALID_ANSWER_TEXT = f"Please send a number from 1 to {OPTION_COUNT}.\n\nTry again: /quiz"


def _md(text: str) -> str:
    """Escape user-supplied text for Telegram's legacy Markdown."""
    return escape_markdown(text, version=1)


@dataclass(frozen=True)
class GradeResult:
    """
    Outcome of grading one reply.

    Attributes:
        question: The question that was answered.
        chosen_index: 0-based option picked by the user, or None if the
            reply could not be understood.
    """
    question: Question
    chosen_index: Optional[int]

    @property
    def is_valid(self) -> bool:
        return self.chosen_index is not None

    @property
    def is_correct(self) -> bool:
        return self.is_valid and self.question.is_correct(self.chosen_index)


class QuizService:
    """
    Handles all business logic related to asking and grading questions.

    Workflow:
        1. Fetch a random question from the repository.
        2. Render it for the chat.
        3. Resolve the user's reply to an option.
        4. Render the verdict.
    """

    def __init__(self, repo: Optional[QuestionRepository] = None):
        self.repo = repo or QuestionRepository()

    def next_question(self) -> Question:
        """
        Pick a random question.

        Raises:
            NoQuestionsError: If the store is empty.
            StorageError: On any other storage fault.
        """
        question = self.repo.get_random()
        logger.debug(f"Picked question #{question.id}")
        return question

    @staticmethod
    def resolve_choice(question: Question, reply: str) -> Optional[int]:
        """
        Map a raw reply to a 0-based option index.

        A number 1..4 wins; otherwise the reply is matched case-insensitively
        against the option texts, first match first.

        Returns:
            The 0-based index, or None if the reply matches nothing.
        """
        answer = reply.strip()
        try:
            number = int(answer)
        except ValueError:
            number = None
        if number is not None and 1 <= number <= OPTION_COUNT:
            return number - 1

        folded = answer.casefold()
        for i, option in enumerate(question.options):
            if option.strip().casefold() == folded:
                return i
        return None

    def grade(self, question: Question, reply: str) -> GradeResult:
        """Grade a reply against a question."""
        return GradeResult(question=question, chosen_index=self.resolve_choice(question, reply))

    @staticmethod
    def format_question(question: Question) -> str:
        """Render a question with numbered options and the reply prompt."""
        options = "".join(
            f"{i}) {_md(option)}\n" for i, option in enumerate(question.options, start=1)
        )
        numbers = ", ".join(str(n) for n in range(1, OPTION_COUNT)) + f" or {OPTION_COUNT}"
        return (
            f"📚 Category: {_md(question.category)}\n\n"
            f"❓ Question:\n{_md(question.question_text)}\n\n"
            f"{options}\n"
            f"*Send the answer number ({numbers}):*"
        )

    @staticmethod
    def format_result(result: GradeResult) -> str:
        """Render the verdict for a graded reply."""
        if not result.is_valid:
            return INVALID_ANSWER_TEXT

        q = result.question
        correct = f"{q.correct_index + 1}. {_md(q.correct_option)}"
        if result.is_correct:
            text = f"✅ *Correct!*\n\nAnswer: {correct}"
        else:
            chosen = f"{result.chosen_index + 1}. {_md(q.options[result.chosen_index])}"
            text = (
                f"❌ *Incorrect.*\n\n"
                f"Your answer: {chosen}\n\n"
                f"Correct answer: {correct}\n\n"
                f"Try again."
            )
        return f"{text}\n\n{NEXT_QUESTION_PROMPT}"
