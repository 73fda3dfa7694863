"""
handlers/quiz_handler.py
------------------------
Handles the /quiz command and the reply that answers a pending question.
Delegates question selection, rendering and grading to QuizService.
"""

from typing import TYPE_CHECKING

from models.question import Question
from services.quiz_service import QuizService
from utils.errors import NoQuestionsError, StorageError
from utils.logger import get_logger

if TYPE_CHECKING:
    from handlers.dispatcher import UpdateDispatcher

logger = get_logger(__name__)
quiz_service = QuizService()

NO_QUESTIONS_TEXT = "📭 There are no questions yet. Please try again later."
FETCH_FAILED_TEXT = "⚠️ Could not load a question. Please try /quiz again later."


async def quiz_command(dispatcher: "UpdateDispatcher", chat_id: int) -> None:
    """
    Handle /quiz command - send a random question and remember it as the
    chat's pending question (replacing any earlier one).
    """
    try:
        question = quiz_service.next_question()
    except NoQuestionsError:
        logger.warning(f"Chat {chat_id} asked for a quiz but the store is empty.")
        await dispatcher.send_message(chat_id, NO_QUESTIONS_TEXT)
        return
    except StorageError as e:
        logger.error(f"Failed to fetch a question for chat {chat_id}: {e}")
        await dispatcher.send_message(chat_id, FETCH_FAILED_TEXT)
        return

    dispatcher.pending.set(chat_id, question)
    logger.info(f"Sent question #{question.id} to chat {chat_id}")
    await dispatcher.send_message(chat_id, quiz_service.format_question(question))


async def handle_answer(
    dispatcher: "UpdateDispatcher", chat_id: int, text: str, question: Question
) -> None:
    """
    Grade a reply to `question`. The pending entry has already been cleared
    by the dispatcher, so an unreadable reply ends this round.
    """
    result = quiz_service.grade(question, text)
    if not result.is_valid:
        logger.info(f"Chat {chat_id} sent an unreadable answer to question #{question.id}")
    else:
        verdict = "correct" if result.is_correct else "incorrect"
        logger.info(f"Chat {chat_id} answered question #{question.id}: {verdict}")
    await dispatcher.send_message(chat_id, quiz_service.format_result(result))
