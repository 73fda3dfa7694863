"""
handlers/start_handler.py
--------------------------
Handles /start and /help commands.
"""

from typing import TYPE_CHECKING

from utils.logger import get_logger

if TYPE_CHECKING:
    from handlers.dispatcher import UpdateDispatcher

logger = get_logger(__name__)

START_TEXT = (
    "👋 Hi! I'm a networking quiz bot.\n\n"
    "I'll ask you a question with four options and check your answer.\n"
    "Send /quiz to start the quiz."
)

HELP_TEXT = """
📖 *Commands:*
/quiz - get a random question
/help - show this help

Reply to a question with the option number (1-4) or the option text.
"""


async def start_command(dispatcher: "UpdateDispatcher", chat_id: int) -> None:
    """Handle /start command - show the welcome message."""
    logger.info(f"Chat {chat_id} started the bot.")
    await dispatcher.send_message(chat_id, START_TEXT)


async def help_command(dispatcher: "UpdateDispatcher", chat_id: int) -> None:
    """Handle /help command - show all available commands."""
    await dispatcher.send_message(chat_id, HELP_TEXT.strip())
