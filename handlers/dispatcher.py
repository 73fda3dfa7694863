"""
handlers/dispatcher.py
----------------------
Receives updates from Telegram and routes each text message either to the
answer handler (when the chat has a pending question) or to a command handler.

Updates are processed one at a time in the order received, so the
PendingAnswers mapping needs no locking.
"""

import asyncio
from typing import Awaitable, Callable

from telegram import Update

from handlers.quiz_handler import handle_answer, quiz_command
from handlers.start_handler import help_command, start_command
from models.pending import PendingAnswers
from services.command_parser import extract_command, is_addressed_to_bot
from services.telegram_gateway import TelegramGateway
from utils.errors import TransportError
from utils.logger import get_logger

logger = get_logger(__name__)

CommandCallback = Callable[["UpdateDispatcher", int], Awaitable[None]]

COMMANDS: dict[str, CommandCallback] = {
    "start": start_command,
    "quiz": quiz_command,
    "help": help_command,
}

# Shown in the Telegram client's command menu
BOT_COMMANDS = (
    ("quiz", "Get a random question"),
    ("help", "Show help"),
)


class UpdateDispatcher:
    """
    Long-polling update loop with per-chat question state.

    Attributes:
        gateway: Outbound Telegram API calls.
        pending: Question each chat must answer next.
        offset: Next update id to request from getUpdates.
        bot_username: The bot's own handle, for @-mentions in groups.
    """

    def __init__(
        self,
        gateway: TelegramGateway,
        bot_username: str,
        poll_timeout: int = 30,
        retry_delay: float = 5.0,
    ):
        self.gateway = gateway
        self.bot_username = bot_username
        self.poll_timeout = poll_timeout
        self.retry_delay = retry_delay
        self.pending = PendingAnswers()
        self.offset = 0

    # ── Receive loop ──────────────────────────────────────

    async def run(self) -> None:
        """Poll and process updates until cancelled."""
        logger.info(f"Polling for updates as @{self.bot_username}...")
        while True:
            await self.poll_once()

    async def poll_once(self) -> int:
        """
        Fetch one batch of updates and process it.

        Returns:
            Number of updates processed. On a receive failure the error is
            logged, the loop pauses for `retry_delay` and 0 is returned.
        """
        try:
            updates = await self.gateway.get_updates(self.offset, self.poll_timeout)
        except TransportError as e:
            logger.error(f"Failed to receive updates: {e}")
            await asyncio.sleep(self.retry_delay)
            return 0

        for update in updates:
            await self.process_update(update)
            self.offset = update.update_id + 1
        return len(updates)

    # ── Routing ───────────────────────────────────────────

    async def process_update(self, update: Update) -> None:
        """Route a single update."""
        message = update.message
        if message is None or not message.text:
            return

        chat_id = message.chat.id
        text = message.text

        question = self.pending.pop(chat_id)
        if question is not None:
            await handle_answer(self, chat_id, text, question)
            return

        if not is_addressed_to_bot(text, message.chat.type, self.bot_username):
            return

        command = extract_command(text)
        handler = COMMANDS.get(command)
        if handler is None:
            return

        logger.info(f"[{chat_id}] Command: /{command}")
        await handler(self, chat_id)

    # ── Outbound ──────────────────────────────────────────

    async def send_message(self, chat_id: int, text: str) -> bool:
        """
        Send text to a chat. Failures are logged and dropped.

        Returns:
            True if the message was delivered to the API.
        """
        try:
            await self.gateway.send_message(chat_id, text)
        except TransportError as e:
            logger.error(f"Failed to send message to chat {chat_id}: {e}")
            return False
        return True
