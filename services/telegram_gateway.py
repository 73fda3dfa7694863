"""
services/telegram_gateway.py
----------------------------
Thin wrapper over python-telegram-bot's `Bot` for the four Bot API calls the
quiz needs. Every `TelegramError` is re-raised as a TransportError so callers
deal with a single failure type.
"""

from typing import Sequence

from telegram import Bot, BotCommand, Update
from telegram.constants import ParseMode
from telegram.error import TelegramError

from utils.errors import TransportError
from utils.logger import get_logger

logger = get_logger(__name__)


class TelegramGateway:
    """Outbound calls to the Telegram Bot API."""

    def __init__(self, bot: Bot):
        self.bot = bot

    async def get_username(self) -> str:
        """Return the bot's own @username (without the @)."""
        try:
            me = await self.bot.get_me()
        except TelegramError as e:
            raise TransportError("getMe", str(e)) from e
        return me.username or ""

    async def get_updates(self, offset: int, timeout: int) -> Sequence[Update]:
        """
        Long-poll for message updates with id >= offset.

        Args:
            offset: First update id to return.
            timeout: Seconds the server may hold the request open.
        """
        try:
            return await self.bot.get_updates(
                offset=offset,
                timeout=timeout,
                allowed_updates=[Update.MESSAGE],
            )
        except TelegramError as e:
            raise TransportError("getUpdates", str(e)) from e

    async def send_message(self, chat_id: int, text: str) -> None:
        """Send Markdown text to a chat."""
        try:
            await self.bot.send_message(
                chat_id=chat_id,
                text=text,
                parse_mode=ParseMode.MARKDOWN,
            )
        except TelegramError as e:
            raise TransportError("sendMessage", str(e), chat_id=chat_id) from e

    async def set_commands(self, commands: Sequence[tuple[str, str]]) -> None:
        """Register the command menu shown by Telegram clients."""
        try:
            await self.bot.set_my_commands(
                [BotCommand(name, description) for name, description in commands]
            )
        except TelegramError as e:
            raise TransportError("setMyCommands", str(e)) from e
        logger.info("Bot commands menu registered successfully.")
