from __future__ import annotations

from datetime import datetime, timezone
from types import SimpleNamespace
from typing import Any

from telegram import Chat, Message, Update
from telegram.error import NetworkError

from handlers.dispatcher import UpdateDispatcher
from models.question import Question
from services.telegram_gateway import TelegramGateway

HTTP_PORT_QUESTION = Question(
    question_text="Which port does HTTP use?",
    options=("80", "443", "21", "25"),
    correct_index=0,
    category="Protocols",
)


class DummyBot:
    """Stands in for telegram.Bot; records outbound calls."""

    def __init__(self, *, username: str = "NetQuizBot") -> None:
        self.username = username
        self.raise_on_get_me = False
        self.raise_on_get_updates = False
        self.raise_on_send_message = False
        self.update_batches: list[list[Update]] = []
        self.get_updates_calls: list[dict[str, Any]] = []
        self.sent_messages: list[dict[str, Any]] = []
        self.commands: list[Any] = []

    async def get_me(self) -> SimpleNamespace:
        if self.raise_on_get_me:
            raise NetworkError("get_me failed")
        return SimpleNamespace(username=self.username)

    async def get_updates(self, **kwargs: Any) -> list[Update]:
        self.get_updates_calls.append(kwargs)
        if self.raise_on_get_updates:
            raise NetworkError("get_updates failed")
        return self.update_batches.pop(0) if self.update_batches else []

    async def send_message(self, **kwargs: Any) -> None:
        if self.raise_on_send_message:
            raise NetworkError("send_message failed")
        self.sent_messages.append(kwargs)

    async def set_my_commands(self, commands: Any) -> None:
        self.commands = list(commands)

    @property
    def texts(self) -> list[str]:
        return [m["text"] for m in self.sent_messages]


def make_update(
    text: str | None,
    *,
    chat_id: int = 100,
    chat_type: str = Chat.PRIVATE,
    update_id: int = 1,
) -> Update:
    message = Message(
        message_id=update_id,
        date=datetime(2026, 1, 1, tzinfo=timezone.utc),
        chat=Chat(id=chat_id, type=chat_type),
        text=text,
    )
    return Update(update_id=update_id, message=message)


def make_dispatcher(bot: DummyBot | None = None) -> tuple[UpdateDispatcher, DummyBot]:
    bot = bot or DummyBot()
    dispatcher = UpdateDispatcher(
        TelegramGateway(bot),
        bot_username=bot.username,
        poll_timeout=0,
        retry_delay=0,
    )
    return dispatcher, bot
