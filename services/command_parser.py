"""
services/command_parser.py
--------------------------
Recognizes bot commands in message text.

Telegram commands look like `/quiz` or, in group chats, `/quiz@NetQuizBot`.
"""

from telegram.constants import ChatType


def _command_token(text: str) -> str | None:
    """First whitespace-separated token if it is a `/command`, else None."""
    if not text.startswith("/"):
        return None
    parts = text.split()
    return parts[0] if parts else None


def is_addressed_to_bot(text: str, chat_type: str, bot_username: str) -> bool:
    """
    Decide whether a message is meant for this bot.

    Private chats always talk to the bot. In groups only a command
    explicitly suffixed with `@<bot_username>` counts (case-insensitive).
    """
    if chat_type == ChatType.PRIVATE:
        return True

    token = _command_token(text)
    if token is None:
        return False

    _, sep, mention = token.partition("@")
    if not sep:
        return False
    return mention.lower() == bot_username.lower()


def extract_command(text: str) -> str:
    """
    Return the lower-cased command name without `/` and `@handle`.

    Examples:
        "/Quiz@NetQuizBot now" -> "quiz"
        "hello" -> ""
    """
    token = _command_token(text)
    if token is None:
        return ""
    name, _, _ = token[1:].partition("@")
    return name.lower()
