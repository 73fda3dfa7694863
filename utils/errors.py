"""
utils/errors.py
---------------
Exception hierarchy shared by every layer of the bot.

    QuizBotError
    ├── ConfigError       missing/invalid settings (fatal at startup)
    ├── StorageError      SQLite or serialization faults
    │   └── NoQuestionsError   the questions table is empty
    └── TransportError    Telegram Bot API call failures
"""


class QuizBotError(Exception):
    """Base class for all errors raised by the bot."""


class ConfigError(QuizBotError):
    """Raised when required settings are missing or malformed."""


class StorageError(QuizBotError):
    """Raised on any database access or (de)serialization fault."""


class NoQuestionsError(StorageError):
    """Raised when a random question is requested from an empty store."""


class TransportError(QuizBotError):
    """
    Raised when a call to the Telegram Bot API fails.

    Attributes:
        operation: Name of the API operation, e.g. 'sendMessage'.
        chat_id: Target chat, when the call was chat-scoped.
    """

    def __init__(self, operation: str, message: str, chat_id: int | None = None):
        self.operation = operation
        self.chat_id = chat_id
        target = f" (chat {chat_id})" if chat_id is not None else ""
        super().__init__(f"{operation}{target} failed: {message}")
