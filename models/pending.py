"""
models/pending.py
-----------------
In-memory record of the question each chat is expected to answer next.
"""

from typing import Optional

from models.question import Question


class PendingAnswers:
    """
    Mapping of chat id -> Question awaiting an answer.

    A chat holds at most one pending question; setting a new one replaces
    the old. Entries are removed with `pop` as soon as a reply is consumed.
    """

    def __init__(self):
        self._by_chat: dict[int, Question] = {}

    def set(self, chat_id: int, question: Question) -> None:
        self._by_chat[chat_id] = question

    def get(self, chat_id: int) -> Optional[Question]:
        return self._by_chat.get(chat_id)

    def pop(self, chat_id: int) -> Optional[Question]:
        """Remove and return the chat's pending question, or None."""
        return self._by_chat.pop(chat_id, None)

    def __contains__(self, chat_id: int) -> bool:
        return chat_id in self._by_chat

    def __len__(self) -> int:
        return len(self._by_chat)
