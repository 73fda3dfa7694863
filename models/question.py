"""
models/question.py
------------------
Domain model for a multiple-choice quiz question.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

OPTION_COUNT = 4


@dataclass(frozen=True)
class Question:
    """
    A single quiz question with exactly four answer options.

    Attributes:
        question_text: The question shown to the user.
        options: The four answer options, in display order.
        correct_index: 0-based position of the correct option.
        category: Topic label shown above the question.
        id: Database primary key (None for new records).
        created_at: Timestamp when the record was created.
    """
    question_text: str
    options: tuple[str, ...]
    correct_index: int
    category: str = ""
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        # Accept any sequence, store an immutable tuple
        object.__setattr__(self, "options", tuple(self.options))
        if len(self.options) != OPTION_COUNT:
            raise ValueError(
                f"Question needs exactly {OPTION_COUNT} options, got {len(self.options)}"
            )
        if not all(isinstance(o, str) for o in self.options):
            raise ValueError("Question options must be strings")
        if isinstance(self.correct_index, bool) or not isinstance(self.correct_index, int):
            raise ValueError(f"correct_index must be an int, got {self.correct_index!r}")
        if not 0 <= self.correct_index < OPTION_COUNT:
            raise ValueError(f"correct_index out of range: {self.correct_index}")

    @property
    def correct_option(self) -> str:
        """Text of the correct option."""
        return self.options[self.correct_index]

    def is_correct(self, index: int) -> bool:
        """Returns True if the 0-based `index` is the correct option."""
        return index == self.correct_index

    def __str__(self) -> str:
        return f"#{self.id} [{self.category}] {self.question_text}"
