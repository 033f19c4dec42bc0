"""Domain models for the quiz application."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class QuizPhase(Enum):
    """Top-level phase of a quiz session."""

    QUIZ = auto()
    RESULT = auto()


@dataclass(frozen=True, slots=True)
class Question:
    """Multiple-choice question with exactly three options."""

    text: str
    options: tuple[str, str, str]
    correct_label: str  # Expected to be "A", "B" or "C"; kept verbatim


@dataclass(frozen=True, slots=True)
class QuizSnapshot:
    """Read-only view of the session handed to the renderer."""

    phase: QuizPhase
    current_index: int
    total_questions: int
    score: int
    selected_option: int
    last_answer_correct: bool | None
    frame_count: int
    current_question: Question | None

    @property
    def has_selection(self) -> bool:
        return self.selected_option >= 0
