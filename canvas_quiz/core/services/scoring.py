"""Answer evaluation rules."""

from __future__ import annotations

from canvas_quiz.constants.quiz_constants import OPTION_COUNT
from canvas_quiz.core.models import Question


def correct_index_for_label(label: str) -> int | None:
    """Map a correct-answer letter to a zero-based option index.

    The mapping is purely arithmetic (``"A"`` -> 0, ``"B"`` -> 1, ...), so a
    label outside A-C yields an index that no option can match. An empty label
    yields ``None``.
    """
    if not label:
        return None
    return ord(label[0]) - ord("A")


def evaluate_answer(question: Question, selected_option: int) -> bool:
    """Return True when ``selected_option`` is the question's correct option."""
    if not 0 <= selected_option < OPTION_COUNT:
        raise ValueError(f"Selected option must be between 0 and {OPTION_COUNT - 1}.")
    return selected_option == correct_index_for_label(question.correct_label)
