"""Translation of pointer clicks into quiz actions."""

from __future__ import annotations

from dataclasses import dataclass

from canvas_quiz.constants.quiz_constants import NO_SELECTION
from canvas_quiz.core.layout import QuizLayout
from canvas_quiz.core.models import QuizPhase
from canvas_quiz.core.quiz_session import QuizSession


@dataclass(frozen=True, slots=True)
class ClickResult:
    """What a single click did to the session."""

    selected_option: int | None = None
    submitted: bool = False
    answer_correct: bool | None = None


class InputRouter:
    """Routes clicks to the session using the shared layout geometry."""

    def __init__(self, session: QuizSession) -> None:
        self._session = session

    def handle_click(self, x: float, y: float, layout: QuizLayout) -> ClickResult:
        # Past the last question the phase flips on the next frame
        if self._session.phase is QuizPhase.RESULT or self._session.get_current_question() is None:
            return ClickResult()

        selected: int | None = None
        option_index = layout.option_at(x, y)
        if option_index != NO_SELECTION:
            self._session.select_option(option_index)
            selected = option_index

        if self._session.has_selection() and layout.submit_button.contains(x, y):
            is_correct = self._session.submit()
            return ClickResult(selected_option=selected, submitted=True, answer_correct=is_correct)

        return ClickResult(selected_option=selected)

