"""Mutable state of a single quiz session."""

from __future__ import annotations

import logging

from canvas_quiz.constants.quiz_constants import NO_SELECTION, OPTION_COUNT
from canvas_quiz.core.errors import QuizStateError
from canvas_quiz.core.models import Question, QuizPhase, QuizSnapshot
from canvas_quiz.core.services.question_bank import QuestionBank
from canvas_quiz.core.services.scoring import evaluate_answer

logger = logging.getLogger(__name__)


class QuizSession:
    """Owns the quiz progress and exposes intent-level mutators.

    The session moves through two phases. It starts in ``QUIZ`` and switches
    to ``RESULT`` on the first :meth:`advance_frame` after the last question
    has been submitted. ``RESULT`` is terminal.
    """

    def __init__(self, bank: QuestionBank) -> None:
        self._bank = bank
        self._phase: QuizPhase = QuizPhase.QUIZ
        self._current_index: int = 0
        self._score: int = 0
        self._selected_option: int = NO_SELECTION
        self._last_answer_correct: bool | None = None
        self._frame_count: int = 0

    @property
    def phase(self) -> QuizPhase:
        return self._phase

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def score(self) -> int:
        return self._score

    @property
    def selected_option(self) -> int:
        return self._selected_option

    @property
    def last_answer_correct(self) -> bool | None:
        return self._last_answer_correct

    @property
    def frame_count(self) -> int:
        return self._frame_count

    def get_question_count(self) -> int:
        return self._bank.get_question_count()

    def get_current_question(self) -> Question | None:
        if self._current_index >= self._bank.get_question_count():
            return None
        return self._bank.get_question_at_index(self._current_index)

    def has_selection(self) -> bool:
        return self._selected_option != NO_SELECTION

    def select_option(self, option_index: int) -> None:
        """Select an option, replacing any previous selection."""
        if not 0 <= option_index < OPTION_COUNT:
            raise ValueError(f"Option index must be between 0 and {OPTION_COUNT - 1}.")
        self._selected_option = option_index

    def submit(self) -> bool:
        """Score the current selection and move to the next question.

        Returns whether the answer was correct.
        """
        if self._phase is not QuizPhase.QUIZ:
            raise QuizStateError("Answers can only be submitted during the quiz phase.")
        if not self.has_selection():
            raise QuizStateError("Cannot submit without a selected option.")
        question = self.get_current_question()
        if question is None:
            raise QuizStateError("No question left to answer.")

        is_correct = evaluate_answer(question, self._selected_option)
        if is_correct:
            self._score += 1
        self._last_answer_correct = is_correct
        logger.debug(
            "Question %d answered with option %d (correct=%s)",
            self._current_index + 1,
            self._selected_option,
            is_correct,
        )
        self._current_index += 1
        self._selected_option = NO_SELECTION
        return is_correct

    def advance_frame(self) -> None:
        """Advance the frame clock and apply the end-of-quiz transition."""
        self._frame_count += 1
        if self._phase is QuizPhase.QUIZ and self._current_index >= self._bank.get_question_count():
            self._phase = QuizPhase.RESULT
            logger.info(
                "Quiz finished with score %d / %d",
                self._score,
                self._bank.get_question_count(),
            )

    def snapshot(self) -> QuizSnapshot:
        """Return an immutable copy of the state for rendering."""
        return QuizSnapshot(
            phase=self._phase,
            current_index=self._current_index,
            total_questions=self._bank.get_question_count(),
            score=self._score,
            selected_option=self._selected_option,
            last_answer_correct=self._last_answer_correct,
            frame_count=self._frame_count,
            current_question=self.get_current_question(),
        )
