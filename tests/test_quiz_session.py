"""Tests for the session state machine."""

import pytest

from canvas_quiz.core.errors import QuizStateError
from canvas_quiz.core.models import QuizPhase
from canvas_quiz.core.quiz_session import QuizSession
from canvas_quiz.core.services.question_bank import QuestionBank

from conftest import make_question


def test_initial_state(session):
    assert session.phase is QuizPhase.QUIZ
    assert session.current_index == 0
    assert session.score == 0
    assert session.selected_option == -1
    assert session.last_answer_correct is None
    assert session.frame_count == 0


def test_select_option_overwrites_previous_choice(session):
    session.select_option(2)
    session.select_option(0)

    assert session.selected_option == 0


@pytest.mark.parametrize("option", [-1, 3])
def test_select_option_rejects_invalid_index(session, option):
    with pytest.raises(ValueError):
        session.select_option(option)


def test_submit_without_selection_is_rejected(session):
    with pytest.raises(QuizStateError):
        session.submit()
    assert session.current_index == 0
    assert session.score == 0


def test_correct_submission_scores_and_advances(session):
    session.select_option(0)

    assert session.submit() is True
    assert session.score == 1
    assert session.current_index == 1
    assert session.selected_option == -1
    assert session.last_answer_correct is True


def test_wrong_submission_advances_without_scoring(session):
    session.select_option(1)

    assert session.submit() is False
    assert session.score == 0
    assert session.current_index == 1
    assert session.last_answer_correct is False


def test_phase_switches_on_frame_after_last_submission():
    session = QuizSession(QuestionBank([make_question("A"), make_question("B")]))
    for option in (0, 1):
        session.select_option(option)
        session.submit()

    assert session.current_index == 2
    assert session.phase is QuizPhase.QUIZ

    session.advance_frame()

    assert session.phase is QuizPhase.RESULT
    assert session.score == 2


def test_result_phase_is_terminal():
    session = QuizSession(QuestionBank([make_question("A")]))
    session.select_option(0)
    session.submit()
    session.advance_frame()

    for _ in range(5):
        session.advance_frame()

    assert session.phase is QuizPhase.RESULT
    with pytest.raises(QuizStateError):
        session.submit()


def test_advance_frame_counts_frames(session):
    for _ in range(3):
        session.advance_frame()

    assert session.frame_count == 3
    assert session.phase is QuizPhase.QUIZ


def test_score_stays_in_range_and_never_decreases(session):
    previous = 0
    for index in range(10):
        session.select_option(index % 3)
        session.submit()
        assert previous <= session.score <= session.get_question_count()
        previous = session.score

    # Every question expects "A", so only the index % 3 == 0 answers count
    assert session.score == 4


def test_snapshot_reflects_state(session):
    session.select_option(1)
    session.advance_frame()

    snapshot = session.snapshot()

    assert snapshot.phase is QuizPhase.QUIZ
    assert snapshot.total_questions == 10
    assert snapshot.selected_option == 1
    assert snapshot.has_selection
    assert snapshot.frame_count == 1
    assert snapshot.current_question.text == "Question 0"


def test_snapshot_has_no_question_past_the_end():
    session = QuizSession(QuestionBank([make_question("A")]))
    session.select_option(0)
    session.submit()

    assert session.snapshot().current_question is None
