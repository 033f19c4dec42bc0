"""Tests for CSV question loading."""

import pytest

from canvas_quiz.core.errors import QuestionLoadError, QuizError
from canvas_quiz.core.models import QuizPhase
from canvas_quiz.core.question_loader import load_questions_from_csv
from canvas_quiz.core.quiz_session import QuizSession
from canvas_quiz.rendering.result_animation import evaluate_outcome


def test_loads_rows_in_order(write_csv):
    path = write_csv("First?,a,b,c,A\nSecond?,d,e,f,C\n")

    bank = load_questions_from_csv(path)

    assert bank.get_question_count() == 2
    first, second = bank.get_questions()
    assert first.text == "First?"
    assert first.options == ("a", "b", "c")
    assert first.correct_label == "A"
    assert second.text == "Second?"
    assert second.correct_label == "C"


def test_quoted_fields_keep_commas(write_csv):
    path = write_csv('"Pick one, please",x,"y, z",w,B\n')

    question = load_questions_from_csv(path).get_question_at_index(0)

    assert question.text == "Pick one, please"
    assert question.options[1] == "y, z"


def test_extra_columns_are_ignored(write_csv):
    header = "id,question,optionA,optionB,optionC,correct,notes\n"
    path = write_csv("7,Q,a,b,c,B,easy\n", header=header)

    question = load_questions_from_csv(path).get_question_at_index(0)

    assert question.text == "Q"
    assert question.correct_label == "B"


def test_utf8_bom_is_tolerated(tmp_path):
    path = tmp_path / "bom.csv"
    path.write_bytes("\ufeffquestion,optionA,optionB,optionC,correct\nQ,a,b,c,A\n".encode("utf-8"))

    bank = load_questions_from_csv(path)

    assert bank.get_question_at_index(0).text == "Q"


def test_invalid_correct_label_is_not_rejected(write_csv):
    path = write_csv("Q,a,b,c,Z\n")

    question = load_questions_from_csv(path).get_question_at_index(0)

    assert question.correct_label == "Z"


def test_missing_file_raises_load_error(tmp_path):
    with pytest.raises(QuestionLoadError) as excinfo:
        load_questions_from_csv(tmp_path / "nope.csv")
    assert isinstance(excinfo.value.__cause__, OSError)


def test_missing_column_raises_load_error(write_csv):
    path = write_csv("Q,a,b,A\n", header="question,optionA,optionB,correct\n")

    with pytest.raises(QuestionLoadError, match="optionC"):
        load_questions_from_csv(path)


def test_short_row_raises_load_error(write_csv):
    path = write_csv("Q,a,b,c,A\nBroken,a,b\n")

    with pytest.raises(QuestionLoadError, match="Row 3"):
        load_questions_from_csv(path)


def test_header_only_file_loads_empty_bank(write_csv):
    path = write_csv("")

    bank = load_questions_from_csv(path)

    assert bank.get_question_count() == 0


def test_header_only_file_opens_on_result_screen(write_csv):
    session = QuizSession(load_questions_from_csv(write_csv("")))

    session.advance_frame()

    assert session.phase is QuizPhase.RESULT
    assert session.score == 0
    assert evaluate_outcome(session.score, session.get_question_count()).passed


def test_file_without_header_raises_load_error(tmp_path):
    path = tmp_path / "blank.csv"
    path.write_text("", encoding="utf-8")

    with pytest.raises(QuestionLoadError, match="Missing required column"):
        load_questions_from_csv(path)


def test_invalid_utf8_raises_load_error(tmp_path):
    path = tmp_path / "latin.csv"
    path.write_bytes(b"question,optionA,optionB,optionC,correct\n\xff\xfe,a,b,c,A\n")

    with pytest.raises(QuestionLoadError) as excinfo:
        load_questions_from_csv(path)
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)


def test_load_error_is_a_quiz_error():
    assert issubclass(QuestionLoadError, QuizError)
