"""Shared fixtures for the quiz tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from canvas_quiz.core.models import Question
from canvas_quiz.core.quiz_session import QuizSession
from canvas_quiz.core.services.question_bank import QuestionBank

CSV_HEADER = "question,optionA,optionB,optionC,correct\n"


def make_question(correct_label: str = "A", text: str = "Q") -> Question:
    return Question(text=text, options=("A1", "A2", "A3"), correct_label=correct_label)


@pytest.fixture
def write_csv(tmp_path):
    """Write CSV text to a temp file and return its path."""

    def _write(body: str, header: str = CSV_HEADER) -> Path:
        path = tmp_path / "questions.csv"
        path.write_text(header + body, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def ten_question_bank() -> QuestionBank:
    return QuestionBank(make_question("A", text=f"Question {n}") for n in range(10))


@pytest.fixture
def session(ten_question_bank) -> QuizSession:
    return QuizSession(ten_question_bank)
