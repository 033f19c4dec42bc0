"""Loading quiz questions from a CSV file.

File format (UTF-8, header row required, one question per row):

    question,optionA,optionB,optionC,correct
    What is 2 + 2?,3,4,5,B

Columns beyond the required five are ignored. The ``correct`` column is
copied as-is; a letter outside A-C is not rejected here and simply makes
every answer to that question score as wrong. A file with only the header
row yields an empty bank, and the session goes straight to its result.

Architecture note:
    The loader only copies fields and reports structural problems. It runs
    once before the first frame, so every failure is reported as a
    ``QuestionLoadError`` and treated as fatal by the entry point.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path

from canvas_quiz.constants.quiz_constants import REQUIRED_COLUMNS
from canvas_quiz.core.errors import QuestionLoadError
from canvas_quiz.core.models import Question
from canvas_quiz.core.services.question_bank import QuestionBank

logger = logging.getLogger(__name__)


def load_questions_from_csv(file_path: Path) -> QuestionBank:
    try:
        with file_path.open(encoding="utf-8-sig", newline="") as handle:
            questions = _parse_rows(csv.DictReader(handle))
    except (OSError, UnicodeDecodeError) as exc:
        raise QuestionLoadError(f"Could not read question file {file_path}: {exc}") from exc
    except csv.Error as exc:
        raise QuestionLoadError(f"Malformed CSV in {file_path}: {exc}") from exc

    logger.info("Loaded %d questions from %s", len(questions), file_path)
    return QuestionBank(questions)


def _parse_rows(reader: csv.DictReader) -> list[Question]:
    header = reader.fieldnames or []
    missing = [column for column in REQUIRED_COLUMNS if column not in header]
    if missing:
        raise QuestionLoadError(f"Missing required column(s): {', '.join(missing)}")

    questions: list[Question] = []
    # Row 1 is the header
    for row_number, row in enumerate(reader, start=2):
        questions.append(_parse_row(row, row_number))
    return questions


def _parse_row(row: dict[str, str | None], row_number: int) -> Question:
    values: dict[str, str] = {}
    for column in REQUIRED_COLUMNS:
        value = row.get(column)
        if value is None:
            raise QuestionLoadError(f"Row {row_number} is missing the '{column}' field.")
        values[column] = value

    return Question(
        text=values["question"],
        options=(values["optionA"], values["optionB"], values["optionC"]),
        correct_label=values["correct"],
    )
