"""Application entry point for CanvasQuiz."""

from __future__ import annotations

from pathlib import Path
import sys

from PySide6.QtWidgets import QApplication

from canvas_quiz.constants.about import APP_NAME, APP_VERSION
from canvas_quiz.constants.quiz_constants import DEFAULT_QUESTIONS_PATH
from canvas_quiz.core.errors import QuestionLoadError
from canvas_quiz.core.question_loader import load_questions_from_csv
from canvas_quiz.core.quiz_session import QuizSession
from canvas_quiz.ui.quiz_main_window import QuizMainWindow
from canvas_quiz.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, load the questions, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting %s v%s", APP_NAME, APP_VERSION)

    try:
        bank = load_questions_from_csv(Path(DEFAULT_QUESTIONS_PATH))
    except QuestionLoadError as exc:
        logger.error("Cannot start without questions: %s", exc)
        sys.exit(1)

    app = QApplication(sys.argv)
    window = QuizMainWindow(session=QuizSession(bank))
    window.showMaximized()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
