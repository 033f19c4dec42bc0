"""Qt main window hosting the quiz canvas and the frame timer."""

from __future__ import annotations

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import QMainWindow

from canvas_quiz.constants.quiz_constants import FRAME_INTERVAL_MS
from canvas_quiz.constants.ui_constants import WINDOW_TITLE
from canvas_quiz.core.quiz_session import QuizSession
from canvas_quiz.ui.quiz_canvas import QuizCanvas


class QuizMainWindow(QMainWindow):
    """Main window driving the per-frame render loop."""

    def __init__(self, session: QuizSession) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)

        self.session = session
        self.canvas = QuizCanvas(session, self)
        self.setCentralWidget(self.canvas)

        self._configure_frame_timer()

    def _configure_frame_timer(self) -> None:
        self.frame_timer = QTimer(self)
        self.frame_timer.setInterval(FRAME_INTERVAL_MS)
        self.frame_timer.timeout.connect(self._advance_frame)
        self.frame_timer.start()

    def _advance_frame(self) -> None:
        self.session.advance_frame()
        self.canvas.advance_frame()
