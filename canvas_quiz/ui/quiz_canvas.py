"""Widget that draws the quiz and forwards pointer input."""

from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtGui import QMouseEvent, QPainter, QPaintEvent
from PySide6.QtWidgets import QWidget

from canvas_quiz.core.input_router import InputRouter
from canvas_quiz.core.layout import QuizLayout, compute_layout
from canvas_quiz.core.quiz_session import QuizSession
from canvas_quiz.rendering.frame_renderer import FrameRenderer
from canvas_quiz.ui.canvas_painter import paint_commands

logger = logging.getLogger(__name__)


class QuizCanvas(QWidget):
    """Immediate-mode canvas: repainted every frame from the session snapshot."""

    def __init__(self, session: QuizSession, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.session = session
        self._router = InputRouter(session)
        self._renderer = FrameRenderer()
        self._pointer: tuple[float, float] | None = None

        self.setMouseTracking(True)
        # The cursor trail replaces the system pointer
        self.setCursor(Qt.BlankCursor)
        self.setAttribute(Qt.WA_OpaquePaintEvent, True)

    def current_layout(self) -> QuizLayout:
        return compute_layout(self.width(), self.height())

    def advance_frame(self) -> None:
        """Record the pointer for this frame tick and schedule a repaint."""
        self._renderer.track_pointer(self._pointer)
        self.update()

    def mouseMoveEvent(self, event: QMouseEvent) -> None:  # noqa: N802 - Qt override
        position = event.position()
        self._pointer = (position.x(), position.y())
        super().mouseMoveEvent(event)

    def mousePressEvent(self, event: QMouseEvent) -> None:  # noqa: N802 - Qt override
        if event.button() != Qt.LeftButton:
            super().mousePressEvent(event)
            return
        position = event.position()
        self._pointer = (position.x(), position.y())
        result = self._router.handle_click(position.x(), position.y(), self.current_layout())
        if result.submitted:
            logger.debug("Submitted answer (correct=%s)", result.answer_correct)
        self.update()

    def paintEvent(self, event: QPaintEvent) -> None:  # noqa: N802 - Qt override
        commands = self._renderer.render(self.session.snapshot(), self.current_layout(), self._pointer)
        painter = QPainter(self)
        try:
            paint_commands(painter, commands)
        finally:
            painter.end()
