"""Qt UI components for the quiz canvas."""

from .canvas_painter import paint_commands
from .quiz_canvas import QuizCanvas
from .quiz_main_window import QuizMainWindow

__all__ = [
    "QuizCanvas",
    "QuizMainWindow",
    "paint_commands",
]
