"""Screen geometry shared by drawing and hit-testing.

Both the renderer and the input router call :func:`compute_layout` with the
current canvas size, so the boxes that are drawn are exactly the boxes that
respond to clicks.
"""

from __future__ import annotations

from dataclasses import dataclass

from canvas_quiz.constants.quiz_constants import (
    NO_SELECTION,
    OPTION_BOX_HEIGHT,
    OPTION_BOX_SPACING,
    OPTION_BOX_TOP,
    OPTION_BOX_WIDTH,
    OPTION_COUNT,
    SUBMIT_BUTTON_BOTTOM_OFFSET,
    SUBMIT_BUTTON_HEIGHT,
    SUBMIT_BUTTON_WIDTH,
)


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned rectangle in canvas coordinates."""

    x: float
    y: float
    width: float
    height: float

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2

    def contains(self, px: float, py: float) -> bool:
        """Strict containment: points on the border are outside."""
        return self.x < px < self.x + self.width and self.y < py < self.y + self.height


@dataclass(frozen=True, slots=True)
class QuizLayout:
    """Positions of the interactive regions for one canvas size."""

    width: float
    height: float
    option_boxes: tuple[Rect, ...]
    submit_button: Rect

    def option_at(self, px: float, py: float) -> int:
        """Return the index of the first option box containing the point, or -1."""
        for index, box in enumerate(self.option_boxes):
            if box.contains(px, py):
                return index
        return NO_SELECTION


def compute_layout(width: float, height: float) -> QuizLayout:
    box_x = width / 2 - OPTION_BOX_WIDTH / 2
    option_boxes = tuple(
        Rect(box_x, OPTION_BOX_TOP + index * OPTION_BOX_SPACING, OPTION_BOX_WIDTH, OPTION_BOX_HEIGHT)
        for index in range(OPTION_COUNT)
    )
    submit_button = Rect(
        width / 2 - SUBMIT_BUTTON_WIDTH / 2,
        height - SUBMIT_BUTTON_BOTTOM_OFFSET,
        SUBMIT_BUTTON_WIDTH,
        SUBMIT_BUTTON_HEIGHT,
    )
    return QuizLayout(width=width, height=height, option_boxes=option_boxes, submit_button=submit_button)
