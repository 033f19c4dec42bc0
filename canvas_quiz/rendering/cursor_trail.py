"""Fading cursor trail drawn in place of the system pointer."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

from canvas_quiz.constants.quiz_constants import (
    TRAIL_LENGTH,
    TRAIL_MAX_ALPHA,
    TRAIL_MIN_ALPHA,
    TRAIL_MIN_RADIUS,
    TRAIL_RADIUS,
)


@dataclass(frozen=True, slots=True)
class TrailDot:
    x: float
    y: float
    alpha: float
    radius: float


class CursorTrail:
    """Bounded FIFO of recent pointer positions, oldest first."""

    def __init__(self, max_length: int = TRAIL_LENGTH) -> None:
        self._max_length = max_length
        self._points: deque[tuple[float, float]] = deque(maxlen=max_length)

    def push(self, x: float, y: float) -> None:
        self._points.append((x, y))

    def points(self) -> list[tuple[float, float]]:
        return list(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def dots(self) -> list[TrailDot]:
        """Return the trail with opacity and radius growing from oldest to newest.

        Both values are interpolated over the buffer capacity rather than its
        current length, so the newest dot approaches but never reaches the
        maximum.
        """
        dots = []
        for index, (x, y) in enumerate(self._points):
            fraction = index / self._max_length
            dots.append(
                TrailDot(
                    x=x,
                    y=y,
                    alpha=_lerp(TRAIL_MIN_ALPHA, TRAIL_MAX_ALPHA, fraction),
                    radius=_lerp(TRAIL_MIN_RADIUS, TRAIL_RADIUS, fraction),
                )
            )
        return dots


def _lerp(start: float, end: float, fraction: float) -> float:
    return start + (end - start) * fraction
