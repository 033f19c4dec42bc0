"""Color palette for the quiz canvas."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Color:
    """RGBA color with 0-255 channels."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    @classmethod
    def grey(cls, level: float, alpha: int = 255) -> Color:
        value = _clamp_channel(level)
        return cls(value, value, value, alpha)

    def with_alpha(self, alpha: float) -> Color:
        """Return the same color with a new (clamped) alpha channel."""
        return Color(self.red, self.green, self.blue, _clamp_channel(alpha))


def _clamp_channel(value: float) -> int:
    return max(0, min(255, int(round(value))))


class ColorPalette:
    """Centralized color definitions for the application."""

    # Background and text
    BACKGROUND = Color(40, 50, 60)          # Dark slate
    TEXT_PRIMARY = Color(255, 255, 255)     # White

    # Option boxes
    OPTION_SELECTED = Color(50, 150, 200)   # Blue accent
    OPTION_IDLE = Color(100, 120, 140)      # Neutral slate

    # Submit button
    SUBMIT_ENABLED = Color(50, 200, 50)     # Green
    SUBMIT_HOVER = Color(0, 200, 0)         # Deeper green
    SUBMIT_DISABLED = Color(150, 150, 150)  # Grey

    # Effects
    CURSOR_TRAIL = Color(255, 200, 0)       # Orange/Yellow
    RESULT_PASS = Color(0, 255, 0)          # Green
    RESULT_FAIL = Color(255, 100, 0)        # Orange
