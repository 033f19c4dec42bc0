"""Immutable drawing primitives produced by the frame renderer.

The renderer never touches a painting backend; it returns a list of these
commands and the Qt canvas replays them with ``QPainter``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Union

from canvas_quiz.core.layout import Rect
from canvas_quiz.styling.color_palette import Color


class TextAlign(Enum):
    """Text anchoring inside a text rectangle."""

    CENTER_TOP = auto()
    CENTER = auto()
    LEFT_CENTER = auto()


@dataclass(frozen=True, slots=True)
class ClearCanvas:
    color: Color


@dataclass(frozen=True, slots=True)
class FillCircle:
    center_x: float
    center_y: float
    radius: float
    color: Color


@dataclass(frozen=True, slots=True)
class FillRoundedRect:
    rect: Rect
    corner_radius: float
    color: Color


@dataclass(frozen=True, slots=True)
class DrawText:
    text: str
    rect: Rect
    pixel_size: int
    color: Color
    align: TextAlign = TextAlign.CENTER
    wrap: bool = False


DrawCommand = Union[ClearCanvas, FillCircle, FillRoundedRect, DrawText]
