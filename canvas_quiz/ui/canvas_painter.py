"""Replays renderer draw commands on a QPainter."""

from __future__ import annotations

from collections.abc import Iterable

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QColor, QFont, QPainter, QTextOption

from canvas_quiz.core.layout import Rect
from canvas_quiz.rendering.draw_commands import (
    ClearCanvas,
    DrawCommand,
    DrawText,
    FillCircle,
    FillRoundedRect,
    TextAlign,
)
from canvas_quiz.styling.color_palette import Color

_ALIGNMENT_FLAGS = {
    TextAlign.CENTER_TOP: Qt.AlignHCenter | Qt.AlignTop,
    TextAlign.CENTER: Qt.AlignCenter,
    TextAlign.LEFT_CENTER: Qt.AlignLeft | Qt.AlignVCenter,
}


def to_qcolor(color: Color) -> QColor:
    return QColor(color.red, color.green, color.blue, color.alpha)


def to_qrectf(rect: Rect) -> QRectF:
    return QRectF(rect.x, rect.y, rect.width, rect.height)


def paint_commands(painter: QPainter, commands: Iterable[DrawCommand]) -> None:
    """Execute draw commands in order on an active painter."""
    painter.setRenderHint(QPainter.Antialiasing, True)
    painter.setRenderHint(QPainter.TextAntialiasing, True)
    for command in commands:
        if isinstance(command, ClearCanvas):
            painter.fillRect(painter.viewport(), to_qcolor(command.color))
        elif isinstance(command, FillCircle):
            painter.setPen(Qt.NoPen)
            painter.setBrush(to_qcolor(command.color))
            painter.drawEllipse(QPointF(command.center_x, command.center_y), command.radius, command.radius)
        elif isinstance(command, FillRoundedRect):
            painter.setPen(Qt.NoPen)
            painter.setBrush(to_qcolor(command.color))
            painter.drawRoundedRect(to_qrectf(command.rect), command.corner_radius, command.corner_radius)
        elif isinstance(command, DrawText):
            _paint_text(painter, command)
        else:
            raise TypeError(f"Unsupported draw command: {command!r}")


def _paint_text(painter: QPainter, command: DrawText) -> None:
    font = QFont(painter.font())
    font.setPixelSize(command.pixel_size)
    painter.setFont(font)
    painter.setPen(to_qcolor(command.color))
    option = QTextOption(_ALIGNMENT_FLAGS[command.align])
    option.setWrapMode(QTextOption.WordWrap if command.wrap else QTextOption.NoWrap)
    painter.drawText(to_qrectf(command.rect), command.text, option)
