"""Builds the drawing commands for one frame of the quiz canvas."""

from __future__ import annotations

import math

from canvas_quiz.constants.quiz_constants import (
    EMOJI_PARTICLE_INDEX,
    HOVER_BRIGHTNESS_MAX,
    HOVER_BRIGHTNESS_MIN,
    HOVER_PULSE_OPTION_OFFSET,
    HOVER_PULSE_SPEED,
    NO_SELECTION,
    OPTION_BOX_CORNER_RADIUS,
    OPTION_LETTERS,
    OPTION_TEXT_INDENT,
    SUBMIT_BUTTON_CORNER_RADIUS,
)
from canvas_quiz.constants.ui_constants import (
    HEADER_FONT_SIZE,
    HEADER_HEIGHT,
    HEADER_TEMPLATE,
    HEADER_TOP,
    OPTION_FONT_SIZE,
    QUESTION_FONT_SIZE,
    QUESTION_HEIGHT,
    QUESTION_SIDE_MARGIN,
    QUESTION_TOP,
    RESULT_EMOJI_FONT_SIZE,
    RESULT_MESSAGE_FONT_SIZE,
    RESULT_MESSAGE_OFFSET_Y,
    RESULT_SCORE_FONT_SIZE,
    RESULT_TITLE,
    RESULT_TITLE_CENTER_Y,
    RESULT_TITLE_FONT_SIZE,
    SCORE_TEMPLATE,
    SUBMIT_BUTTON_TEXT,
    SUBMIT_FONT_SIZE,
)
from canvas_quiz.core.layout import QuizLayout, Rect
from canvas_quiz.core.models import QuizPhase, QuizSnapshot
from canvas_quiz.rendering.cursor_trail import CursorTrail
from canvas_quiz.rendering.draw_commands import (
    ClearCanvas,
    DrawCommand,
    DrawText,
    FillCircle,
    FillRoundedRect,
    TextAlign,
)
from canvas_quiz.rendering.result_animation import compute_particles, evaluate_outcome
from canvas_quiz.styling.color_palette import Color, ColorPalette


def option_label(index: int, option_text: str) -> str:
    return f"{OPTION_LETTERS[index]}. {option_text}"


def hover_brightness(frame_count: int, option_index: int) -> float:
    """Grey level of a hovered option; each option pulses on its own phase."""
    phase = math.radians(frame_count * HOVER_PULSE_SPEED + option_index * HOVER_PULSE_OPTION_OFFSET)
    return HOVER_BRIGHTNESS_MIN + (math.sin(phase) + 1) / 2 * (HOVER_BRIGHTNESS_MAX - HOVER_BRIGHTNESS_MIN)


def option_color(option_index: int, selected_option: int, hovered_option: int, frame_count: int) -> Color:
    if option_index == selected_option:
        return ColorPalette.OPTION_SELECTED
    if option_index == hovered_option:
        return Color.grey(hover_brightness(frame_count, option_index))
    return ColorPalette.OPTION_IDLE


def submit_color(has_selection: bool, hovered: bool) -> Color:
    if not has_selection:
        return ColorPalette.SUBMIT_DISABLED
    return ColorPalette.SUBMIT_HOVER if hovered else ColorPalette.SUBMIT_ENABLED


class FrameRenderer:
    """Turns a session snapshot into drawing commands.

    The only state kept between frames is the cursor trail, which grows once
    per frame tick through :meth:`track_pointer`. :meth:`render` has no side
    effects, so extra repaints draw the same frame again.
    """

    def __init__(self, trail: CursorTrail | None = None) -> None:
        self.trail = trail if trail is not None else CursorTrail()

    def track_pointer(self, pointer: tuple[float, float] | None) -> None:
        if pointer is not None:
            self.trail.push(*pointer)

    def render(
        self,
        snapshot: QuizSnapshot,
        layout: QuizLayout,
        pointer: tuple[float, float] | None,
    ) -> list[DrawCommand]:
        commands: list[DrawCommand] = [ClearCanvas(ColorPalette.BACKGROUND)]
        if snapshot.phase is QuizPhase.QUIZ and snapshot.current_question is not None:
            commands.extend(self._quiz_commands(snapshot, layout, pointer))
        elif snapshot.phase is QuizPhase.RESULT:
            commands.extend(self._result_commands(snapshot, layout))
        commands.extend(self._trail_commands())
        return commands

    def _trail_commands(self) -> list[DrawCommand]:
        return [
            FillCircle(dot.x, dot.y, dot.radius, ColorPalette.CURSOR_TRAIL.with_alpha(dot.alpha))
            for dot in self.trail.dots()
        ]

    def _quiz_commands(
        self,
        snapshot: QuizSnapshot,
        layout: QuizLayout,
        pointer: tuple[float, float] | None,
    ) -> list[DrawCommand]:
        question = snapshot.current_question
        text_color = ColorPalette.TEXT_PRIMARY
        hovered = layout.option_at(*pointer) if pointer is not None else NO_SELECTION

        commands: list[DrawCommand] = [
            DrawText(
                HEADER_TEMPLATE.format(number=snapshot.current_index + 1, total=snapshot.total_questions),
                Rect(0, HEADER_TOP, layout.width, HEADER_HEIGHT),
                HEADER_FONT_SIZE,
                text_color,
                TextAlign.CENTER_TOP,
            ),
            DrawText(
                question.text,
                Rect(QUESTION_SIDE_MARGIN, QUESTION_TOP, layout.width - 2 * QUESTION_SIDE_MARGIN, QUESTION_HEIGHT),
                QUESTION_FONT_SIZE,
                text_color,
                TextAlign.CENTER_TOP,
                wrap=True,
            ),
        ]

        for index, (box, option_text) in enumerate(zip(layout.option_boxes, question.options)):
            fill = option_color(index, snapshot.selected_option, hovered, snapshot.frame_count)
            commands.append(FillRoundedRect(box, OPTION_BOX_CORNER_RADIUS, fill))
            text_rect = Rect(box.x + OPTION_TEXT_INDENT, box.y, box.width - OPTION_TEXT_INDENT, box.height)
            commands.append(
                DrawText(option_label(index, option_text), text_rect, OPTION_FONT_SIZE, text_color, TextAlign.LEFT_CENTER)
            )

        button = layout.submit_button
        button_hovered = pointer is not None and button.contains(*pointer)
        commands.append(
            FillRoundedRect(button, SUBMIT_BUTTON_CORNER_RADIUS, submit_color(snapshot.has_selection, button_hovered))
        )
        commands.append(DrawText(SUBMIT_BUTTON_TEXT, button, SUBMIT_FONT_SIZE, text_color, TextAlign.CENTER))
        return commands

    def _result_commands(self, snapshot: QuizSnapshot, layout: QuizLayout) -> list[DrawCommand]:
        outcome = evaluate_outcome(snapshot.score, snapshot.total_questions)
        text_color = ColorPalette.TEXT_PRIMARY
        center_x = layout.width / 2
        center_y = layout.height / 2

        commands: list[DrawCommand] = [
            DrawText(
                RESULT_TITLE,
                _centered_line(center_x, RESULT_TITLE_CENTER_Y, layout.width, RESULT_TITLE_FONT_SIZE),
                RESULT_TITLE_FONT_SIZE,
                text_color,
            ),
            DrawText(
                SCORE_TEMPLATE.format(score=snapshot.score, total=snapshot.total_questions),
                _centered_line(center_x, center_y, layout.width, RESULT_SCORE_FONT_SIZE),
                RESULT_SCORE_FONT_SIZE,
                text_color,
            ),
            DrawText(
                outcome.message,
                _centered_line(center_x, center_y + RESULT_MESSAGE_OFFSET_Y, layout.width, RESULT_MESSAGE_FONT_SIZE),
                RESULT_MESSAGE_FONT_SIZE,
                text_color,
            ),
        ]

        for particle in compute_particles(snapshot.frame_count, outcome.angular_speed):
            color = outcome.color.with_alpha(particle.alpha)
            commands.append(FillCircle(center_x + particle.x, center_y + particle.y, particle.diameter / 2, color))
            if particle.index == EMOJI_PARTICLE_INDEX:
                commands.append(
                    DrawText(
                        outcome.emoji,
                        _centered_line(center_x, center_y, layout.width, RESULT_EMOJI_FONT_SIZE),
                        RESULT_EMOJI_FONT_SIZE,
                        color,
                    )
                )
        return commands


def _centered_line(center_x: float, center_y: float, width: float, pixel_size: int) -> Rect:
    # Twice the font size leaves room for ascenders and descenders
    height = pixel_size * 2
    return Rect(center_x - width / 2, center_y - height / 2, width, height)
