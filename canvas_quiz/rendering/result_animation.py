"""Pass/fail outcome and particle motion for the result screen."""

from __future__ import annotations

import math
from dataclasses import dataclass

from canvas_quiz.constants.quiz_constants import (
    FAIL_ANGULAR_SPEED,
    PARTICLE_BASE_DIAMETER,
    PARTICLE_COUNT,
    PARTICLE_DIAMETER_SWING,
    PARTICLE_EXPANSION_SPEED,
    PARTICLE_MAX_RADIUS,
    PARTICLE_PULSE_OFFSET,
    PARTICLE_PULSE_SPEED,
    PASS_ANGULAR_SPEED,
    PASS_RATIO,
)
from canvas_quiz.constants.ui_constants import FAIL_EMOJI, FAIL_MESSAGE, PASS_EMOJI, PASS_MESSAGE
from canvas_quiz.styling.color_palette import Color, ColorPalette


@dataclass(frozen=True, slots=True)
class ResultOutcome:
    """Presentation choices for a finished quiz."""

    passed: bool
    message: str
    color: Color
    emoji: str
    angular_speed: float


@dataclass(frozen=True, slots=True)
class Particle:
    """One particle, relative to the screen centre."""

    index: int
    x: float
    y: float
    alpha: float
    diameter: float


def pass_threshold(total_questions: int) -> float:
    return total_questions * PASS_RATIO


def evaluate_outcome(score: int, total_questions: int) -> ResultOutcome:
    if score >= pass_threshold(total_questions):
        return ResultOutcome(
            passed=True,
            message=PASS_MESSAGE,
            color=ColorPalette.RESULT_PASS,
            emoji=PASS_EMOJI,
            angular_speed=PASS_ANGULAR_SPEED,
        )
    return ResultOutcome(
        passed=False,
        message=FAIL_MESSAGE,
        color=ColorPalette.RESULT_FAIL,
        emoji=FAIL_EMOJI,
        angular_speed=FAIL_ANGULAR_SPEED,
    )


def expansion_radius(frame_count: int) -> float:
    """Ring radius for a frame; grows outward and restarts at the centre."""
    return (frame_count * PARTICLE_EXPANSION_SPEED) % PARTICLE_MAX_RADIUS


def particle_alpha(radius: float) -> float:
    """Opacity falls linearly from 255 at the centre to 0 at the max radius."""
    return 255.0 * (1.0 - radius / PARTICLE_MAX_RADIUS)


def compute_particles(frame_count: int, angular_speed: float, count: int = PARTICLE_COUNT) -> list[Particle]:
    """Place ``count`` evenly spaced particles on the expanding, rotating ring.

    Angles are in degrees. Every particle shares the ring radius; each one's
    diameter wobbles on its own phase-shifted sine.
    """
    radius = expansion_radius(frame_count)
    alpha = particle_alpha(radius)
    particles = []
    for index in range(count):
        angle = math.radians(index * 360.0 / count + frame_count * angular_speed)
        wobble = math.sin(math.radians(frame_count * PARTICLE_PULSE_SPEED + index * PARTICLE_PULSE_OFFSET))
        particles.append(
            Particle(
                index=index,
                x=math.cos(angle) * radius,
                y=math.sin(angle) * radius,
                alpha=alpha,
                diameter=PARTICLE_BASE_DIAMETER + wobble * PARTICLE_DIAMETER_SWING,
            )
        )
    return particles
