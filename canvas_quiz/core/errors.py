"""Exception hierarchy for the quiz core."""

from __future__ import annotations


class QuizError(Exception):
    """Base class for all quiz errors."""


class QuestionLoadError(QuizError):
    """Raised when the question source cannot be read or parsed."""


class QuizStateError(QuizError):
    """Raised when a session mutator is called in a state that does not allow it."""
