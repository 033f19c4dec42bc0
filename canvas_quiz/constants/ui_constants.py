"""User-facing text and font sizes for the quiz canvas."""

WINDOW_TITLE: str = "CanvasQuiz"

HEADER_TEMPLATE: str = "Question {number} of {total}"
SUBMIT_BUTTON_TEXT: str = "Submit"
RESULT_TITLE: str = "Quiz Result"
SCORE_TEMPLATE: str = "{score} / {total}"
PASS_MESSAGE: str = "Awesome! You really know your stuff!"
FAIL_MESSAGE: str = "Don't give up, you'll do better next time!"
PASS_EMOJI: str = "⭐"
FAIL_EMOJI: str = "\U0001f4a1"

# Pixel sizes
HEADER_FONT_SIZE: int = 24
QUESTION_FONT_SIZE: int = 32
OPTION_FONT_SIZE: int = 18
SUBMIT_FONT_SIZE: int = 20
RESULT_TITLE_FONT_SIZE: int = 40
RESULT_SCORE_FONT_SIZE: int = 60
RESULT_MESSAGE_FONT_SIZE: int = 30
RESULT_EMOJI_FONT_SIZE: int = 80

HEADER_TOP: float = 50.0
HEADER_HEIGHT: float = 40.0
QUESTION_TOP: float = 100.0
QUESTION_HEIGHT: float = 100.0
QUESTION_SIDE_MARGIN: float = 50.0
RESULT_TITLE_CENTER_Y: float = 100.0
RESULT_MESSAGE_OFFSET_Y: float = 80.0
