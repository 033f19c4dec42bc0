"""Quiz-related constants shared across core, rendering and UI layers."""

DEFAULT_QUESTIONS_PATH: str = "questions.csv"
REQUIRED_COLUMNS: tuple[str, ...] = ("question", "optionA", "optionB", "optionC", "correct")
OPTION_LETTERS: tuple[str, ...] = ("A", "B", "C")
OPTION_COUNT: int = len(OPTION_LETTERS)
NO_SELECTION: int = -1

PASS_RATIO: float = 0.7
FRAME_INTERVAL_MS: int = 16

# Cursor trail
TRAIL_LENGTH: int = 15
TRAIL_RADIUS: float = 8.0
TRAIL_MIN_RADIUS: float = 1.0
TRAIL_MIN_ALPHA: int = 50
TRAIL_MAX_ALPHA: int = 255

# Option boxes and submit button geometry (pixels)
OPTION_BOX_TOP: float = 250.0
OPTION_BOX_WIDTH: float = 300.0
OPTION_BOX_HEIGHT: float = 50.0
OPTION_BOX_SPACING: float = 80.0
OPTION_BOX_CORNER_RADIUS: float = 10.0
OPTION_TEXT_INDENT: float = 20.0
SUBMIT_BUTTON_WIDTH: float = 150.0
SUBMIT_BUTTON_HEIGHT: float = 40.0
SUBMIT_BUTTON_BOTTOM_OFFSET: float = 80.0
SUBMIT_BUTTON_CORNER_RADIUS: float = 5.0

# Hover pulsation, in degrees
HOVER_PULSE_SPEED: float = 5.0
HOVER_PULSE_OPTION_OFFSET: float = 30.0
HOVER_BRIGHTNESS_MIN: float = 180.0
HOVER_BRIGHTNESS_MAX: float = 255.0

# Result screen particles
PARTICLE_COUNT: int = 100
PARTICLE_EXPANSION_SPEED: float = 5.0
PARTICLE_MAX_RADIUS: float = 300.0
PARTICLE_BASE_DIAMETER: float = 15.0
PARTICLE_DIAMETER_SWING: float = 5.0
PARTICLE_PULSE_SPEED: float = 10.0
PARTICLE_PULSE_OFFSET: float = 10.0
PASS_ANGULAR_SPEED: float = 0.5
FAIL_ANGULAR_SPEED: float = -0.8
EMOJI_PARTICLE_INDEX: int = 0
