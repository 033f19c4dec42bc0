"""Static metadata describing CanvasQuiz."""

APP_NAME = "CanvasQuiz"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
