"""Styling module for the quiz canvas."""

from .color_palette import Color, ColorPalette

__all__ = ["Color", "ColorPalette"]
