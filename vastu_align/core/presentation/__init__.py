"""Presentation layer: draw commands, viewport and the state-to-commands adapter."""

from .commands import (
    DrawCommand,
    ImageCommand,
    LineCommand,
    CircleCommand,
    RectCommand,
    TextCommand,
    Stroke,
    Font,
)
from .viewport import Viewport, ImagePlacement
from .adapter import build_draw_commands, grid_commands, marker_commands, zone_commands

__all__ = [
    "DrawCommand",
    "ImageCommand",
    "LineCommand",
    "CircleCommand",
    "RectCommand",
    "TextCommand",
    "Stroke",
    "Font",
    "Viewport",
    "ImagePlacement",
    "build_draw_commands",
    "grid_commands",
    "marker_commands",
    "zone_commands",
]
