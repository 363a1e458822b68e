"""Neutral draw commands.

A renderer consumes these records in order. Colours are CSS colour
strings; rotations are canvas degrees applied about the command's
``anchor`` before its local offsets.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from ..models.point import Point


@dataclass(frozen=True)
class Stroke:
    color: str
    width: float = 1.0
    dash: Tuple[float, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {"color": self.color, "width": self.width, "dash": list(self.dash)}


@dataclass(frozen=True)
class Font:
    size: float
    weight: str = "normal"
    family: str = "Inter"

    @property
    def css(self) -> str:
        """Canvas-style font shorthand, e.g. ``bold 11px Inter``."""
        prefix = "" if self.weight == "normal" else f"{self.weight} "
        return f"{prefix}{self.size:g}px {self.family}"


@dataclass(frozen=True)
class DrawCommand(ABC):
    """Base class for all draw commands."""

    @property
    @abstractmethod
    def kind(self) -> str:
        """Command type name used in serialized output."""
        pass

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Serialize command to dictionary."""
        pass


@dataclass(frozen=True)
class ImageCommand(DrawCommand):
    """Draw the floor-plan image scaled into a rectangle."""

    x: float
    y: float
    width: float
    height: float
    alpha: float = 1.0

    @property
    def kind(self) -> str:
        return "image"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "alpha": self.alpha,
        }


@dataclass(frozen=True)
class LineCommand(DrawCommand):
    """Straight line from ``start`` to ``end``."""

    start: Point
    end: Point
    stroke: Stroke

    @property
    def kind(self) -> str:
        return "line"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "start": self.start.to_dict(),
            "end": self.end.to_dict(),
            "stroke": self.stroke.to_dict(),
        }


@dataclass(frozen=True)
class CircleCommand(DrawCommand):
    """Circle centred on ``center``, filled and/or stroked."""

    center: Point
    radius: float
    fill: Optional[str] = None
    stroke: Optional[Stroke] = None

    @property
    def kind(self) -> str:
        return "circle"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "center": self.center.to_dict(),
            "radius": self.radius,
            "fill": self.fill,
            "stroke": self.stroke.to_dict() if self.stroke else None,
        }


@dataclass(frozen=True)
class RectCommand(DrawCommand):
    """Rounded rectangle in the frame of ``anchor`` rotated by ``rotation``.

    ``x``/``y`` is the top-left corner relative to the anchor.
    """

    anchor: Point
    x: float
    y: float
    width: float
    height: float
    corner_radius: float = 0.0
    rotation: float = 0.0
    fill: Optional[str] = None
    stroke: Optional[Stroke] = None

    @property
    def kind(self) -> str:
        return "rect"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "anchor": self.anchor.to_dict(),
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "corner_radius": self.corner_radius,
            "rotation_deg": self.rotation,
            "fill": self.fill,
            "stroke": self.stroke.to_dict() if self.stroke else None,
        }


@dataclass(frozen=True)
class TextCommand(DrawCommand):
    """Text drawn at ``(dx, dy)`` in the frame of ``anchor`` rotated by ``rotation``."""

    text: str
    anchor: Point
    font: Font
    color: str = "white"
    rotation: float = 0.0
    dx: float = 0.0
    dy: float = 0.0
    align: str = "center"
    baseline: str = "alphabetic"
    shadow: Optional[str] = None
    shadow_blur: float = 0.0

    @property
    def kind(self) -> str:
        return "text"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "text": self.text,
            "anchor": self.anchor.to_dict(),
            "font": self.font.css,
            "color": self.color,
            "rotation_deg": self.rotation,
            "dx": self.dx,
            "dy": self.dy,
            "align": self.align,
            "baseline": self.baseline,
            "shadow": self.shadow,
            "shadow_blur": self.shadow_blur,
        }
