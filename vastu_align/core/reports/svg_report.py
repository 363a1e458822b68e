"""SVG export of the overlay.

Produces a standalone SVG document from a list of draw commands, with the
dark background used for exported images.
"""

from __future__ import annotations

import html
import time
from pathlib import Path
from typing import Iterable, Optional, Union

from ..presentation.commands import (
    CircleCommand,
    DrawCommand,
    ImageCommand,
    LineCommand,
    RectCommand,
    Stroke,
    TextCommand,
)
from ..presentation.viewport import Viewport

EXPORT_BACKGROUND = "#020617"

_BASELINES = {
    "middle": "central",
    "alphabetic": "alphabetic",
    "top": "hanging",
    "bottom": "text-after-edge",
}

_ANCHORS = {"center": "middle", "left": "start", "right": "end"}


def _num(value: float) -> str:
    return f"{value:.3f}".rstrip("0").rstrip(".")


def _stroke_attrs(stroke: Optional[Stroke]) -> str:
    if stroke is None:
        return " stroke='none'"
    attrs = f" stroke='{html.escape(stroke.color)}' stroke-width='{_num(stroke.width)}'"
    if stroke.dash:
        attrs += f" stroke-dasharray='{' '.join(_num(d) for d in stroke.dash)}'"
    return attrs


def _fill_attr(fill: Optional[str]) -> str:
    return f" fill='{html.escape(fill)}'" if fill else " fill='none'"


def _transform(cmd: Union[RectCommand, TextCommand]) -> str:
    t = f"translate({_num(cmd.anchor.x)} {_num(cmd.anchor.y)})"
    if cmd.rotation:
        t += f" rotate({_num(cmd.rotation)})"
    return t


def _render_command(cmd: DrawCommand, image_href: Optional[str]) -> Optional[str]:
    if isinstance(cmd, ImageCommand):
        if image_href is None:
            return None
        return (
            f"<image href='{html.escape(image_href)}' x='{_num(cmd.x)}' y='{_num(cmd.y)}' "
            f"width='{_num(cmd.width)}' height='{_num(cmd.height)}' opacity='{_num(cmd.alpha)}' "
            "preserveAspectRatio='none'/>"
        )
    if isinstance(cmd, LineCommand):
        return (
            f"<line x1='{_num(cmd.start.x)}' y1='{_num(cmd.start.y)}' "
            f"x2='{_num(cmd.end.x)}' y2='{_num(cmd.end.y)}'{_stroke_attrs(cmd.stroke)}/>"
        )
    if isinstance(cmd, CircleCommand):
        return (
            f"<circle cx='{_num(cmd.center.x)}' cy='{_num(cmd.center.y)}' r='{_num(cmd.radius)}'"
            f"{_fill_attr(cmd.fill)}{_stroke_attrs(cmd.stroke)}/>"
        )
    if isinstance(cmd, RectCommand):
        return (
            f"<rect transform='{_transform(cmd)}' x='{_num(cmd.x)}' y='{_num(cmd.y)}' "
            f"width='{_num(cmd.width)}' height='{_num(cmd.height)}' "
            f"rx='{_num(cmd.corner_radius)}'{_fill_attr(cmd.fill)}{_stroke_attrs(cmd.stroke)}/>"
        )
    if isinstance(cmd, TextCommand):
        style = ""
        if cmd.shadow:
            style = (
                f" style='filter: drop-shadow(0 0 {_num(cmd.shadow_blur / 2)}px "
                f"{html.escape(cmd.shadow)})'"
            )
        return (
            f"<text transform='{_transform(cmd)}' x='{_num(cmd.dx)}' y='{_num(cmd.dy)}' "
            f"fill='{html.escape(cmd.color)}' font-family='{html.escape(cmd.font.family)}' "
            f"font-size='{_num(cmd.font.size)}' font-weight='{html.escape(cmd.font.weight)}' "
            f"text-anchor='{_ANCHORS.get(cmd.align, 'middle')}' "
            f"dominant-baseline='{_BASELINES.get(cmd.baseline, 'alphabetic')}'{style}>"
            f"{html.escape(cmd.text)}</text>"
        )
    raise TypeError(f"Unsupported draw command: {type(cmd).__name__}")


def render_svg_report(
    commands: Iterable[DrawCommand],
    viewport: Viewport,
    image_href: Optional[str] = None,
    background: Optional[str] = EXPORT_BACKGROUND,
) -> str:
    """Render draw commands as a standalone SVG document.

    The image command is skipped unless ``image_href`` (a URL or data URI
    of the floor plan) is given.
    """
    w = _num(viewport.width)
    h = _num(viewport.height)

    parts: list[str] = []
    parts.append("<?xml version='1.0' encoding='utf-8'?>")
    parts.append(
        f"<svg xmlns='http://www.w3.org/2000/svg' width='{w}' height='{h}' viewBox='0 0 {w} {h}'>"
    )
    if background:
        parts.append(f"<rect x='0' y='0' width='{w}' height='{h}' fill='{html.escape(background)}'/>")
    parts.append("<g>")
    for cmd in commands:
        element = _render_command(cmd, image_href)
        if element is not None:
            parts.append(element)
    parts.append("</g>")
    parts.append("</svg>")
    return "\n".join(parts)


def default_export_filename(now: Optional[float] = None) -> str:
    """File name for an export, e.g. ``VastuAlign_1760000000000.svg``."""
    if now is None:
        now = time.time()
    return f"VastuAlign_{int(now * 1000)}.svg"


def save_svg_report(
    path: Union[str, Path],
    commands: Iterable[DrawCommand],
    viewport: Viewport,
    image_href: Optional[str] = None,
    background: Optional[str] = EXPORT_BACKGROUND,
) -> Path:
    """Render and write an SVG export, returning the written path."""
    p = Path(path)
    p.write_text(render_svg_report(commands, viewport, image_href, background), encoding="utf-8")
    return p
