"""Presentation adapter.

Flattens a :class:`CalibrationState` and its zone layout into the ordered
draw commands consumed by a renderer. No geometry is computed here beyond
placing already-derived angles at the viewport's radii; calling it again
with the same inputs yields the same commands.
"""

from __future__ import annotations

from typing import List

from ..calibration.state import CalibrationState
from ..geometry.angles import point_from_polar
from ..geometry.grid import angular_grid
from ..models.point import Point
from ..results.zone_layout import ZoneLayout, ZoneSector
from .commands import (
    CircleCommand,
    DrawCommand,
    Font,
    ImageCommand,
    LineCommand,
    RectCommand,
    Stroke,
    TextCommand,
)
from .viewport import Viewport

CENTER_COLOR = "#6366f1"
REFERENCE_COLOR = "#10b981"

IMAGE_ALPHA = 0.8

GRID_MAJOR_STROKE = Stroke("rgba(255, 255, 255, 0.25)", 0.5)
GRID_MINOR_STROKE = Stroke("rgba(255, 255, 255, 0.1)", 0.5, (2.0, 4.0))
SECTOR_STROKE = Stroke("rgba(255, 255, 255, 0.15)", 1.0)
CARDINAL_STROKE = Stroke("rgba(99, 102, 241, 0.4)", 2.0)

MARKER_GLOW_RADIUS = 12.0
MARKER_RADIUS = 6.0
MARKER_STROKE = Stroke("white", 2.0)
MARKER_LABEL_OFFSET = 15.0
MARKER_FONT = Font(10, "bold")

LABEL_BOX_WIDTH = 50.0
LABEL_BOX_HEIGHT = 24.0
LABEL_BOX_RADIUS = 6.0
LABEL_BOX_FILL = "rgba(15, 23, 42, 0.7)"
LABEL_BOX_STROKE = Stroke("rgba(255,255,255,0.1)", 1.0)
LABEL_NAME_FONT = Font(11, "bold")
LABEL_ANGLE_FONT = Font(8)
LABEL_ANGLE_COLOR = "rgba(255,255,255,0.6)"


def _glow(color: str) -> str:
    # 0x33 alpha suffix on a #rrggbb colour
    return color + "33"


def marker_commands(point: Point, color: str, label: str) -> List[DrawCommand]:
    """Glowing dot with a caption above it."""
    return [
        CircleCommand(point, MARKER_GLOW_RADIUS, fill=_glow(color)),
        CircleCommand(point, MARKER_RADIUS, fill=color, stroke=MARKER_STROKE),
        TextCommand(
            label,
            point,
            MARKER_FONT,
            dy=-MARKER_LABEL_OFFSET,
            shadow="black",
            shadow_blur=4.0,
        ),
    ]


def grid_commands(center: Point, interval: float, radius: float) -> List[DrawCommand]:
    """Radial snapping guides around the center."""
    commands: List[DrawCommand] = []
    for spoke in angular_grid(interval):
        stroke = GRID_MAJOR_STROKE if spoke.is_major else GRID_MINOR_STROKE
        commands.append(LineCommand(center, point_from_polar(center, spoke.angle, radius), stroke))
    return commands


def _sector_commands(center: Point, sector: ZoneSector, radius: float) -> List[DrawCommand]:
    commands: List[DrawCommand] = [
        LineCommand(center, point_from_polar(center, sector.sector_start, radius), SECTOR_STROKE)
    ]
    if sector.is_cardinal:
        commands.append(
            LineCommand(center, point_from_polar(center, sector.sector_mid, radius), CARDINAL_STROKE)
        )

    anchor = sector.label_anchor
    commands.append(
        RectCommand(
            anchor.position,
            -LABEL_BOX_WIDTH / 2,
            -LABEL_BOX_HEIGHT / 2,
            LABEL_BOX_WIDTH,
            LABEL_BOX_HEIGHT,
            corner_radius=LABEL_BOX_RADIUS,
            rotation=anchor.rotation,
            fill=LABEL_BOX_FILL,
            stroke=LABEL_BOX_STROKE,
        )
    )
    commands.append(
        TextCommand(
            sector.zone.name,
            anchor.position,
            LABEL_NAME_FONT,
            rotation=anchor.rotation,
            dy=-2.0,
            baseline="middle",
        )
    )
    commands.append(
        TextCommand(
            sector.zone.label,
            anchor.position,
            LABEL_ANGLE_FONT,
            color=LABEL_ANGLE_COLOR,
            rotation=anchor.rotation,
            dy=7.0,
            baseline="middle",
        )
    )
    return commands


def zone_commands(layout: ZoneLayout, radius: float) -> List[DrawCommand]:
    """Sector boundaries, cardinal spokes and labels for all 16 zones."""
    commands: List[DrawCommand] = []
    for sector in layout.sectors:
        commands.extend(_sector_commands(layout.center, sector, radius))
    return commands


def build_draw_commands(
    state: CalibrationState,
    viewport: Viewport,
    image_alpha: float = IMAGE_ALPHA,
) -> List[DrawCommand]:
    """
    Full redraw for the current state.

    Order: image, snapping grid and center marker (once a center exists),
    reference marker and zone overlay (once calibrated).
    """
    commands: List[DrawCommand] = []

    if state.image_size is not None:
        placement = viewport.fit_image(*state.image_size)
        commands.append(
            ImageCommand(placement.x, placement.y, placement.width, placement.height, image_alpha)
        )

    if state.center_point is not None:
        commands.extend(
            grid_commands(state.center_point, state.options.snap_interval_degrees, viewport.spoke_radius)
        )
        commands.extend(marker_commands(state.center_point, CENTER_COLOR, "Center"))

    layout = state.zone_layout(viewport.label_radius)
    if layout is not None:
        label = f"{state.options.offset_degrees:g}° Ref"
        commands.extend(marker_commands(layout.reference, REFERENCE_COLOR, label))
        commands.extend(zone_commands(layout, viewport.spoke_radius))

    return commands
