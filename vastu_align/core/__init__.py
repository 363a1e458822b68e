"""
Core module for Vastu zone calibration.

This module contains the calibration/geometry engine with no UI or image
decoding dependencies. It can be used standalone for testing or driven by
any front end that supplies pointer coordinates and image dimensions.
"""

from .models import (
    Point,
    Zone,
    VASTU_ZONES,
    CalibrationOptions,
    RotationDirection,
)

from .results import ZoneLayout, ZoneSector, LabelAnchor

from .calibration import Stage, CalibrationState

from .solver import compute_zone_layout, north_angle_on_canvas

from .geometry import (
    angle_of,
    distance,
    snap_angle,
    point_from_polar,
    angular_grid,
)

from .presentation import Viewport, build_draw_commands

from .reports import render_svg_report, save_svg_report

__all__ = [
    # Models
    "Point",
    "Zone",
    "VASTU_ZONES",
    "CalibrationOptions",
    "RotationDirection",

    # Results
    "ZoneLayout",
    "ZoneSector",
    "LabelAnchor",

    # Calibration
    "Stage",
    "CalibrationState",

    # Solver
    "compute_zone_layout",
    "north_angle_on_canvas",

    # Geometry
    "angle_of",
    "distance",
    "snap_angle",
    "point_from_polar",
    "angular_grid",

    # Presentation
    "Viewport",
    "build_draw_commands",

    # Reports
    "render_svg_report",
    "save_svg_report",
]
