"""Geometry utilities for Vastu zone calibration."""

from .angles import (
    FULL_TURN,
    wrap_360,
    angular_difference,
    angle_of,
    distance,
    snap_angle,
    point_from_polar,
)
from .grid import MAX_SPOKES, GridSpoke, angular_grid, grid_angles

__all__ = [
    "FULL_TURN",
    "wrap_360",
    "angular_difference",
    "angle_of",
    "distance",
    "snap_angle",
    "point_from_polar",
    "MAX_SPOKES",
    "GridSpoke",
    "angular_grid",
    "grid_angles",
]
