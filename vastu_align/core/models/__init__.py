"""
Data models for Vastu zone calibration.

This module provides the core data structures:
- Point: Canvas position picked by the user
- Zone: One of the 16 fixed compass sectors (VASTU_ZONES)
- CalibrationOptions: Offset, rotation direction and snapping settings
"""

from .point import Point
from .zone import (
    Zone,
    VASTU_ZONES,
    SECTOR_WIDTH,
    SECTOR_HALF_WIDTH,
    zone_by_name,
)
from .options import (
    CalibrationOptions,
    RotationDirection,
    DEFAULT_OFFSET_DEGREES,
    DEFAULT_SNAP_INTERVAL_DEGREES,
    MIN_SNAP_INTERVAL_DEGREES,
    coerce_offset_degrees,
    coerce_snap_interval,
    coerce_snap_enabled,
    coerce_rotation_direction,
)

__all__ = [
    # Point
    "Point",

    # Zones
    "Zone",
    "VASTU_ZONES",
    "SECTOR_WIDTH",
    "SECTOR_HALF_WIDTH",
    "zone_by_name",

    # Options
    "CalibrationOptions",
    "RotationDirection",
    "DEFAULT_OFFSET_DEGREES",
    "DEFAULT_SNAP_INTERVAL_DEGREES",
    "MIN_SNAP_INTERVAL_DEGREES",
    "coerce_offset_degrees",
    "coerce_snap_interval",
    "coerce_snap_enabled",
    "coerce_rotation_direction",
]
