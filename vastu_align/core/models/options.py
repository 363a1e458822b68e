"""
Calibration options.

This module defines the user-adjustable configuration of a calibration:
the declared offset from North, the direction it is measured in, and the
snapping grid used when the reference point is placed.

Raw values typically come from free-text inputs. They never raise here;
anything unusable is replaced with the documented default.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

DEFAULT_OFFSET_DEGREES = 0.0
DEFAULT_SNAP_INTERVAL_DEGREES = 2.0
# Finest usable grid: 3600 spokes per turn.
MIN_SNAP_INTERVAL_DEGREES = 0.1


class RotationDirection(Enum):
    """
    Direction in which the calibration offset is measured from North.

    - CLOCKWISE: offset measured clockwise from North
    - ANTICLOCKWISE: offset measured anticlockwise from North
    """
    CLOCKWISE = "cw"
    ANTICLOCKWISE = "acw"

    @property
    def label(self) -> str:
        """Human-readable name used in hint texts."""
        return "clockwise" if self is RotationDirection.CLOCKWISE else "anticlockwise"

    @classmethod
    def parse(cls, value: Any) -> 'RotationDirection':
        """
        Convert an enum member or a string alias to a RotationDirection.

        Accepted strings (case-insensitive): ``cw``, ``clockwise``,
        ``acw``, ``ccw``, ``anticlockwise``, ``counterclockwise``.

        Raises:
            ValueError: If the value is not a known direction
        """
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower().replace("-", "").replace("_", "")
        if key in ("cw", "clockwise"):
            return cls.CLOCKWISE
        if key in ("acw", "ccw", "anticlockwise", "counterclockwise"):
            return cls.ANTICLOCKWISE
        raise ValueError(f"Unknown rotation direction: {value!r}")


def _parse_float(value: Any):
    """Parse a value to a finite float, or return None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        result = float(value)
    except (ValueError, TypeError):
        return None
    if not math.isfinite(result):
        return None
    return result


def _parse_bool(value: Any) -> bool:
    """Parse a value to boolean, handling string representations."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in ('true', '1', 'yes', 'y', 'on')
    return bool(value)


def coerce_offset_degrees(value: Any) -> float:
    """Return the offset in degrees, or 0 if the input is not a number."""
    result = _parse_float(value)
    if result is None:
        return DEFAULT_OFFSET_DEGREES
    return result


def coerce_snap_interval(value: Any) -> float:
    """Return the snap interval in degrees.

    Falls back to 2 if the input is missing, not a number, or finer than
    ``MIN_SNAP_INTERVAL_DEGREES``.
    """
    result = _parse_float(value)
    if result is None or result < MIN_SNAP_INTERVAL_DEGREES:
        return DEFAULT_SNAP_INTERVAL_DEGREES
    return result


def coerce_snap_enabled(value: Any) -> bool:
    """Return the snap toggle as a boolean."""
    return _parse_bool(value)


def coerce_rotation_direction(value: Any) -> RotationDirection:
    """Return the rotation direction, falling back to clockwise."""
    try:
        return RotationDirection.parse(value)
    except ValueError:
        return RotationDirection.CLOCKWISE


@dataclass
class CalibrationOptions:
    """
    Configuration of a calibration.

    Attributes:
        offset_degrees: Declared angle between North and the center->reference
                        vector (default: 0)
        rotation_direction: Direction the offset is measured in (default: clockwise)
        snap_interval_degrees: Angular grid resolution for snapping the
                               reference point (default: 2)
        snap_enabled: Whether the reference point is snapped to the grid
                      (default: True)
    """

    offset_degrees: float = DEFAULT_OFFSET_DEGREES
    rotation_direction: RotationDirection = RotationDirection.CLOCKWISE
    snap_interval_degrees: float = DEFAULT_SNAP_INTERVAL_DEGREES
    snap_enabled: bool = True

    def __post_init__(self):
        """Substitute defaults for unusable values."""
        self.offset_degrees = coerce_offset_degrees(self.offset_degrees)
        self.rotation_direction = coerce_rotation_direction(self.rotation_direction)
        self.snap_interval_degrees = coerce_snap_interval(self.snap_interval_degrees)
        self.snap_enabled = coerce_snap_enabled(self.snap_enabled)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize options to dictionary.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return {
            "offset_degrees": self.offset_degrees,
            "rotation_direction": self.rotation_direction.value,
            "snap_interval_degrees": self.snap_interval_degrees,
            "snap_enabled": self.snap_enabled,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CalibrationOptions':
        """Create CalibrationOptions from a dictionary, defaulting missing keys."""
        return cls(
            offset_degrees=data.get("offset_degrees", DEFAULT_OFFSET_DEGREES),
            rotation_direction=data.get("rotation_direction", RotationDirection.CLOCKWISE),
            snap_interval_degrees=data.get("snap_interval_degrees", DEFAULT_SNAP_INTERVAL_DEGREES),
            snap_enabled=data.get("snap_enabled", True),
        )

    @classmethod
    def default(cls) -> 'CalibrationOptions':
        """Create options with default values."""
        return cls()

    def __repr__(self) -> str:
        return (
            f"CalibrationOptions("
            f"offset={self.offset_degrees:g}deg {self.rotation_direction.value}, "
            f"snap={self.snap_interval_degrees:g}deg "
            f"{'on' if self.snap_enabled else 'off'})"
        )
