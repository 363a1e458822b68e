"""vastu_align.core.geometry.angles

Angle helpers for the calibration engine.

Conventions:
  - Canvas angle: 0 along +x (screen right), increasing clockwise on screen
    because +y points down
  - Angles: degrees throughout, normalized to [0, 360) where noted

Implementation detail:
  - Direction is computed using ``atan2(dy, dx)``, so ``angle_of`` and
    ``point_from_polar`` are inverses of each other.
"""

from __future__ import annotations

import math

from ..models.point import Point


FULL_TURN = 360.0


def wrap_360(angle: float) -> float:
    """Normalize angle to [0, 360)."""
    a = angle % FULL_TURN
    # -1e-20 % 360 evaluates to 360.0
    if a >= FULL_TURN:
        a -= FULL_TURN
    return a


def angular_difference(a: float, b: float) -> float:
    """Smallest signed difference ``a - b`` in degrees, in (-180, 180]."""
    d = wrap_360(a - b)
    if d > 180.0:
        d -= FULL_TURN
    return d


def angle_of(origin: Point, target: Point) -> float:
    """Canvas angle of the vector from ``origin`` to ``target``, in [0, 360).

    Coincident points give 0 (``atan2(0, 0)``).
    """
    deg = math.degrees(math.atan2(target.y - origin.y, target.x - origin.x))
    return wrap_360(deg + FULL_TURN)


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(b.x - a.x, b.y - a.y)


def _round_half_up(value: float) -> float:
    return math.floor(value + 0.5)


def snap_angle(angle: float, interval: float) -> float:
    """Snap ``angle`` to the nearest multiple of ``interval`` degrees.

    Half-way values round up, so 45 snaps to 50 with a 10 degree interval.
    The result is not wrapped: 359 snaps to 360 with a 2 degree interval.
    If the quotient overflows, the angle is returned unchanged.

    Raises:
        ValueError: If ``interval`` is not positive
    """
    if not interval > 0:
        raise ValueError(f"Snap interval must be positive, got {interval}")
    steps = angle / interval
    if not math.isfinite(steps):
        return angle
    return _round_half_up(steps) * interval


def point_from_polar(origin: Point, angle: float, radius: float) -> Point:
    """Point at ``radius`` from ``origin`` along canvas angle ``angle`` (degrees)."""
    rad = math.radians(angle)
    return Point(origin.x + math.cos(rad) * radius, origin.y + math.sin(rad) * radius)
