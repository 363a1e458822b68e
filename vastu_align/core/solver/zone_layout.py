"""vastu_align.core.solver.zone_layout

North derivation and sector geometry for the 16 Vastu zones.

The reference point sits ``offset`` degrees from North, measured in the
declared rotation direction. Inverting that relation gives the canvas
angle of North, and every zone is then laid out at its fixed angle from
there:

  - clockwise:      north = click - offset
  - anticlockwise:  north = click + offset

all taken modulo 360 in the canvas convention of ``angle_of``.

This module contains no rendering code; label radius is a parameter
supplied by the caller.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from ..geometry.angles import FULL_TURN, angle_of, point_from_polar, wrap_360
from ..models.options import CalibrationOptions, RotationDirection
from ..models.point import Point
from ..models.zone import SECTOR_HALF_WIDTH, VASTU_ZONES
from ..results.zone_layout import LabelAnchor, ZoneLayout, ZoneSector

logger = logging.getLogger(__name__)

ZONE_ANGLES = np.array([zone.angle for zone in VASTU_ZONES], dtype=float)


def north_angle_on_canvas(
    click_angle: float,
    offset_degrees: float,
    rotation_direction: RotationDirection,
) -> float:
    """Canvas angle of true North, in [0, 360).

    Args:
        click_angle: Canvas angle from center to reference point
        offset_degrees: Declared angle of the reference from North
        rotation_direction: Direction the offset is measured in
    """
    if rotation_direction is RotationDirection.CLOCKWISE:
        return wrap_360(click_angle - offset_degrees + FULL_TURN)
    return wrap_360(click_angle + offset_degrees + FULL_TURN)


def label_rotation(sector_mid: float) -> float:
    """Text rotation for a label on the ``sector_mid`` spoke.

    Labels run tangentially (mid + 90); on the left half of the circle they
    are turned a further 180 degrees so the text is never upside down.
    """
    rotation = sector_mid + 90.0
    if 90.0 < sector_mid < 270.0:
        rotation -= 180.0
    return wrap_360(rotation)


def _wrap_array(angles: np.ndarray) -> np.ndarray:
    wrapped = np.mod(angles, FULL_TURN)
    wrapped[wrapped >= FULL_TURN] -= FULL_TURN
    return wrapped


def compute_zone_layout(
    center: Point,
    reference: Point,
    options: Optional[CalibrationOptions] = None,
    label_radius: float = 0.0,
) -> ZoneLayout:
    """
    Derive North and the 16 sectors from a calibrated pair of points.

    Args:
        center: Plan center (Brahmasthan)
        reference: Reference point at the declared offset from North
        options: Offset and rotation direction (defaults if None)
        label_radius: Distance of label anchors from the center

    Returns:
        ZoneLayout with sectors in zone table order (N first)
    """
    if options is None:
        options = CalibrationOptions()

    click = angle_of(center, reference)
    north = north_angle_on_canvas(click, options.offset_degrees, options.rotation_direction)

    mids = _wrap_array(north + ZONE_ANGLES + FULL_TURN)
    starts = _wrap_array(north + ZONE_ANGLES - SECTOR_HALF_WIDTH + FULL_TURN)

    sectors = []
    for zone, start, mid in zip(VASTU_ZONES, starts, mids):
        mid = float(mid)
        anchor = LabelAnchor(
            position=point_from_polar(center, mid, label_radius),
            rotation=label_rotation(mid),
        )
        sectors.append(
            ZoneSector(
                zone=zone,
                sector_start=float(start),
                sector_mid=mid,
                is_cardinal=zone.is_cardinal,
                label_anchor=anchor,
            )
        )

    logger.debug(
        "Zone layout: click=%.4f north=%.4f (offset %g %s)",
        click, north, options.offset_degrees, options.rotation_direction.value,
    )

    return ZoneLayout(
        center=center,
        reference=reference,
        click_angle=click,
        north_angle=north,
        offset_degrees=options.offset_degrees,
        rotation_direction=options.rotation_direction,
        label_radius=label_radius,
        sectors=tuple(sectors),
    )
