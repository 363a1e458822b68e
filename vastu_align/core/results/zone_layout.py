"""
Zone layout result classes.

This module defines the output data structures of the North derivation:
the canvas angle of true North and, for each of the 16 Vastu zones, its
sector boundaries and label anchor. A ZoneLayout is derived on demand and
never persisted.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from ..geometry.angles import angle_of, angular_difference, wrap_360
from ..models.options import RotationDirection
from ..models.point import Point
from ..models.zone import SECTOR_HALF_WIDTH, Zone


@dataclass(frozen=True)
class LabelAnchor:
    """
    Placement of a zone label.

    Attributes:
        position: Canvas point the label is centred on
        rotation: Text rotation in canvas degrees, in [0, 360)
    """

    position: Point
    rotation: float

    def to_dict(self) -> Dict[str, Any]:
        """Serialize label anchor to dictionary."""
        return {"position": self.position.to_dict(), "rotation_deg": self.rotation}


@dataclass(frozen=True)
class ZoneSector:
    """
    Geometry of one Vastu zone on the canvas.

    Attributes:
        zone: The zone from the fixed table
        sector_start: Canvas angle of the sector's leading boundary (mid - 11.25)
        sector_mid: Canvas angle of the zone direction
        is_cardinal: True for N, E, S, W (drawn with a heavier spoke)
        label_anchor: Where and how the zone name is drawn
    """

    zone: Zone
    sector_start: float
    sector_mid: float
    is_cardinal: bool
    label_anchor: LabelAnchor

    @property
    def sector_end(self) -> float:
        """Canvas angle of the trailing boundary (mid + 11.25), in [0, 360)."""
        return wrap_360(self.sector_mid + SECTOR_HALF_WIDTH)

    def contains(self, angle: float) -> bool:
        """True if the canvas angle lies in [start, end) of this sector."""
        offset = wrap_360(angle - self.sector_start)
        return offset < 2 * SECTOR_HALF_WIDTH

    def to_dict(self) -> Dict[str, Any]:
        """Serialize sector to dictionary."""
        return {
            "zone": self.zone.name,
            "zone_angle_deg": self.zone.angle,
            "sector_start_deg": self.sector_start,
            "sector_mid_deg": self.sector_mid,
            "sector_end_deg": self.sector_end,
            "is_cardinal": self.is_cardinal,
            "label_anchor": self.label_anchor.to_dict(),
        }


@dataclass(frozen=True)
class ZoneLayout:
    """
    Complete zone geometry for a calibrated plan.

    Attributes:
        center: Plan center (Brahmasthan)
        reference: Reference point used to fix the offset direction
        click_angle: Canvas angle from center to reference
        north_angle: Canvas angle representing true North
        offset_degrees: Declared offset the layout was derived with
        rotation_direction: Direction the offset was measured in
        label_radius: Distance of label anchors from the center
        sectors: The 16 sectors in zone table order (N first, clockwise)
    """

    center: Point
    reference: Point
    click_angle: float
    north_angle: float
    offset_degrees: float
    rotation_direction: RotationDirection
    label_radius: float = 0.0
    sectors: Tuple[ZoneSector, ...] = ()

    def sector(self, name: str) -> ZoneSector:
        """
        Return the sector for a zone name.

        Raises:
            KeyError: If no sector has that name
        """
        key = name.strip().upper()
        for s in self.sectors:
            if s.zone.name == key:
                return s
        raise KeyError(f"Unknown zone: {name}")

    def sector_containing(self, angle: float) -> ZoneSector:
        """Return the sector whose span contains the canvas angle."""
        for s in self.sectors:
            if s.contains(angle):
                return s
        # Rounding at a boundary can leave an angle just outside every
        # half-open span; take the nearest mid instead.
        return min(self.sectors, key=lambda s: abs(angular_difference(angle, s.sector_mid)))

    def zone_at(self, point: Point) -> Optional[ZoneSector]:
        """Return the sector in which ``point`` lies, or None at the center."""
        if point == self.center:
            return None
        return self.sector_containing(angle_of(self.center, point))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize layout to a JSON-compatible dictionary."""
        return {
            "center": self.center.to_dict(),
            "reference": self.reference.to_dict(),
            "click_angle_deg": self.click_angle,
            "north_angle_deg": self.north_angle,
            "offset_deg": self.offset_degrees,
            "rotation_direction": self.rotation_direction.value,
            "label_radius": self.label_radius,
            "sectors": [s.to_dict() for s in self.sectors],
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize layout to a JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    def __repr__(self) -> str:
        return (
            f"ZoneLayout(north={self.north_angle:.3f}deg, "
            f"offset={self.offset_degrees:g}deg {self.rotation_direction.value}, "
            f"sectors={len(self.sectors)})"
        )
