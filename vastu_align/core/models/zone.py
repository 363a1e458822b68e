"""
Vastu zone table.

The sixteen compass sectors are fixed: each zone is centred on
``index * 22.5`` degrees measured clockwise from North and spans
``SECTOR_HALF_WIDTH`` degrees either side of that angle.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

SECTOR_WIDTH = 22.5
SECTOR_HALF_WIDTH = SECTOR_WIDTH / 2.0

ZONE_NAMES = (
    "N", "NNE", "NE", "ENE",
    "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW",
    "W", "WNW", "NW", "NNW",
)


@dataclass(frozen=True)
class Zone:
    """
    One of the 16 Vastu compass sectors.

    Attributes:
        name: Compass abbreviation (N, NNE, ... NNW)
        angle: Nominal angle from North in degrees, clockwise
        index: Position in the fixed zone table (0 = N)
    """

    name: str
    angle: float
    index: int

    @property
    def is_cardinal(self) -> bool:
        """True for N, E, S and W (angle is a multiple of 90 degrees)."""
        return self.angle % 90 == 0

    @property
    def label(self) -> str:
        """Degree subtitle shown under the zone name, e.g. ``22.5°``."""
        return f"{self.angle:g}°"

    def __repr__(self) -> str:
        return f"Zone({self.name}, {self.angle:g}deg)"


VASTU_ZONES: Tuple[Zone, ...] = tuple(
    Zone(name=name, angle=index * SECTOR_WIDTH, index=index)
    for index, name in enumerate(ZONE_NAMES)
)

_ZONES_BY_NAME: Dict[str, Zone] = {zone.name: zone for zone in VASTU_ZONES}


def zone_by_name(name: str) -> Zone:
    """
    Look up a zone by its compass abbreviation (case-insensitive).

    Raises:
        KeyError: If the name is not one of the 16 zones
    """
    key = str(name).strip().upper()
    if key not in _ZONES_BY_NAME:
        raise KeyError(f"Unknown zone: {name}")
    return _ZONES_BY_NAME[key]
