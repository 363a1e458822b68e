"""
Result classes for Vastu zone calibration.

This module provides the derived layout produced from a calibrated state:
- ZoneLayout: North angle and the 16 sectors
- ZoneSector: Boundaries, cardinal flag and label anchor of one zone
- LabelAnchor: Position and readable rotation of a zone label
"""

from .zone_layout import ZoneLayout, ZoneSector, LabelAnchor

__all__ = [
    "ZoneLayout",
    "ZoneSector",
    "LabelAnchor",
]
