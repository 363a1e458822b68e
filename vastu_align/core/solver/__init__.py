"""vastu_align.core.solver

North derivation and zone sector geometry.
"""

from .zone_layout import (
    ZONE_ANGLES,
    compute_zone_layout,
    label_rotation,
    north_angle_on_canvas,
)

__all__ = [
    "ZONE_ANGLES",
    "compute_zone_layout",
    "label_rotation",
    "north_angle_on_canvas",
]
