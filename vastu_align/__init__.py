"""
Vastu Align - compass zone overlay for floor plans

Calibrates true North on a floor-plan image from two picked points and a
declared offset, then lays out the 16 Vastu zones around the plan center.

Conventions:
- Coordinates: canvas pixels, x to the right, y downwards
- Canvas angle: 0 along +x, increasing clockwise on screen (atan2(dy, dx))
- Compass angle: North = 0, clockwise positive (zone table convention)
- Angles: degrees throughout
"""

__version__ = "1.0.0"
__author__ = "Vastu Align"

from .core.models import Point, CalibrationOptions, RotationDirection
from .core.models import Zone, VASTU_ZONES
from .core.calibration import Stage, CalibrationState
from .core.results import ZoneLayout, ZoneSector, LabelAnchor

__all__ = [
    # Version
    "__version__",

    # Models
    "Point",
    "CalibrationOptions",
    "RotationDirection",
    "Zone",
    "VASTU_ZONES",

    # Calibration
    "Stage",
    "CalibrationState",

    # Results
    "ZoneLayout",
    "ZoneSector",
    "LabelAnchor",
]
