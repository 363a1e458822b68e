"""Angular snapping grid.

Once the center is placed, radial guide spokes are shown every snap
interval so the reference point can be aimed precisely. Spokes on a
multiple of 10 degrees are drawn as major spokes.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, List

import numpy as np

from ..models.options import MIN_SNAP_INTERVAL_DEGREES, coerce_snap_interval
from .angles import FULL_TURN

MAJOR_SPOKE_STEP = 10.0
MAX_SPOKES = int(round(FULL_TURN / MIN_SNAP_INTERVAL_DEGREES))

# Relative tolerance used to decide whether a spoke sits on a major step.
_MAJOR_TOL = 1e-9


@dataclass(frozen=True)
class GridSpoke:
    """A single guide spoke at ``angle`` canvas degrees."""

    angle: float
    is_major: bool


def grid_angles(interval: Any) -> np.ndarray:
    """Return spoke angles ``0, i, 2i, ...`` strictly below 360 degrees.

    Angles are generated as ``index * interval`` so that float error does
    not accumulate across the turn. Unusable intervals fall back to 2, and
    at most ``MAX_SPOKES`` spokes are produced.
    """
    step = coerce_snap_interval(interval)
    count = min(int(math.ceil(FULL_TURN / step)), MAX_SPOKES)
    angles = np.arange(count, dtype=float) * step
    return angles[angles < FULL_TURN]


def angular_grid(interval: Any) -> List[GridSpoke]:
    """Build the guide spokes for a snap interval."""
    angles = grid_angles(interval)
    remainder = np.mod(angles, MAJOR_SPOKE_STEP)
    major = np.isclose(remainder, 0.0, atol=_MAJOR_TOL * FULL_TURN) | np.isclose(
        remainder, MAJOR_SPOKE_STEP, atol=_MAJOR_TOL * FULL_TURN
    )
    return [GridSpoke(angle=float(a), is_major=bool(m)) for a, m in zip(angles, major)]
