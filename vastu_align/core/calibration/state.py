"""vastu_align.core.calibration.state

Calibration state machine.

Tracks the plan center, the reference point, the calibration options and
whether a usable image is present. Input that arrives out of sequence is
ignored rather than reported: the first click sets the center, the second
sets the reference, further clicks do nothing until a reset.

Image loading is asynchronous on the caller's side. Each load attempt is
given a generation token by :meth:`CalibrationState.begin_image_load`;
completion or failure callbacks carrying an older token are discarded so
a superseded load cannot resurrect stale state.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Optional, Tuple

from ..geometry.angles import angle_of, distance, point_from_polar, snap_angle
from ..models.options import (
    CalibrationOptions,
    coerce_offset_degrees,
    coerce_rotation_direction,
    coerce_snap_enabled,
    coerce_snap_interval,
)
from ..models.point import Point
from ..results.zone_layout import ZoneLayout
from ..solver.zone_layout import compute_zone_layout
from .stage import Stage, derive_stage, stage_hint

logger = logging.getLogger(__name__)


def _as_point(value: Any) -> Point:
    if isinstance(value, Point):
        return value
    x, y = value
    return Point(x, y)


class CalibrationState:
    """
    Mutable calibration session.

    Attributes:
        options: Current calibration options
        center_point: Plan center, None until placed
        ref_point: Reference point, None until placed (never set without a center)
        image_size: ``(width, height)`` of the loaded image, None if no image
        image_failed: True if the most recent image load failed
        generation: Token of the most recent image load attempt
    """

    def __init__(self, options: Optional[CalibrationOptions] = None):
        # Own copy; callers may reuse their options object
        self.options = replace(options) if options is not None else CalibrationOptions()
        self.center_point: Optional[Point] = None
        self.ref_point: Optional[Point] = None
        self.image_size: Optional[Tuple[int, int]] = None
        self.image_failed = False
        self.generation = 0
        self._layout_cache: Optional[Tuple[Tuple[Any, ...], ZoneLayout]] = None

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------

    @property
    def image_loaded(self) -> bool:
        return self.image_size is not None

    @property
    def stage(self) -> Stage:
        return derive_stage(
            self.image_loaded,
            self.center_point is not None,
            self.ref_point is not None,
        )

    @property
    def is_calibrated(self) -> bool:
        return self.stage is Stage.CALIBRATED

    @property
    def hint(self) -> str:
        return stage_hint(self.stage, self.options)

    # ------------------------------------------------------------------
    # Image lifecycle
    # ------------------------------------------------------------------

    def begin_image_load(self) -> int:
        """Start a new image load and return its generation token.

        Points are cleared straight away; the previous image stays usable
        until the new one completes or fails.
        """
        self.generation += 1
        self.reset_points()
        logger.debug("Image load %d started", self.generation)
        return self.generation

    def complete_image_load(self, token: int, width: int, height: int) -> bool:
        """Mark the image of load ``token`` as usable.

        Returns:
            False if ``token`` belongs to a superseded load (ignored)
        """
        if token != self.generation:
            logger.debug("Ignoring stale image load %d (current %d)", token, self.generation)
            return False
        if width <= 0 or height <= 0:
            # An empty image cannot be fitted or clicked on
            return self.fail_image_load(token)
        self.image_size = (int(width), int(height))
        self.image_failed = False
        self.reset_points()
        logger.info("Image loaded: %dx%d", self.image_size[0], self.image_size[1])
        return True

    def fail_image_load(self, token: int) -> bool:
        """Mark the image of load ``token`` as unusable.

        Returns:
            False if ``token`` belongs to a superseded load (ignored)
        """
        if token != self.generation:
            logger.debug("Ignoring stale image failure %d (current %d)", token, self.generation)
            return False
        self.image_size = None
        self.image_failed = True
        self.reset_points()
        logger.warning("Image load %d failed", token)
        return True

    def load_image(self, width: int, height: int) -> None:
        """Synchronously load an image of the given size."""
        self.complete_image_load(self.begin_image_load(), width, height)

    # ------------------------------------------------------------------
    # Point placement
    # ------------------------------------------------------------------

    def place_center(self, point: Any) -> bool:
        """Set the plan center. Only accepted while waiting for a center."""
        if self.stage is not Stage.IMAGE_LOADED:
            logger.debug("Center ignored in stage %s", self.stage.value)
            return False
        self.center_point = _as_point(point)
        self._invalidate()
        logger.info("Center placed at %r", self.center_point)
        return True

    def place_ref(self, point: Any) -> bool:
        """Set the reference point, snapping its angle if enabled.

        Only accepted once the center is set and no reference exists.
        """
        if self.stage is not Stage.CENTER_SET:
            logger.debug("Reference ignored in stage %s", self.stage.value)
            return False
        raw = _as_point(point)
        if self.options.snap_enabled:
            dist = distance(self.center_point, raw)
            snapped = snap_angle(angle_of(self.center_point, raw), self.options.snap_interval_degrees)
            self.ref_point = point_from_polar(self.center_point, snapped, dist)
        else:
            self.ref_point = raw
        self._invalidate()
        logger.info("Reference placed at %r", self.ref_point)
        return True

    def handle_click(self, point: Any) -> bool:
        """Route a click: center first, then reference, then ignore."""
        stage = self.stage
        if stage is Stage.IMAGE_LOADED:
            return self.place_center(point)
        if stage is Stage.CENTER_SET:
            return self.place_ref(point)
        logger.debug("Click ignored in stage %s", stage.value)
        return False

    def reset_points(self) -> None:
        """Clear both points; options are kept."""
        self.center_point = None
        self.ref_point = None
        self._invalidate()

    def reset(self) -> None:
        self.reset_points()

    # ------------------------------------------------------------------
    # Options
    # ------------------------------------------------------------------

    def set_offset_degrees(self, value: Any) -> None:
        self.options.offset_degrees = coerce_offset_degrees(value)
        self._invalidate()

    def set_rotation_direction(self, value: Any) -> None:
        self.options.rotation_direction = coerce_rotation_direction(value)
        self._invalidate()

    def set_snap_interval(self, value: Any) -> None:
        self.options.snap_interval_degrees = coerce_snap_interval(value)
        self._invalidate()

    def set_snap_enabled(self, value: Any) -> None:
        self.options.snap_enabled = coerce_snap_enabled(value)
        self._invalidate()

    def apply_options(self, options: CalibrationOptions) -> None:
        """Replace all options at once."""
        self.options = replace(options)
        self._invalidate()

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    def _invalidate(self) -> None:
        self._layout_cache = None

    def _layout_key(self, label_radius: float) -> Tuple[Any, ...]:
        # Every input of the layout; options may also be mutated directly
        return (
            label_radius,
            self.options.offset_degrees,
            self.options.rotation_direction,
            self.center_point,
            self.ref_point,
        )

    def zone_layout(self, label_radius: float = 0.0) -> Optional[ZoneLayout]:
        """Zone layout for the current calibration, or None if not calibrated."""
        if not self.is_calibrated:
            return None
        key = self._layout_key(label_radius)
        if self._layout_cache is not None and self._layout_cache[0] == key:
            return self._layout_cache[1]
        layout = compute_zone_layout(self.center_point, self.ref_point, self.options, label_radius)
        self._layout_cache = (key, layout)
        return layout

    def north_angle(self) -> Optional[float]:
        """Canvas angle of North, or None if not calibrated."""
        layout = self.zone_layout()
        return layout.north_angle if layout is not None else None

    def __repr__(self) -> str:
        return (
            f"CalibrationState(stage={self.stage.value}, "
            f"center={self.center_point!r}, ref={self.ref_point!r}, {self.options!r})"
        )
