"""Session controller.

Wires front-end events (image loads, pointer clicks, settings changes) to
the calibration engine. Every entry point performs its state transition
and returns a complete, freshly built list of draw commands; there is no
incremental redraw.

This module has no UI toolkit imports so it can be unit-tested and driven
by any front end.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Optional, Union

from ..core.calibration import CalibrationState, Stage
from ..core.models.point import Point
from ..core.presentation import DrawCommand, Viewport, build_draw_commands
from ..core.reports import default_export_filename, render_svg_report, save_svg_report
from ..core.results import ZoneLayout
from .settings import AppSettings

logger = logging.getLogger(__name__)


class VastuSession:
    """One floor plan being calibrated on one canvas."""

    def __init__(
        self,
        settings: Optional[AppSettings] = None,
        canvas_width: float = 800,
        canvas_height: float = 600,
    ):
        self.settings = settings if settings is not None else AppSettings()
        self.state = CalibrationState(self.settings.calibration_options())
        self.viewport = self._make_viewport(canvas_width, canvas_height)

    def _make_viewport(self, width: float, height: float) -> Viewport:
        return Viewport(
            width=width,
            height=height,
            fit_margin=self.settings.get("image_fit_margin"),
            label_radius_fraction=self.settings.get("label_radius_fraction"),
            spoke_radius_factor=self.settings.get("spoke_radius_factor"),
        )

    # ------------------------------------------------------------------
    # Status
    # ------------------------------------------------------------------

    @property
    def stage(self) -> Stage:
        return self.state.stage

    @property
    def step(self) -> int:
        return self.state.stage.step

    @property
    def hint(self) -> str:
        return self.state.hint

    @property
    def image_failed(self) -> bool:
        return self.state.image_failed

    def layout(self) -> Optional[ZoneLayout]:
        """Zone layout at the viewport's label radius, or None."""
        return self.state.zone_layout(self.viewport.label_radius)

    def draw(self) -> List[DrawCommand]:
        """Full redraw of the current state."""
        return build_draw_commands(self.state, self.viewport, self.settings.get("image_alpha"))

    # ------------------------------------------------------------------
    # Image events
    # ------------------------------------------------------------------

    def open_image(self) -> int:
        """A new file was chosen; returns the token its callbacks must carry."""
        return self.state.begin_image_load()

    def image_loaded(self, token: int, width: int, height: int) -> List[DrawCommand]:
        if not self.state.complete_image_load(token, width, height):
            logger.warning("Discarded completion of superseded image load %d", token)
        return self.draw()

    def image_failed_to_load(self, token: int) -> List[DrawCommand]:
        if not self.state.fail_image_load(token):
            logger.warning("Discarded failure of superseded image load %d", token)
        return self.draw()

    # ------------------------------------------------------------------
    # Pointer and canvas events
    # ------------------------------------------------------------------

    def pointer_down(self, x: float, y: float) -> List[DrawCommand]:
        """Click at canvas coordinates ``(x, y)``."""
        self.state.handle_click(Point(x, y))
        return self.draw()

    def reset(self) -> List[DrawCommand]:
        self.state.reset()
        return self.draw()

    def resize(self, width: float, height: float) -> List[DrawCommand]:
        self.viewport = self._make_viewport(width, height)
        return self.draw()

    # ------------------------------------------------------------------
    # Settings events
    # ------------------------------------------------------------------

    def set_offset(self, value: Any) -> List[DrawCommand]:
        self.state.set_offset_degrees(self.settings.set("offset_degrees", value))
        return self.draw()

    def set_snap_interval(self, value: Any) -> List[DrawCommand]:
        self.state.set_snap_interval(self.settings.set("snap_interval_degrees", value))
        return self.draw()

    def set_rotation_direction(self, value: Any) -> List[DrawCommand]:
        self.state.set_rotation_direction(self.settings.set("rotation_direction", value))
        return self.draw()

    def set_snap_enabled(self, value: Any) -> List[DrawCommand]:
        self.state.set_snap_enabled(self.settings.set("snap_enabled", value))
        return self.draw()

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def export_svg(
        self,
        path: Union[str, Path, None] = None,
        image_href: Optional[str] = None,
    ) -> Union[str, Path]:
        """Export the overlay as SVG.

        Returns the SVG text when ``path`` is None. When ``path`` is a
        directory, the file is named with :func:`default_export_filename`.
        """
        commands = self.draw()
        if path is None:
            return render_svg_report(commands, self.viewport, image_href)
        target = Path(path)
        if target.is_dir():
            target = target / default_export_filename()
        written = save_svg_report(target, commands, self.viewport, image_href)
        logger.info("Exported overlay to %s", written)
        return written
