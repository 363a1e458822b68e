"""Tests for the VastuSession controller."""

import xml.etree.ElementTree as ET

import pytest

from vastu_align.core.calibration import Stage
from vastu_align.core.models import Point
from vastu_align.core.presentation import ImageCommand, TextCommand
from vastu_align.integration import AppSettings, VastuSession


def _loaded_session(**settings) -> VastuSession:
    session = VastuSession(AppSettings(settings), canvas_width=800, canvas_height=600)
    token = session.open_image()
    session.image_loaded(token, 400, 300)
    return session


class TestWorkflow:
    """End-to-end click workflow."""

    def test_initial_hint(self):
        session = VastuSession()
        assert session.stage is Stage.NO_IMAGE
        assert session.step == 1
        assert session.hint == "Please upload a floor plan image to begin."
        assert session.draw() == []

    def test_clicks_before_image_are_ignored(self):
        session = VastuSession()
        assert session.pointer_down(10, 10) == []
        assert session.state.center_point is None

    def test_two_clicks_calibrate(self):
        session = _loaded_session(snap_enabled=False)
        assert session.hint == "Click on the center of your floor plan (Brahmasthan)."

        session.pointer_down(200, 200)
        assert session.step == 2
        assert session.hint.startswith("Click on a point to set as 0° clockwise from North.")

        commands = session.pointer_down(300, 200)
        assert session.stage is Stage.CALIBRATED
        assert session.step == 3
        assert isinstance(commands[0], ImageCommand)

        layout = session.layout()
        assert layout.north_angle == 0.0
        assert layout.sector("E").sector_mid == 90.0
        assert layout.label_radius == pytest.approx(264.0)

    def test_third_click_ignored(self):
        session = _loaded_session(snap_enabled=False)
        session.pointer_down(200, 200)
        session.pointer_down(300, 200)
        session.pointer_down(50, 50)
        assert session.state.ref_point == Point(300, 200)

    def test_reset(self):
        session = _loaded_session()
        session.pointer_down(200, 200)
        commands = session.reset()
        assert session.stage is Stage.IMAGE_LOADED
        assert len(commands) == 1


class TestSettingsEvents:
    """Configuration changes redraw but never change stage."""

    def test_offset_change_moves_north(self):
        session = _loaded_session(snap_enabled=False)
        session.pointer_down(0, 0)
        session.pointer_down(100, 0)

        session.set_offset("90")
        assert session.stage is Stage.CALIBRATED
        assert session.layout().north_angle == 270.0

        session.set_rotation_direction("acw")
        assert session.layout().north_angle == 90.0

    def test_invalid_offset_falls_back_to_zero(self):
        session = _loaded_session(snap_enabled=False)
        session.pointer_down(0, 0)
        session.pointer_down(100, 0)
        commands = session.set_offset("ninety")
        assert session.settings.get("offset_degrees") == 0.0
        assert any(isinstance(c, TextCommand) and c.text == "0° Ref" for c in commands)

    def test_snap_settings_apply_to_next_reference(self):
        session = _loaded_session()
        session.set_snap_interval("10")
        session.set_snap_enabled("true")
        session.pointer_down(0, 0)
        session.pointer_down(10, 10)
        ref = session.state.ref_point
        assert ref.x == pytest.approx(14.142135623730951 * 0.6427876096865394)
        assert ref.y == pytest.approx(14.142135623730951 * 0.766044443118978)

    def test_invalid_snap_interval(self):
        session = _loaded_session()
        session.set_snap_interval("0")
        assert session.state.options.snap_interval_degrees == 2.0

    def test_resize_changes_radii(self):
        session = _loaded_session(snap_enabled=False)
        session.pointer_down(0, 0)
        session.pointer_down(100, 0)
        session.resize(1000, 500)
        assert session.viewport.spoke_radius == pytest.approx(2000.0)
        assert session.layout().label_radius == pytest.approx(220.0)


class TestImageLoading:
    """Image load callbacks, including superseded loads."""

    def test_stale_load_is_discarded(self):
        session = VastuSession()
        old = session.open_image()
        new = session.open_image()

        assert session.image_loaded(old, 100, 100) == []
        assert session.stage is Stage.NO_IMAGE

        session.image_loaded(new, 400, 300)
        assert session.stage is Stage.IMAGE_LOADED

    def test_failed_load(self):
        session = VastuSession()
        token = session.open_image()
        assert session.image_failed_to_load(token) == []
        assert session.image_failed
        assert session.hint == "Please upload a floor plan image to begin."

    def test_opening_new_image_clears_points(self):
        session = _loaded_session()
        session.pointer_down(100, 100)
        token = session.open_image()
        assert session.state.center_point is None
        session.image_loaded(token, 800, 800)
        assert session.state.image_size == (800, 800)


class TestExport:
    """SVG export from the session."""

    def test_export_returns_svg_text(self):
        session = _loaded_session(snap_enabled=False)
        session.pointer_down(200, 200)
        session.pointer_down(300, 200)
        root = ET.fromstring(session.export_svg(image_href="data:image/png;base64,AAAA"))
        assert root.tag.endswith("svg")

    def test_export_to_directory(self, tmp_path):
        session = _loaded_session()
        written = session.export_svg(tmp_path)
        assert written.parent == tmp_path
        assert written.name.startswith("VastuAlign_")
        assert written.suffix == ".svg"

    def test_export_to_file(self, tmp_path):
        session = _loaded_session()
        target = tmp_path / "plan.svg"
        assert session.export_svg(target) == target
        assert target.read_text(encoding="utf-8").startswith("<?xml")
