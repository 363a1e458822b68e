"""Tests for the SVG export."""

import xml.etree.ElementTree as ET

from vastu_align.core.calibration import CalibrationState
from vastu_align.core.models import CalibrationOptions, Point
from vastu_align.core.presentation import LineCommand, Stroke, TextCommand, Viewport, build_draw_commands
from vastu_align.core.presentation.commands import Font
from vastu_align.core.reports import (
    EXPORT_BACKGROUND,
    default_export_filename,
    render_svg_report,
    save_svg_report,
)

SVG = "{http://www.w3.org/2000/svg}"


def _commands():
    state = CalibrationState(CalibrationOptions(offset_degrees=30, snap_enabled=False))
    state.load_image(400, 300)
    state.place_center(Point(400, 300))
    state.place_ref(Point(450, 250))
    return build_draw_commands(state, Viewport(800, 600))


def test_render_svg_report_is_well_formed():
    svg = render_svg_report(_commands(), Viewport(800, 600))
    root = ET.fromstring(svg)

    assert root.tag == f"{SVG}svg"
    assert root.get("width") == "800"
    assert root.get("viewBox") == "0 0 800 600"

    background = root.find(f"{SVG}rect")
    assert background.get("fill") == EXPORT_BACKGROUND

    texts = [t.text for t in root.iter(f"{SVG}text")]
    assert "Center" in texts
    assert "30° Ref" in texts
    assert "NNE" in texts

    # 180 grid spokes + 16 boundaries + 4 cardinal spokes
    assert len(list(root.iter(f"{SVG}line"))) == 200


def test_image_skipped_without_href():
    svg = render_svg_report(_commands(), Viewport(800, 600))
    assert "<image" not in svg

    svg = render_svg_report(_commands(), Viewport(800, 600), image_href="plan.png")
    root = ET.fromstring(svg)
    image = root.find(f".//{SVG}image")
    assert image.get("href") == "plan.png"
    assert image.get("opacity") == "0.8"


def test_text_is_escaped_and_rotated():
    cmd = TextCommand("<N&E>", Point(10, 20), Font(11, "bold"), rotation=45.0, dy=-2.0)
    svg = render_svg_report([cmd], Viewport(100, 100), background=None)
    root = ET.fromstring(svg)

    text = root.find(f".//{SVG}text")
    assert text.text == "<N&E>"
    assert text.get("transform") == "translate(10 20) rotate(45)"
    assert text.get("font-weight") == "bold"
    assert root.find(f"{SVG}rect") is None


def test_dashed_line():
    cmd = LineCommand(Point(0, 0), Point(10, 0), Stroke("red", 0.5, (2.0, 4.0)))
    root = ET.fromstring(render_svg_report([cmd], Viewport(100, 100)))
    line = root.find(f".//{SVG}line")
    assert line.get("stroke-dasharray") == "2 4"
    assert line.get("stroke-width") == "0.5"


def test_save_svg_report(tmp_path):
    path = save_svg_report(tmp_path / "overlay.svg", _commands(), Viewport(800, 600))
    assert path.exists()
    ET.parse(str(path))


def test_default_export_filename():
    assert default_export_filename(1700000000.5) == "VastuAlign_1700000000500.svg"
    assert default_export_filename().startswith("VastuAlign_")
