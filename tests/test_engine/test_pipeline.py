"""End-to-end tests for define_layout_from_svg."""

from __future__ import annotations

import pytest

from tests.conftest import A4_LAYOUT_SVG, EMPTY_SVG, MM, anchor, layer, make_svg, rect

import svglayout.engine.pipeline as pipeline
from svglayout.engine.config import LayoutConfig
from svglayout.engine.pipeline import define_layout_from_svg
from svglayout.errors import MalformedCoordinate, StructuralParseError


def test_a4_layout():
    layout = define_layout_from_svg(A4_LAYOUT_SVG)

    assert layout.id == "a4-portrait"
    assert layout.dim.w == pytest.approx(210 * MM)
    assert layout.dim.h == pytest.approx(297 * MM)

    # reference at (0,0) inside translate(10,20)
    assert layout.anchor.x == pytest.approx(10 * MM)
    assert layout.anchor.y == pytest.approx(20 * MM)

    ytop = 297 * MM - 20 * MM
    header = layout.anchors["header"]
    assert header.x == pytest.approx(16 * MM)
    assert header.y == pytest.approx(ytop - 27 * MM)
    ladder = layout.anchors["ladder"]
    assert ladder.x == pytest.approx(40 * MM)
    assert ladder.y == pytest.approx(ytop - 60 * MM)

    assert set(layout.anchors) == {"header", "ladder"}
    assert layout.filenames == {"header": "header.pdf"}

    assert set(layout.page_dim_static) == {"cover"}
    assert layout.page_dim_static["cover"].w == pytest.approx(210 * MM)
    side = layout.page_dim_dynamic["side"]
    assert side.width_is_dynamic and not side.height_is_dynamic
    assert side.dim.w == pytest.approx(3 * MM)

    assert set(layout.previous_image_static) == {"thumb"}
    mark = layout.previous_image_dynamic["mark"]
    assert not mark.width_is_dynamic and mark.height_is_dynamic
    assert mark.dim.h == pytest.approx(4 * MM)


def test_missing_layers_give_empty_maps():
    layout = define_layout_from_svg(EMPTY_SVG)
    assert layout.id == ""
    assert (layout.anchor.x, layout.anchor.y) == (0.0, 0.0)
    assert layout.anchors == {}
    assert layout.filenames == {}
    assert layout.page_dim_static == {}
    assert layout.page_dim_dynamic == {}
    assert layout.previous_image_static == {}
    assert layout.previous_image_dynamic == {}


def test_mm_point_below_top():
    svg = make_svg(layer("anchors", anchor("p", 0, 50)), units="mm", width="300pt", height="300pt")
    layout = define_layout_from_svg(svg)
    assert layout.anchors["p"].x == 0
    assert layout.anchors["p"].y == pytest.approx(300 - MM * 50)


def test_bytes_input():
    layout = define_layout_from_svg(A4_LAYOUT_SVG.encode("utf-8"))
    assert layout.id == "a4-portrait"


def test_normalization_runs_once(monkeypatch):
    calls = []
    original = pipeline.apply_document_units_scale

    def counting(units, layout, config):
        calls.append(units)
        original(units, layout, config)

    monkeypatch.setattr(pipeline, "apply_document_units_scale", counting)
    layout = define_layout_from_svg(A4_LAYOUT_SVG)
    assert calls == ["mm"]
    assert layout.page_dim_static["cover"].w == pytest.approx(210 * MM)


def test_untitled_anchor_does_not_abort():
    svg = make_svg(layer("anchors", anchor(None, 1, 1), anchor("b", 2, 2, desc="b.pdf")))
    layout = define_layout_from_svg(svg)
    assert list(layout.anchors) == ["b"]
    assert list(layout.filenames) == ["b"]


def test_malformed_rect_aborts():
    svg = make_svg(
        layer("anchors", anchor("a", 1, 1)),
        layer("pages", rect("page-a", "oops", 10)),
    )
    with pytest.raises(MalformedCoordinate):
        define_layout_from_svg(svg)


def test_malformed_anchor_aborts():
    with pytest.raises(MalformedCoordinate):
        define_layout_from_svg(make_svg(layer("anchors", anchor("a", "1,5", 1))))


def test_invalid_markup():
    with pytest.raises(StructuralParseError):
        define_layout_from_svg("<not-svg")


def test_threshold_passed_through():
    svg = make_svg(layer("pages", rect("page-dynamic-a", 8, 20)))
    assert not define_layout_from_svg(svg).page_dim_dynamic["a"].width_is_dynamic
    layout = define_layout_from_svg(svg, LayoutConfig(dynamic_dim_threshold=10))
    assert layout.page_dim_dynamic["a"].width_is_dynamic


def test_anchor_without_coordinates_or_path_data():
    svg = make_svg(layer("anchors", "<path><title>x</title></path>"))
    with pytest.raises(MalformedCoordinate):
        define_layout_from_svg(svg)


def test_untitled_anchor_without_coordinates():
    with pytest.raises(MalformedCoordinate):
        define_layout_from_svg(make_svg(layer("anchors", "<path/>")))
