"""Tests for the icon renderer (fetch → fit → recolor → SVG)."""

import base64
import xml.etree.ElementTree as ET

import pytest

from inline_icons.errors import FetchFailure, MissingViewbox, UnknownCollection
from inline_icons.render.colors import StyleRef
from inline_icons.render.geometry import GlyphMetrics
from tests.conftest import CLIPPED_SVG, NESTED_SVG, NO_VIEWBOX_SVG, make_response

NS = "{http://www.w3.org/2000/svg}"


def _paths(icon):
    return ET.fromstring(icon.svg).findall(f"{NS}path")


def test_render_square_footprint(renderer):
    icon = renderer.render("test", "home")
    assert (icon.width, icon.height) == (20, 20)
    assert icon.viewbox.as_tuple() == (0, 0, 24, 24)
    assert icon.ascent == "center"
    root = ET.fromstring(icon.svg)
    assert root.get("width") == "20"
    assert root.get("height") == "20"
    assert root.get("viewBox") == "0 0 24 24"


def test_render_wide_footprint_adjusts_viewbox(renderer):
    icon = renderer.render("test", "home", metrics=GlyphMetrics(10, 10))
    assert (icon.width, icon.height) == (20, 10)
    assert icon.viewbox.as_tuple() == (0, -6, 24, 36)


def test_zoom_scales_pixels_not_viewbox(renderer):
    icon = renderer.render("test", "home", zoom=3.9)
    assert (icon.width, icon.height) == (60, 60)
    assert icon.viewbox.as_tuple() == (0, 0, 24, 24)


@pytest.mark.parametrize("zoom", [None, 0, 0.5])
def test_small_zoom_is_one(renderer, zoom):
    icon = renderer.render("test", "home", zoom=zoom)
    assert (icon.width, icon.height) == (20, 20)


def test_default_colors(renderer):
    icon = renderer.render("test", "home")
    root = ET.fromstring(icon.svg)
    assert root.find(f"{NS}rect").get("fill") == "none"
    assert [p.get("fill") for p in _paths(icon)] == ["#333333", "#ff0000"]


def test_explicit_fill_wins_over_foreground(renderer):
    icon = renderer.render("test", "home", fg="blue", bg="yellow")
    assert icon.foreground == "#0000ff"
    assert icon.background == "#ffff00"
    assert [p.get("fill") for p in _paths(icon)] == ["#0000ff", "#ff0000"]


def test_style_colors(renderer):
    icon = renderer.render("test", "home", fg=StyleRef("warning"), bg=StyleRef("warning"))
    assert icon.foreground == "#ffa500"
    assert icon.background == "#222222"


def test_unknown_color_passes_through(renderer):
    icon = renderer.render("test", "home", fg="blurple")
    assert _paths(icon)[0].get("fill") == "blurple"


def test_background_rect_spans_adjusted_viewbox(renderer):
    icon = renderer.render("test", "home", bg="black", metrics=GlyphMetrics(10, 10))
    rect = ET.fromstring(icon.svg).find(f"{NS}rect")
    assert (rect.get("y"), rect.get("height")) == ("-6", "36")
    assert rect.get("fill") == "#000000"


def test_path_order_preserved(renderer, session):
    session.get.return_value = make_response(NESTED_SVG)
    icon = renderer.render("test", "nested")
    assert [p.get("d") for p in _paths(icon)] == ["M2 2h12v12H2z", "M4 4h8v8H4z"]
    assert [p.get("fill") for p in _paths(icon)] == ["#333333", "white"]


def test_render_uses_cache(renderer, session):
    renderer.render("test", "home")
    renderer.render("test", "home", fg="red", zoom=2)
    assert session.get.call_count == 1


def test_force_reload(renderer, session):
    renderer.render("test", "home")
    renderer.render("test", "home", force_reload=True)
    assert session.get.call_count == 2


def test_missing_viewbox(renderer, session):
    session.get.return_value = make_response(NO_VIEWBOX_SVG)
    with pytest.raises(MissingViewbox):
        renderer.render("test", "home")


def test_unknown_collection(renderer, session):
    with pytest.raises(UnknownCollection):
        renderer.render("nope", "home")
    session.get.assert_not_called()


def test_fetch_failure_propagates(renderer, session):
    import requests

    session.get.side_effect = requests.ConnectionError("down")
    with pytest.raises(FetchFailure):
        renderer.render("test", "home")


def test_data_url(renderer):
    icon = renderer.render("test", "home")
    prefix = "data:image/svg+xml;base64,"
    assert icon.data_url().startswith(prefix)
    assert base64.b64decode(icon.data_url()[len(prefix):]).decode("utf-8") == icon.svg


def test_clip_path_not_painted(renderer, session):
    session.get.return_value = make_response(CLIPPED_SVG)
    icon = renderer.render("test", "clipped", fg="blue")
    drawn = [p.get("d") for p in _paths(icon)]
    assert "M0 0h16v16H0z" not in drawn
    assert len(drawn) == 2
