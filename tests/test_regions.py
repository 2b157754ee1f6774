"""Tests for region rectangle geometry."""

from __future__ import annotations

import pytest

from fold_overlay.layout.regions import (
    drawable_width,
    first_non_ws_index,
    resolve_region_geometry,
    resolve_syntax_mode,
)
from fold_overlay.layout.text import MonospaceLayoutService
from fold_overlay.model import PLAIN_MODE, SyntaxMode, TextDocument, ViewportState

SOURCE = (
    "class A:\n"            # 1
    "    x = 1\n"           # 2
    "    def f(self):\n"    # 3
    "        y = 2\n"       # 4
    "        return y\n"    # 5
    "  # trailing\n"        # 6
    "z = 3"                 # 7
)


def _viewport(**overrides) -> ViewportState:
    values = dict(width=800, height=600, line_height=16.0, v_upper=7 * 16.0)
    values.update(overrides)
    return ViewportState(**values)


@pytest.fixture
def doc() -> TextDocument:
    return TextDocument(SOURCE)


@pytest.fixture
def layouts(doc) -> MonospaceLayoutService:
    return MonospaceLayoutService(doc, char_width=8.0)


# ---------------------------------------------------------------------------
# first_non_ws_index
# ---------------------------------------------------------------------------


class TestFirstNonWsIndex:
    def test_empty(self):
        assert first_non_ws_index("") == 0

    def test_all_whitespace(self):
        assert first_non_ws_index(" \t  ") == 0

    def test_leading_spaces(self):
        assert first_non_ws_index("  abc") == 2

    def test_no_indent(self):
        assert first_non_ws_index("abc") == 0

    def test_tab(self):
        assert first_non_ws_index("\tx") == 1


# ---------------------------------------------------------------------------
# resolve_syntax_mode
# ---------------------------------------------------------------------------


def test_syntax_mode_used_when_enabled():
    mode = SyntaxMode("python")
    doc = TextDocument("x", syntax_mode=mode)
    assert resolve_syntax_mode(doc) is mode


def test_plain_mode_when_highlighting_disabled():
    doc = TextDocument("x", syntax_mode=SyntaxMode("python"))
    assert resolve_syntax_mode(doc, highlighting_enabled=False) is PLAIN_MODE


def test_plain_mode_when_document_has_none():
    assert resolve_syntax_mode(TextDocument("x")) is PLAIN_MODE


# ---------------------------------------------------------------------------
# resolve_region_geometry
# ---------------------------------------------------------------------------


def test_basic_region(doc, layouts):
    geom = resolve_region_geometry(doc.fold(3, 5), 0, doc, layouts, PLAIN_MODE, _viewport())
    # line 3 indented 4 columns, line 5 indented 8: the smaller wins
    assert geom.x == 32.0
    assert geom.width == 800 - 32 - 6
    assert geom.y == 32.0
    assert geom.height == 48


def test_x_is_minimum_of_start_and_end_indent(doc, layouts):
    geom = resolve_region_geometry(doc.fold(4, 6), 0, doc, layouts, PLAIN_MODE, _viewport())
    # line 4 indented 8 columns, line 6 only 2
    assert geom.x == 16.0


def test_text_start_and_margin_offset(doc, layouts):
    viewport = _viewport(x_offset=40.0, text_start=4.0)
    geom = resolve_region_geometry(doc.fold(3, 5), 0, doc, layouts, PLAIN_MODE, viewport)
    assert geom.x == 40.0 + 4.0 + 32.0
    assert geom.width == int(800 - 76.0 - 6)


def test_x_never_left_of_margin(doc, layouts):
    viewport = _viewport(x_offset=40.0, h_value=100.0)
    geom = resolve_region_geometry(doc.fold(3, 5), 0, doc, layouts, PLAIN_MODE, viewport)
    assert geom.x == 40.0


def test_width_staircases_by_nesting_level(doc, layouts):
    viewport = _viewport()
    region = doc.fold(3, 5)
    widths = [
        resolve_region_geometry(region, i, doc, layouts, PLAIN_MODE, viewport).width
        for i in range(4)
    ]
    for a, b in zip(widths, widths[1:]):
        assert a - b == 6


def test_end_on_last_line_uses_vertical_upper(doc, layouts):
    viewport = _viewport(v_upper=500.0)
    geom = resolve_region_geometry(doc.fold(6, 7), 0, doc, layouts, PLAIN_MODE, viewport)
    assert geom.y == 80.0
    assert geom.height == 420


def test_vertical_scroll_moves_region_up(doc, layouts):
    viewport = _viewport(v_value=20.0)
    geom = resolve_region_geometry(doc.fold(3, 5), 0, doc, layouts, PLAIN_MODE, viewport)
    assert geom.y == 12.0
    assert geom.height == 48


def test_whitespace_only_start_line_collapses_to_column_zero():
    doc = TextDocument("a\n      \n    b\n    c")
    layouts = MonospaceLayoutService(doc, char_width=8.0)
    geom = resolve_region_geometry(doc.fold(2, 4), 0, doc, layouts, PLAIN_MODE, _viewport())
    assert geom.x == 0.0


def test_degenerate_region_is_not_rejected(doc, layouts):
    viewport = _viewport(width=10)
    geom = resolve_region_geometry(doc.fold(3, 5), 2, doc, layouts, PLAIN_MODE, viewport)
    assert geom.width < 0


def test_layout_requested_with_mode_and_line_span(doc):
    calls = []

    class FakeLayouts:
        def layout(self, mode, line, offset, length):
            calls.append((mode, line.line_number, offset, length))
            return MonospaceLayoutService(doc).layout(mode, line, offset, length)

    mode = SyntaxMode("python")
    resolve_region_geometry(doc.fold(3, 5), 0, doc, FakeLayouts(), mode, _viewport())
    line3, line5 = doc.get_line(3), doc.get_line(5)
    assert calls == [
        (mode, 3, line3.offset, line3.length),
        (mode, 5, line5.offset, line5.length),
    ]


class TestDrawableWidth:
    def test_allocation_width_when_content_fits(self):
        assert drawable_width(_viewport(h_upper=500.0)) == 800

    def test_scrolled_content_width_when_wider(self):
        viewport = _viewport(h_upper=1000.0, h_value=50.0, x_offset=10.0)
        assert drawable_width(viewport) == 960
