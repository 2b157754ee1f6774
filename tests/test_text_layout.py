"""Tests for the monospace line layout service."""

import pytest

from fold_overlay.layout.text import MonospaceLayoutService, MonospaceLineLayout
from fold_overlay.model import PLAIN_MODE, TextDocument


def test_index_to_pos_uses_char_width():
    layout = MonospaceLineLayout("  abc", char_width=8.0)
    assert layout.index_to_pos(0) == (0.0, 0.0)
    assert layout.index_to_pos(2) == (16.0, 0.0)


def test_tabs_advance_to_next_stop():
    layout = MonospaceLineLayout("\tx\ty", char_width=10.0, tab_size=4)
    assert layout.column(1) == 4
    assert layout.column(2) == 5
    assert layout.column(3) == 8
    assert layout.index_to_pos(3) == (80.0, 0.0)


def test_index_past_end_clamps_to_line_end():
    layout = MonospaceLineLayout("abc", char_width=5.0)
    assert layout.index_to_pos(10) == (15.0, 0.0)
    assert layout.width == 15.0


def test_service_lays_out_requested_text():
    doc = TextDocument("first\n    second")
    service = MonospaceLayoutService(doc, char_width=7.0)
    line = doc.get_line(2)
    layout = service.layout(PLAIN_MODE, line, line.offset, line.length)
    assert layout.text == "    second"
    assert layout.index_to_pos(4) == pytest.approx((28.0, 0.0))


def test_content_width_is_widest_line():
    doc = TextDocument("ab\n\tabcdef\nabc")
    service = MonospaceLayoutService(doc, char_width=2.0, tab_size=4)
    assert service.content_width() == 20.0
