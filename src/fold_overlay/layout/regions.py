"""Region layout: pixel rectangles for folded regions.

Each folded region becomes a rectangle that starts at the indentation of
its first or last line (whichever is further left), stretches to the right
edge of the drawable area minus a per-level inset, and covers the region's
lines vertically. The inset grows with nesting depth so nested regions
form a staircase on the right side.
"""

from __future__ import annotations

__all__ = [
    "RegionGeometry",
    "drawable_width",
    "first_non_ws_index",
    "line_start_x",
    "resolve_region_geometry",
    "resolve_syntax_mode",
]

from dataclasses import dataclass

from fold_overlay.layout.constants import NESTING_INSET
from fold_overlay.layout.text import LayoutService
from fold_overlay.model import (
    PLAIN_MODE,
    DocumentLine,
    FoldedRegion,
    SyntaxMode,
    TextDocument,
    ViewportState,
)


@dataclass(frozen=True)
class RegionGeometry:
    """Device-pixel rectangle for one folded region.

    ``y`` is already adjusted for vertical scroll.
    """

    position: int
    x: float
    y: float
    width: int
    height: int


def first_non_ws_index(text: str) -> int:
    """Index of the first non-whitespace character, or 0 if there is none."""
    for i, ch in enumerate(text):
        if not ch.isspace():
            return i
    return 0


def resolve_syntax_mode(
    document: TextDocument,
    highlighting_enabled: bool = True,
) -> SyntaxMode:
    """Pick the document's syntax mode, or the plain mode when unavailable."""
    if document.syntax_mode is not None and highlighting_enabled:
        return document.syntax_mode
    return PLAIN_MODE


def line_start_x(
    layouts: LayoutService,
    mode: SyntaxMode,
    line: DocumentLine,
    viewport: ViewportState,
) -> float:
    """X of the first non-whitespace character of ``line``, in device pixels.

    Never left of ``viewport.x_offset``.
    """
    layout = layouts.layout(mode, line, line.offset, line.length)
    pos_x, _ = layout.index_to_pos(first_non_ws_index(layout.text))
    return max(
        viewport.x_offset,
        viewport.x_offset + viewport.text_start + pos_x - viewport.h_value,
    )


def drawable_width(viewport: ViewportState) -> int:
    """Width available to region rectangles.

    The allocation width, or the scrolled content extent when the content
    is wider than the allocation.
    """
    width = viewport.width
    if viewport.h_upper > width:
        width = int(viewport.x_offset + viewport.h_upper - viewport.h_value)
    return width


def resolve_region_geometry(
    region: FoldedRegion,
    position: int,
    document: TextDocument,
    layouts: LayoutService,
    mode: SyntaxMode,
    viewport: ViewportState,
) -> RegionGeometry:
    """Compute the rectangle for the region at nesting ``position`` (0 = outermost).

    Degenerate regions (end before start, zero height) are not rejected;
    they produce empty or negative sizes that draw nothing visible.
    """
    start_x = line_start_x(layouts, mode, region.start_line, viewport)
    end_x = line_start_x(layouts, mode, region.end_line, viewport)
    x = min(start_x, end_x)

    width = int(drawable_width(viewport) - x - NESTING_INSET * (position + 1))

    y = document.line_to_y(region.start_line.line_number, viewport.line_height)
    y_end = document.line_to_y(region.end_line.line_number + 1, viewport.line_height)
    if y_end == 0:
        y_end = viewport.v_upper
    height = int(y_end - y)

    return RegionGeometry(
        position=position,
        x=x,
        y=y - viewport.v_value,
        width=width,
        height=height,
    )
