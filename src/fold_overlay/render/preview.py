"""Whole-document SVG previews: fold overlay plus the document text on top."""

from __future__ import annotations

__all__ = ["preview_viewport", "render_preview_svg"]

import drawsvg as draw

from fold_overlay.layout.constants import CHAR_WIDTH, LINE_HEIGHT, TAB_SIZE
from fold_overlay.layout.text import MonospaceLayoutService
from fold_overlay.model import FoldedRegion, Rectangle, TextDocument, ViewportState
from fold_overlay.render.canvas import SvgContext
from fold_overlay.render.constants import PREVIEW_RIGHT_PADDING, PREVIEW_TEXT_START
from fold_overlay.render.overlay import FoldOverlayRenderer
from fold_overlay.render.style import Theme


def preview_viewport(
    layouts: MonospaceLayoutService,
    line_height: float,
    zoom: float = 1.0,
    width: int | None = None,
    height: int | None = None,
    scroll_x: float = 0.0,
    scroll_y: float = 0.0,
    x_offset: float = 0.0,
    text_start: float = PREVIEW_TEXT_START,
) -> ViewportState:
    """Viewport for showing ``layouts.document``; sizes default to the full content."""
    h_upper = layouts.content_width() + text_start
    v_upper = layouts.document.line_count * line_height
    return ViewportState(
        width=width or int(x_offset + h_upper + PREVIEW_RIGHT_PADDING * zoom),
        height=height or int(v_upper),
        line_height=line_height,
        zoom=zoom,
        h_value=scroll_x,
        h_upper=h_upper,
        v_value=scroll_y,
        v_upper=v_upper,
        x_offset=x_offset,
        text_start=text_start,
    )


def render_preview_svg(
    document: TextDocument,
    regions: list[FoldedRegion],
    theme: Theme,
    zoom: float = 1.0,
    width: int | None = None,
    height: int | None = None,
    scroll_x: float = 0.0,
    scroll_y: float = 0.0,
    char_width: float = CHAR_WIDTH,
    line_height: float = LINE_HEIGHT,
    tab_size: int = TAB_SIZE,
    show_text: bool = True,
    highlighting_enabled: bool = True,
) -> str:
    """Render the fold overlay for ``document`` to an SVG string."""
    layouts = MonospaceLayoutService(document, char_width * zoom, tab_size)
    viewport = preview_viewport(
        layouts,
        line_height * zoom,
        zoom=zoom,
        width=width,
        height=height,
        scroll_x=scroll_x,
        scroll_y=scroll_y,
        text_start=PREVIEW_TEXT_START * zoom,
    )

    ctx = SvgContext(viewport.width, viewport.height)
    renderer = FoldOverlayRenderer(
        document, layouts, regions, highlighting_enabled=highlighting_enabled
    )
    renderer.draw(ctx, Rectangle(0, 0, viewport.width, viewport.height), viewport, theme)

    if show_text:
        _render_text(ctx, document, viewport, theme, tab_size)

    return ctx.as_svg()


def _render_text(
    ctx: SvgContext,
    document: TextDocument,
    viewport: ViewportState,
    theme: Theme,
    tab_size: int,
) -> None:
    """Draw visible lines, tab-expanded, with whitespace preserved."""
    x = viewport.x_offset + viewport.text_start - viewport.h_value
    for line in document.lines:
        top = document.line_to_y(line.line_number, viewport.line_height) - viewport.v_value
        if top + viewport.line_height < 0 or top > viewport.height:
            continue
        text = document.line_text(line).expandtabs(tab_size)
        if not text.strip():
            continue
        ctx.append(draw.Text(
            text,
            theme.text_font_size * viewport.zoom,
            x, top + viewport.line_height / 2,
            fill=theme.foreground_color,
            font_family=theme.text_font_family,
            dominant_baseline="central",
            style="white-space: pre",
        ))
