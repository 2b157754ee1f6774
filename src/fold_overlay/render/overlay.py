"""Background overlay that visually nests folded regions."""

from __future__ import annotations

__all__ = ["FoldOverlayRenderer"]

import logging
from collections.abc import Iterable

from fold_overlay.layout.constants import CORNER_RADIUS_DIVISOR
from fold_overlay.layout.regions import resolve_region_geometry, resolve_syntax_mode
from fold_overlay.layout.text import LayoutService
from fold_overlay.model import FoldedRegion, Rectangle, TextDocument, ViewportState
from fold_overlay.render.canvas import DrawingContext
from fold_overlay.render.color import HslColor, brightness, fold_color, parse_color, ramp_size
from fold_overlay.render.paths import draw_round_rectangle
from fold_overlay.render.shadow import composite_shadow
from fold_overlay.render.style import Theme

logger = logging.getLogger(__name__)


class FoldOverlayRenderer:
    """Draws shaded, rounded bands behind a stack of folded regions.

    ``regions`` are ordered outermost first and copied on construction, so
    the caller may change its own collection afterwards. A renderer is meant
    to live as long as one fold set; create a new one when the set changes.
    """

    def __init__(
        self,
        document: TextDocument,
        layouts: LayoutService,
        regions: Iterable[FoldedRegion],
        highlighting_enabled: bool = True,
    ) -> None:
        self.document = document
        self.layouts = layouts
        self.regions: tuple[FoldedRegion, ...] = tuple(regions)
        self.highlighting_enabled = highlighting_enabled

    def draw(
        self,
        cr: DrawingContext,
        area: Rectangle,
        viewport: ViewportState,
        theme: Theme,
    ) -> None:
        """Fill ``area`` with the base color, then draw every region on top.

        The innermost region also gets a drop shadow. A shadow that can't be
        drawn is skipped; the region itself is still filled.
        """
        mode = resolve_syntax_mode(self.document, self.highlighting_enabled)
        bg_rgb = parse_color(theme.background_color)
        base = HslColor.from_rgb(bg_rgb)
        overall = brightness(bg_rgb)
        color_count = ramp_size(len(self.regions))
        last = len(self.regions) - 1
        corner_radius = viewport.line_height / CORNER_RADIUS_DIVISOR

        logger.debug(
            "Drawing %d folded regions (brightness %.3f, mode %s)",
            len(self.regions), overall, mode.name,
        )

        cr.set_source_rgba(*fold_color(base, -1, overall, color_count).to_rgb())
        cr.rectangle(area.x, area.y, area.width, area.height)
        cr.fill()

        for i, region in enumerate(self.regions):
            geometry = resolve_region_geometry(
                region, i, self.document, self.layouts, mode, viewport
            )
            logger.debug(
                "Region %d (lines %d-%d): x=%.1f y=%.1f w=%d h=%d",
                i, region.start_line.line_number, region.end_line.line_number,
                geometry.x, geometry.y, geometry.width, geometry.height,
            )

            if i == last:
                composite_shadow(
                    cr, geometry, theme,
                    zoom=viewport.zoom,
                    line_height=viewport.line_height,
                    max_width=viewport.width,
                    max_height=viewport.height,
                )

            draw_round_rectangle(
                cr, True, True,
                geometry.x, geometry.y, corner_radius,
                geometry.width, geometry.height,
            )
            cr.set_source_rgba(*fold_color(base, i, overall, color_count).to_rgb())
            cr.fill()
