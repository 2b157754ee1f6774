"""Drop shadow for the innermost folded region.

The shadow is drawn on an offscreen surface: a rounded rectangle in the
theme's foreground color, padded on every side so the blur has room to
spread, then composited onto the target with the padding offset removed.
"""

from __future__ import annotations

__all__ = ["ShadowSurface", "SurfaceError", "composite_shadow", "shadow_radius"]

import logging

from fold_overlay.layout.constants import CORNER_RADIUS_DIVISOR, SHADOW_RADIUS_PER_ZOOM
from fold_overlay.layout.regions import RegionGeometry
from fold_overlay.render.canvas import DrawingContext, RecordingContext, SurfaceSnapshot
from fold_overlay.render.color import parse_color
from fold_overlay.render.paths import draw_round_rectangle
from fold_overlay.render.style import Theme

logger = logging.getLogger(__name__)


class SurfaceError(RuntimeError):
    """An offscreen surface could not be allocated or used."""


class ShadowSurface:
    """Offscreen surface with a blur radius, usable as a context manager.

    The surface and its drawing context are released on exit whether or
    not drawing succeeded.
    """

    def __init__(self, width: int, height: int, radius: float) -> None:
        if width <= 0 or height <= 0:
            raise SurfaceError(f"cannot allocate a {width}x{height} surface")
        if radius < 0:
            raise SurfaceError(f"negative blur radius {radius}")
        self.width = width
        self.height = height
        self.radius = radius
        self._context: RecordingContext | None = RecordingContext()

    def __enter__(self) -> ShadowSurface:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    @property
    def released(self) -> bool:
        return self._context is None

    def context(self) -> RecordingContext:
        """Drawing context bound to this surface."""
        if self._context is None:
            raise SurfaceError("surface already released")
        return self._context

    def snapshot(self) -> SurfaceSnapshot:
        return SurfaceSnapshot(
            self.width, self.height, self.radius, tuple(self.context().commands)
        )

    def draw(self, cr: DrawingContext) -> None:
        """Composite the blurred surface at the target's current origin."""
        cr.paint_surface(self.snapshot())

    def release(self) -> None:
        self._context = None


def shadow_radius(zoom: float) -> int:
    return int(zoom * SHADOW_RADIUS_PER_ZOOM)


def composite_shadow(
    cr: DrawingContext,
    geometry: RegionGeometry,
    theme: Theme,
    zoom: float,
    line_height: float,
    max_width: int,
    max_height: int,
) -> bool:
    """Draw a soft shadow under ``geometry``.

    Returns False (and draws nothing) when the offscreen surface can't be
    allocated or used.
    """
    radius = shadow_radius(zoom)
    pad = 2 * radius
    try:
        with ShadowSurface(
            min(geometry.width + pad * 2, max_width),
            min(geometry.height + pad * 2, max_height),
            radius,
        ) as shadow:
            sctx = shadow.context()
            sctx.set_source_rgba(0, 0, 0, 0)
            sctx.fill()

            draw_round_rectangle(
                sctx, True, True, pad, pad,
                line_height / CORNER_RADIUS_DIVISOR,
                geometry.width, geometry.height,
            )
            r, g, b = parse_color(theme.foreground_color)
            sctx.set_source_rgba(r, g, b, theme.shadow_opacity)
            sctx.fill()

            cr.save()
            try:
                cr.translate(geometry.x - pad, geometry.y - pad)
                shadow.draw(cr)
            finally:
                cr.restore()
    except SurfaceError as e:
        logger.debug("Skipping shadow for region %d: %s", geometry.position, e)
        return False
    return True
