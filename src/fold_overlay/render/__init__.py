"""Rendering of fold overlays."""

from fold_overlay.render.canvas import DrawCommand, RecordingContext, SvgContext
from fold_overlay.render.overlay import FoldOverlayRenderer
from fold_overlay.render.preview import render_preview_svg

__all__ = [
    "DrawCommand",
    "FoldOverlayRenderer",
    "RecordingContext",
    "SvgContext",
    "render_preview_svg",
]
