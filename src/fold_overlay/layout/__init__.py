"""Geometry for fold overlays: line layout and region rectangles."""

from fold_overlay.layout.regions import (
    RegionGeometry,
    first_non_ws_index,
    resolve_region_geometry,
    resolve_syntax_mode,
)
from fold_overlay.layout.text import MonospaceLayoutService, MonospaceLineLayout

__all__ = [
    "MonospaceLayoutService",
    "MonospaceLineLayout",
    "RegionGeometry",
    "first_non_ws_index",
    "resolve_region_geometry",
    "resolve_syntax_mode",
]
