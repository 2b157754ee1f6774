"""Theme definitions for fold overlay rendering."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Theme:
    """Visual theme of an editor surface."""

    name: str
    background_color: str
    foreground_color: str
    text_font_family: str = "'DejaVu Sans Mono', Menlo, Consolas, monospace"
    text_font_size: float = 13.0
    shadow_opacity: float = 0.6  # alpha of the foreground color under the innermost fold
