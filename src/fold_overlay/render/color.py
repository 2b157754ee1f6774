"""Color handling for fold overlays: HSL conversion and the nesting ramp.

Each nesting level gets a variant of the theme background that differs in
lightness only. On dark themes deeper levels get darker; on light themes
they get slightly lighter. The two branches are separate linear remappings
and do not meet at brightness 0.5.
"""

from __future__ import annotations

__all__ = [
    "HslColor",
    "brightness",
    "fold_color",
    "fold_palette",
    "parse_color",
    "ramp_size",
    "rgb_to_hex",
]

import colorsys
import math
from dataclasses import dataclass, replace

RGB = tuple[float, float, float]


def parse_color(value: str) -> RGB:
    """Parse ``#rgb`` or ``#rrggbb`` into (r, g, b) floats in 0-1."""
    h = value.strip().lstrip("#")
    if len(h) == 3:
        h = "".join(c * 2 for c in h)
    if len(h) != 6:
        raise ValueError(f"Unsupported color value: {value!r}")
    try:
        r, g, b = int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)
    except ValueError:
        raise ValueError(f"Unsupported color value: {value!r}") from None
    return r / 255.0, g / 255.0, b / 255.0


def rgb_to_hex(rgb: RGB) -> str:
    """Convert (r, g, b) floats in 0-1 to #rrggbb."""
    return "#{:02x}{:02x}{:02x}".format(
        *(int(round(min(max(c, 0.0), 1.0) * 255)) for c in rgb)
    )


def brightness(rgb: RGB) -> float:
    """Perceived brightness of a color, 0 (black) to 1 (white)."""
    r, g, b = rgb
    return math.sqrt(r * r * 0.241 + g * g * 0.691 + b * b * 0.068)


@dataclass(frozen=True)
class HslColor:
    """Hue, saturation and lightness, all in 0-1."""

    h: float
    s: float
    l: float  # noqa: E741

    @classmethod
    def from_rgb(cls, rgb: RGB) -> HslColor:
        h, lightness, s = colorsys.rgb_to_hls(*rgb)
        return cls(h, s, lightness)

    @classmethod
    def from_hex(cls, value: str) -> HslColor:
        return cls.from_rgb(parse_color(value))

    def to_rgb(self) -> RGB:
        return colorsys.hls_to_rgb(self.h, min(max(self.l, 0.0), 1.0), self.s)

    def to_hex(self) -> str:
        return rgb_to_hex(self.to_rgb())

    def with_lightness(self, lightness: float) -> HslColor:
        return replace(self, l=lightness)


def ramp_size(region_count: int) -> int:
    """Number of ramp slots for ``region_count`` regions.

    Two slots beyond the regions keep the full-area base fill (index -1)
    outside the per-region range.
    """
    return region_count + 2


def fold_color(
    base: HslColor,
    index: int,
    overall_brightness: float,
    color_count: int,
) -> HslColor:
    """Shade ``base`` for the region at ``index`` (-1 for the base fill).

    ``color_count`` is ``ramp_size(region_count)``, so the last region is
    ``color_count - 3``. That region is pushed two extra slots along the
    ramp. With no regions at all the base fill is the "last" index and gets
    the same push.
    """
    color_position = index + 1
    if index == color_count - 3:
        color_position += 2
    lightness = base.l
    if overall_brightness < 0.5:
        lightness = lightness * 0.81 + lightness * 0.25 * (color_count - color_position) / color_count
    else:
        lightness = lightness * 0.86 + lightness * 0.1 * color_position / color_count
    return base.with_lightness(lightness)


def fold_palette(background: str, region_count: int) -> list[HslColor]:
    """Base fill color followed by one color per region, outermost first."""
    rgb = parse_color(background)
    base = HslColor.from_rgb(rgb)
    overall = brightness(rgb)
    count = ramp_size(region_count)
    return [fold_color(base, i, overall, count) for i in range(-1, region_count)]
