"""Layout constants used across layout and render modules.

Centralizes the fixed numbers behind fold overlay geometry.
Theme-dependent values remain in render/style.py.
"""

# ---------------------------------------------------------------------------
# Region rectangles
# ---------------------------------------------------------------------------
NESTING_INSET: int = 6
"""Pixels trimmed from the right edge per nesting level (times position + 1)."""

CORNER_RADIUS_DIVISOR: float = 4.0
"""Corner radius is the line height divided by this."""

# ---------------------------------------------------------------------------
# Shadow
# ---------------------------------------------------------------------------
SHADOW_RADIUS_PER_ZOOM: float = 2.0
"""Blur radius in pixels at zoom 1.0; scales linearly with zoom."""

# ---------------------------------------------------------------------------
# Monospace line layout defaults
# ---------------------------------------------------------------------------
CHAR_WIDTH: float = 8.0
"""Pixel advance of one character column."""

TAB_SIZE: int = 4
"""Columns per tab stop."""

LINE_HEIGHT: float = 16.0
"""Default line height in pixels."""
