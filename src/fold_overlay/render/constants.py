"""Render constants for SVG previews.

Theme-dependent values remain in style.py; fold geometry constants live in
layout/constants.py.
"""

# ---------------------------------------------------------------------------
# Preview canvas
# ---------------------------------------------------------------------------
PREVIEW_TEXT_START: float = 4.0
"""Gap between the left edge of the text area and the first text column."""

PREVIEW_RIGHT_PADDING: float = 48.0
"""Extra width beyond the widest line when no preview width is given."""
