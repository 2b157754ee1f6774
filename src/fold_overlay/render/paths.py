"""Rounded-rectangle paths with per-corner rounding.

Corners are single cubic curves whose two control points both sit on the
corner vertex. This gives a slightly tighter shape than a circular arc and
is what region rectangles and the shadow are drawn with.

::

    UA****BQ
    H      C
    *      *
    G      D
    TF****ES
"""

from __future__ import annotations

__all__ = ["draw_round_rectangle", "draw_round_rectangle_corners"]

from fold_overlay.render.canvas import DrawingContext


def draw_round_rectangle(
    cr: DrawingContext,
    upper_round: bool,
    lower_round: bool,
    x: float,
    y: float,
    r: float,
    w: float,
    h: float,
) -> None:
    """Rounded rectangle where the top and bottom edges are rounded as a pair."""
    draw_round_rectangle_corners(
        cr, upper_round, upper_round, lower_round, lower_round, x, y, r, w, h
    )


def draw_round_rectangle_corners(
    cr: DrawingContext,
    top_left_round: bool,
    top_right_round: bool,
    bottom_left_round: bool,
    bottom_right_round: bool,
    x: float,
    y: float,
    r: float,
    w: float,
    h: float,
) -> None:
    """Closed clockwise path around (x, y, w, h) with independently rounded corners.

    Replaces the context's current path.
    """
    cr.new_path()

    if top_left_round:
        cr.move_to(x + r, y)  # A
    else:
        cr.move_to(x, y)  # U

    if top_right_round:
        cr.line_to(x + w - r, y)  # B
        cr.curve_to(x + w, y, x + w, y, x + w, y + r)  # C, both control points at Q
    else:
        cr.line_to(x + w, y)  # Q

    if bottom_right_round:
        cr.line_to(x + w, y + h - r)  # D
        cr.curve_to(x + w, y + h, x + w, y + h, x + w - r, y + h)  # E
    else:
        cr.line_to(x + w, y + h)  # S

    if bottom_left_round:
        cr.line_to(x + r, y + h)  # F
        cr.curve_to(x, y + h, x, y + h, x, y + h - r)  # G
    else:
        cr.line_to(x, y + h)  # T

    if top_left_round:
        cr.line_to(x, y + r)  # H
        cr.curve_to(x, y, x, y, x + r, y)  # A
    else:
        cr.line_to(x, y)  # U

    cr.close_path()
