"""Dark editor theme."""

from fold_overlay.render.style import Theme

DARK_THEME = Theme(
    name="dark",
    background_color="#1e1e1e",
    foreground_color="#d4d4d4",
)
