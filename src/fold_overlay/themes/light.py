"""Light editor theme."""

from fold_overlay.render.style import Theme

LIGHT_THEME = Theme(
    name="light",
    background_color="#ffffff",
    foreground_color="#222222",
)
