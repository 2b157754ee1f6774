"""Solarized dark and light themes."""

from fold_overlay.render.style import Theme

SOLARIZED_DARK_THEME = Theme(
    name="solarized-dark",
    background_color="#002b36",
    foreground_color="#839496",
)

SOLARIZED_LIGHT_THEME = Theme(
    name="solarized-light",
    background_color="#fdf6e3",
    foreground_color="#657b83",
)
