"""Theme definitions for fold overlays."""

from fold_overlay.themes.dark import DARK_THEME
from fold_overlay.themes.light import LIGHT_THEME
from fold_overlay.themes.solarized import SOLARIZED_DARK_THEME, SOLARIZED_LIGHT_THEME

THEMES = {
    "dark": DARK_THEME,
    "light": LIGHT_THEME,
    "solarized-dark": SOLARIZED_DARK_THEME,
    "solarized-light": SOLARIZED_LIGHT_THEME,
}

__all__ = [
    "THEMES",
    "DARK_THEME",
    "LIGHT_THEME",
    "SOLARIZED_DARK_THEME",
    "SOLARIZED_LIGHT_THEME",
]
