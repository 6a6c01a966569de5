"""Built-in themes for termescape."""

from typing import Any

from termescape.renderer import StyleToken
from termescape.sequences import Style, color

# Main theme: semantic names for CLI output
DEFAULT_THEME: dict[str, Any] = {
    "primary": Style.CYAN,
    "secondary": Style.WHITE,
    "success": Style.GREEN,
    "warning": Style.YELLOW,
    "error": Style.RED,
    "info": Style.BLUE,
    "dim": Style.FAINT,
    "orange": color(5, 3, 0),
    "highlight": [StyleToken("orange"), Style.REVERSE],
    "title": [Style.BRIGHT, StyleToken("primary")],
}

# Attributes only, for terminals where colors are unwanted
MONO_THEME: dict[str, Any] = {
    "primary": Style.BRIGHT,
    "secondary": Style.NORMAL,
    "success": Style.BRIGHT,
    "warning": Style.UNDERLINE,
    "error": [Style.BRIGHT, Style.UNDERLINE],
    "info": Style.NORMAL,
    "dim": Style.FAINT,
    "orange": Style.NORMAL,
    "highlight": Style.REVERSE,
    "title": Style.BRIGHT,
}

THEMES: dict[str, dict[str, Any]] = {
    "default": DEFAULT_THEME,
    "mono": MONO_THEME,
}


def get_theme(name: str) -> dict[str, Any]:
    """Get a built-in theme by name.

    Args:
        name: Name of the theme.

    Returns:
        A copy of the theme mapping.

    Raises:
        ValueError: If no theme has that name.
    """
    try:
        return dict(THEMES[name.lower()])
    except KeyError:
        available = ", ".join(THEMES)
        raise ValueError(f"Unknown theme: {name} (available: {available})") from None
