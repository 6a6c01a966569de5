"""Built-in table of named ANSI escape sequences."""

from enum import Enum
from types import MappingProxyType

from termescape.exceptions import UnknownSequenceError

ESC = "\x1b"
CSI = ESC + "["


class Style(str, Enum):
    """Names of the built-in escape sequences."""

    BLACK = "black"
    BLACK_BACKGROUND = "black_background"
    LIGHT_BLACK = "light_black"
    LIGHT_BLACK_BACKGROUND = "light_black_background"
    RED = "red"
    RED_BACKGROUND = "red_background"
    LIGHT_RED = "light_red"
    LIGHT_RED_BACKGROUND = "light_red_background"
    GREEN = "green"
    GREEN_BACKGROUND = "green_background"
    LIGHT_GREEN = "light_green"
    LIGHT_GREEN_BACKGROUND = "light_green_background"
    YELLOW = "yellow"
    YELLOW_BACKGROUND = "yellow_background"
    LIGHT_YELLOW = "light_yellow"
    LIGHT_YELLOW_BACKGROUND = "light_yellow_background"
    BLUE = "blue"
    BLUE_BACKGROUND = "blue_background"
    LIGHT_BLUE = "light_blue"
    LIGHT_BLUE_BACKGROUND = "light_blue_background"
    MAGENTA = "magenta"
    MAGENTA_BACKGROUND = "magenta_background"
    LIGHT_MAGENTA = "light_magenta"
    LIGHT_MAGENTA_BACKGROUND = "light_magenta_background"
    CYAN = "cyan"
    CYAN_BACKGROUND = "cyan_background"
    LIGHT_CYAN = "light_cyan"
    LIGHT_CYAN_BACKGROUND = "light_cyan_background"
    WHITE = "white"
    WHITE_BACKGROUND = "white_background"
    LIGHT_WHITE = "light_white"
    LIGHT_WHITE_BACKGROUND = "light_white_background"
    FONT_1 = "font_1"
    FONT_2 = "font_2"
    FONT_3 = "font_3"
    FONT_4 = "font_4"
    FONT_5 = "font_5"
    FONT_6 = "font_6"
    FONT_7 = "font_7"
    FONT_8 = "font_8"
    FONT_9 = "font_9"
    DEFAULT_COLOR = "default_color"
    DEFAULT_BACKGROUND = "default_background"
    RESET = "reset"
    BRIGHT = "bright"
    FAINT = "faint"
    ITALIC = "italic"
    UNDERLINE = "underline"
    BLINK_SLOW = "blink_slow"
    BLINK_RAPID = "blink_rapid"
    INVERSE = "inverse"
    REVERSE = "reverse"
    CONCEAL = "conceal"
    CROSSED_OUT = "crossed_out"
    PRIMARY_FONT = "primary_font"
    NORMAL = "normal"
    NOT_ITALIC = "not_italic"
    NO_UNDERLINE = "no_underline"
    BLINK_OFF = "blink_off"
    INVERSE_OFF = "inverse_off"
    REVERSE_OFF = "reverse_off"
    FRAMED = "framed"
    ENCIRCLED = "encircled"
    OVERLINED = "overlined"
    NOT_FRAMED_ENCIRCLED = "not_framed_encircled"
    NOT_OVERLINED = "not_overlined"
    HOME = "home"


NAMED_COLORS = ["black", "red", "green", "yellow", "blue", "magenta", "cyan", "white"]

ATTRIBUTES: dict[str, int] = {
    "default_color": 39,
    "default_background": 49,
    "reset": 0,
    "bright": 1,
    "faint": 2,
    "italic": 3,
    "underline": 4,
    "blink_slow": 5,
    "blink_rapid": 6,
    "inverse": 7,
    "reverse": 7,
    "conceal": 8,
    "crossed_out": 9,
    "primary_font": 10,
    "normal": 22,
    "not_italic": 23,
    "no_underline": 24,
    "blink_off": 25,
    "inverse_off": 27,
    "reverse_off": 27,
    "framed": 51,
    "encircled": 52,
    "overlined": 53,
    "not_framed_encircled": 54,
    "not_overlined": 55,
}


def _build_table() -> dict[str, str]:
    table: dict[str, str] = {}
    for index, name in enumerate(NAMED_COLORS):
        table[name] = f"{CSI}{index + 30}m"
        table[f"{name}_background"] = f"{CSI}{index + 40}m"
        table[f"light_{name}"] = f"{CSI}{index + 90}m"
        table[f"light_{name}_background"] = f"{CSI}{index + 100}m"
    for font in range(1, 10):
        table[f"font_{font}"] = f"{CSI}{font + 10}m"
    for name, code in ATTRIBUTES.items():
        table[name] = f"{CSI}{code}m"
    table["home"] = f"{CSI}H"
    return table


# Read-only after import
SEQUENCES = MappingProxyType(_build_table())


def sequences() -> list[str]:
    """Return the names of all built-in sequences."""
    return list(SEQUENCES)


def sequence(name: str) -> str:
    """Return the escape sequence for a built-in name.

    Args:
        name: Built-in sequence name, e.g. ``"reverse"`` or ``Style.RED``.

    Returns:
        The escape sequence string.

    Raises:
        UnknownSequenceError: If the name is not in the table.
    """
    key = name.value if isinstance(name, Style) else name
    try:
        return SEQUENCES[key]
    except (KeyError, TypeError):
        raise UnknownSequenceError(key) from None


def is_sequence(text: str) -> bool:
    """Check whether a string is a pre-formed escape sequence."""
    return text.startswith(CSI)


def _palette_index(*args: int) -> int:
    if len(args) == 1:
        (code,) = args
        if not 0 <= code <= 255:
            raise ValueError(f"color code must be within 0..255, got {code}")
        return code
    if len(args) == 3:
        if not all(0 <= part <= 5 for part in args):
            raise ValueError(f"rgb components must be within 0..5, got {args}")
        red, green, blue = args
        return 16 + 36 * red + 6 * green + blue
    raise TypeError("expected a color code or an (r, g, b) triple")


def color(*args: int) -> str:
    """Foreground sequence for a 256-color code or an RGB triple (0-5 each)."""
    return f"{CSI}38;5;{_palette_index(*args)}m"


def color_background(*args: int) -> str:
    """Background sequence for a 256-color code or an RGB triple (0-5 each)."""
    return f"{CSI}48;5;{_palette_index(*args)}m"
