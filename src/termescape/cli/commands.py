"""CLI commands for termescape."""

from typing import Any

from rich.table import Table
from rich.text import Text

from termescape.console import get_console
from termescape.output import to_text, write
from termescape.renderer import StyleToken
from termescape.sequences import SEQUENCES, Style, color_background
from termescape.text import split_at, visible_length

console = get_console()

TOKEN_PREFIX = ":"


def parse_words(words: list[str]) -> list[Any]:
    """Turn command-line words into chardata.

    Words starting with ``:`` are style tokens; other words are literal
    text joined by single spaces.
    """
    chardata: list[Any] = []
    previous_literal = False
    for word in words:
        if word.startswith(TOKEN_PREFIX) and len(word) > 1:
            chardata.append(StyleToken(word[1:]))
            continue
        if previous_literal:
            chardata.append(" ")
        chardata.append(word)
        previous_literal = True
    return chardata


def unescape(text: str) -> str:
    """Replace the shell spellings of ESC (``\\e``, ``\\x1b``, ``\\033``)."""
    for spelling in ("\\e", "\\x1b", "\\x1B", "\\033"):
        text = text.replace(spelling, "\x1b")
    return text


def cmd_sequences() -> None:
    """Show all built-in sequences."""
    table = Table(show_header=True, header_style="bold")
    table.add_column("Name", style="cyan")
    table.add_column("Sequence")
    table.add_column("Sample")

    for name, value in SEQUENCES.items():
        sample = Text("") if name == Style.HOME.value else to_text([StyleToken(name), name])
        table.add_row(name, repr(value), sample)

    console.print(table)


def cmd_palette(per_line: int = 8, theme: dict | None = None, **opts: Any) -> None:
    """Print the 256-color background palette."""
    for code in range(256):
        swatch_theme = {**(theme or {}), "swatch": color_background(code)}
        label = str(code).rjust(4).ljust(5)
        newline = "\n" if (code + 1) % per_line == 0 else ""
        write(
            [Style.WHITE, StyleToken("swatch"), label, Style.BLACK, label, Style.RESET, newline],
            theme=swatch_theme,
            **opts,
        )


def cmd_rgb_palette(per_line: int = 6, theme: dict | None = None, **opts: Any) -> None:
    """Print the 6x6x6 RGB cube with a readable foreground."""
    index = 0
    for red in range(6):
        for green in range(6):
            for blue in range(6):
                index += 1
                swatch_theme = {
                    **(theme or {}),
                    "swatch": color_background(red, green, blue),
                    "label": Style.WHITE if green < 3 else Style.BLACK,
                }
                newline = "\n" if index % per_line == 0 else ""
                write(
                    [
                        StyleToken("label"),
                        StyleToken("swatch"),
                        f" {red}/{green}/{blue} ",
                        Style.RESET,
                        newline,
                    ],
                    theme=swatch_theme,
                    **opts,
                )


def cmd_length(text: str) -> int:
    """Return the visible length of text given with shell escapes."""
    return visible_length(unescape(text))


def cmd_split(text: str, offset: int) -> tuple[str, str]:
    """Split text given with shell escapes at a visible offset."""
    return split_at(unescape(text), offset)
