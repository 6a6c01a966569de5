"""Writing rendered chardata to text streams."""

from typing import Any, TextIO

from rich.text import Text

from termescape.console import get_console
from termescape.renderer import Chardata, Theme, format


def write(
    chardata: Chardata,
    device: TextIO | None = None,
    newline: bool = False,
    **opts: Any,
) -> None:
    """Render chardata and write it to a stream.

    Args:
        chardata: Nested literal text and style tokens.
        device: Text stream; defaults to the console's file.
        newline: Append a newline after the rendered output.
        **opts: Options for ``format`` (theme, emit, reset).
    """
    stream = device if device is not None else get_console().file
    stream.write(format(chardata, **opts))
    if newline:
        stream.write("\n")
    stream.flush()


def puts(chardata: Chardata, device: TextIO | None = None, **opts: Any) -> None:
    """Like ``write`` but ends the output with a newline."""
    write(chardata, device=device, newline=True, **opts)


def to_text(chardata: Chardata, theme: Theme | None = None) -> Text:
    """Build a rich Text from chardata for use in rich renderables."""
    return Text.from_ansi(format(chardata, theme=theme, emit=True))
