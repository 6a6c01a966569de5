"""termescape - theme-aware ANSI escape sequence rendering."""

__version__ = "0.1.0"

from termescape.console import enabled
from termescape.exceptions import CyclicSequenceError, EscapeError, UnknownSequenceError
from termescape.output import puts, to_text, write
from termescape.renderer import (
    ResetPolicy,
    StyleToken,
    colorizer,
    format,
    formatter,
    iter_render,
    render,
)
from termescape.sequences import (
    SEQUENCES,
    Style,
    color,
    color_background,
    sequence,
    sequences,
)
from termescape.text import chunks, split_at, strip_sequences, truncate, visible_length

__all__ = [
    "__version__",
    # Rendering
    "render",
    "iter_render",
    "format",
    "colorizer",
    "formatter",
    "StyleToken",
    "ResetPolicy",
    # Style table
    "Style",
    "SEQUENCES",
    "sequence",
    "sequences",
    "color",
    "color_background",
    # Text
    "visible_length",
    "split_at",
    "strip_sequences",
    "truncate",
    "chunks",
    # Output
    "enabled",
    "write",
    "puts",
    "to_text",
    # Errors
    "EscapeError",
    "UnknownSequenceError",
    "CyclicSequenceError",
]
