"""Escape-sequence aware text measurement and splitting."""

import re

# SGR sequences plus cursor home (compiled once at import)
ESCAPE_PATTERN = re.compile(r"\x1b\[[0-9;]*m|\x1b\[H")

# Same pattern with a group so re.split keeps the separators
_SPLIT_PATTERN = re.compile(f"({ESCAPE_PATTERN.pattern})")


def strip_sequences(text: str) -> str:
    """Remove escape sequences from text.

    Args:
        text: Text containing escape sequences.

    Returns:
        Text with escape sequences removed.
    """
    return ESCAPE_PATTERN.sub("", text)


def visible_length(text: str) -> int:
    """Count the codepoints of text that are not part of an escape sequence."""
    return len(strip_sequences(text))


def split_at(text: str, offset: int) -> tuple[str, str]:
    """Split text after ``offset`` visible characters.

    Escape sequences are never cut and consume no offset. A sequence right
    after the split point belongs to the second half. Offsets past the end
    give ``(text, "")``.

    Args:
        text: Text that may contain escape sequences.
        offset: Number of visible characters in the first half.

    Returns:
        Tuple of (prefix, suffix) with ``prefix + suffix == text``.

    Example::

        >>> split_at("\\x1b[31mred\\x1b[32mgreen", 4)
        ('\\x1b[31mred\\x1b[32mg', 'reen')
    """
    if offset <= 0 or not text:
        return "", text

    # Literal segments sit at even indexes, escape sequences at odd ones
    parts = _SPLIT_PATTERN.split(text)
    prefix: list[str] = []
    remaining = offset

    for index, part in enumerate(parts):
        if index % 2:
            prefix.append(part)
            continue
        if len(part) < remaining:
            prefix.append(part)
            remaining -= len(part)
            continue

        prefix.append(part[:remaining])
        return "".join(prefix), part[remaining:] + "".join(parts[index + 1:])

    return text, ""


def truncate(text: str, max_length: int = 80, suffix: str = "...") -> str:
    """Truncate text to a number of visible characters.

    Escape sequences from the cut-off part are kept after the suffix, so a
    trailing reset still ends the styled text.

    Args:
        text: Text to truncate.
        max_length: Maximum visible length before truncation.
        suffix: Suffix to add when truncated.

    Returns:
        Truncated text with suffix if needed.
    """
    if visible_length(text) <= max_length:
        return text
    prefix, rest = split_at(text, max_length)
    return prefix + suffix + "".join(ESCAPE_PATTERN.findall(rest))


def chunks(text: str, width: int) -> list[str]:
    """Break text into pieces of at most ``width`` visible characters."""
    if width <= 0:
        raise ValueError(f"width must be positive, got {width}")

    pieces = []
    rest = text
    while visible_length(rest) > width:
        piece, rest = split_at(rest, width)
        pieces.append(piece)
    if rest or not pieces:
        pieces.append(rest)
    return pieces
