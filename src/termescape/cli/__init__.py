"""CLI module for termescape."""

from termescape.cli.commands import parse_words, unescape

__all__ = ["parse_words", "unescape"]
