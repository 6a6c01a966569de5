"""Data models for termescape."""

from termescape.models.config import Config, SequenceSpec, ThemeConfig

__all__ = ["Config", "SequenceSpec", "ThemeConfig"]
