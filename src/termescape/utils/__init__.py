"""Utility modules for termescape."""

from termescape.utils.logging import get_logger, setup_logging

__all__ = [
    "setup_logging",
    "get_logger",
]
