"""Rich console access and color capability detection."""

from rich.console import Console

# Singleton console instance
_console: Console | None = None


def get_console() -> Console:
    """Get the singleton Console instance.

    Returns:
        Rich Console instance.
    """
    global _console
    if _console is None:
        _console = Console()
    return _console


def set_console(console: Console | None) -> None:
    """Replace the singleton Console, or drop it with None."""
    global _console
    _console = console


def enabled() -> bool:
    """Report whether escape sequences should be emitted by default.

    Rich decides this from the output stream and the environment
    (``NO_COLOR``, ``FORCE_COLOR``, ``TERM=dumb``).
    """
    console = get_console()
    return (
        console.is_terminal
        and console.color_system is not None
        and not console.no_color
    )
