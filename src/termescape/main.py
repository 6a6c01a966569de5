"""Main entry point for termescape."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from termescape import __version__
from termescape.cli.commands import (
    cmd_length,
    cmd_palette,
    cmd_rgb_palette,
    cmd_sequences,
    cmd_split,
    parse_words,
)
from termescape.exceptions import EscapeError
from termescape.models.config import Config
from termescape.output import puts, write
from termescape.storage.config import ConfigStorage, get_config
from termescape.utils.logging import get_logger, setup_logging

app = typer.Typer(
    name="termescape",
    help="Render theme-aware ANSI escape sequences",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)
logger = get_logger(__name__)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"[bold cyan]termescape[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit()


def _render_options(
    ctx: typer.Context,
    emit: Optional[bool] = None,
    reset: Optional[bool] = None,
) -> dict:
    config: Config = ctx.obj or Config()
    try:
        opts = config.render_options()
    except ValueError as e:
        logger.debug(f"Theme {config.theme_name!r} could not be built")
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e
    if emit is not None:
        opts["emit"] = emit
    if reset is not None:
        opts["reset"] = reset
    return opts


@app.callback()
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Config file (default: $TERMESCAPE_CONFIG or ~/.config/termescape/config.yaml)",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log debug output to stderr"),
) -> None:
    """termescape: theme-aware ANSI escape sequences.

    Use 'termescape echo :red hello' to print styled text.
    Use 'termescape sequences' to list the built-in names.
    """
    config = ConfigStorage(config_path).load() if config_path else get_config()
    setup_logging("DEBUG" if verbose else config.log_level, console=err_console)
    ctx.obj = config


@app.command("echo")
def echo_command(
    ctx: typer.Context,
    words: list[str] = typer.Argument(..., help="Text; words starting with ':' are styles"),
    emit: Optional[bool] = typer.Option(
        None, "--emit/--no-emit", help="Emit escape sequences (default: detect terminal)"
    ),
    reset: Optional[bool] = typer.Option(
        None, "--reset/--no-reset", help="Append a reset sequence (default: auto)"
    ),
    newline: bool = typer.Option(True, "--newline/--no-newline", help="End with a newline"),
) -> None:
    """Print text with style tokens."""
    opts = _render_options(ctx, emit, reset)
    chardata = parse_words(words)
    try:
        if newline:
            puts(chardata, **opts)
        else:
            write(chardata, **opts)
    except EscapeError as e:
        logger.debug(f"Rendering failed for {words}")
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e


@app.command("sequences")
def sequences_command() -> None:
    """List the built-in sequence names."""
    cmd_sequences()


@app.command("palette")
def palette_command(
    ctx: typer.Context,
    emit: Optional[bool] = typer.Option(None, "--emit/--no-emit", help="Emit escape sequences"),
) -> None:
    """Show the 256-color palette."""
    cmd_palette(**_render_options(ctx, emit))


@app.command("rgb-palette")
def rgb_palette_command(
    ctx: typer.Context,
    emit: Optional[bool] = typer.Option(None, "--emit/--no-emit", help="Emit escape sequences"),
) -> None:
    """Show the 6x6x6 RGB color cube."""
    cmd_rgb_palette(**_render_options(ctx, emit))


@app.command("length")
def length_command(
    text: str = typer.Argument(..., help="Text; '\\e' stands for ESC"),
) -> None:
    """Print the visible length of a rendered string."""
    typer.echo(cmd_length(text))


@app.command("split")
def split_command(
    text: str = typer.Argument(..., help="Text; '\\e' stands for ESC"),
    offset: int = typer.Argument(..., help="Visible characters in the first part"),
) -> None:
    """Split a rendered string at a visible offset."""
    prefix, suffix = cmd_split(text, offset)
    typer.echo(repr(prefix))
    typer.echo(repr(suffix))


if __name__ == "__main__":
    app()
