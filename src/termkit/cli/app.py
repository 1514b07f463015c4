"""Typer CLI application exercising the terminal primitives."""

from __future__ import annotations

import logging
import os
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

import termkit
from termkit.core.errors import GeometryUnavailable, SignalRegistrationFailed

# Ctrl-C arrives as a plain byte while the terminal is raw
CTRL_C = 0x03


def configure_logging(verbose: bool) -> None:
    """Route termkit's log records through rich."""
    requested = "DEBUG" if verbose else os.environ.get("TERMKIT_LOG_LEVEL", "WARNING").upper()
    # getLevelName maps known names to their numeric level
    known = isinstance(logging.getLevelName(requested), int)
    logging.basicConfig(
        level=requested if known else "WARNING",
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    if not known:
        logging.getLogger(__name__).warning(
            "Unknown TERMKIT_LOG_LEVEL %r, using WARNING", requested
        )


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="termkit",
        help="Try out raw input, styling and centering in your terminal.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()
    err_console = Console(stderr=True)

    @app.callback()
    def root(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output")] = False,
    ) -> None:
        configure_logging(verbose)

    @app.command()
    def size() -> None:
        """Print the terminal size as WIDTHxHEIGHT."""
        try:
            term_size = termkit.query_terminal_size()
        except GeometryUnavailable as e:
            err_console.print(f"[red]{e}[/]")
            raise typer.Exit(1)
        print(f"{term_size.width}x{term_size.height}")

    @app.command()
    def keys(
        count: Annotated[Optional[int], typer.Option("--count", "-n", help="Stop after N bytes")] = None,
    ) -> None:
        """Show the raw bytes produced by each key press. Press q to quit."""
        try:
            termkit.install_interrupt_guard()
        except SignalRegistrationFailed as e:
            err_console.print(f"[yellow]Running without interrupt guard: {e}[/]")

        console.print("[dim]Press keys to see their bytes, q to quit.[/]")
        seen = 0
        while count is None or seen < count:
            try:
                byte = termkit.read_raw_byte()
            except EOFError:
                break
            except OSError as e:
                err_console.print(f"[red]stdin is not a terminal: {e}[/]")
                raise typer.Exit(1)
            seen += 1
            console.print(f"{byte:3d}  0x{byte:02x}  {bytes([byte])!r}", markup=False, highlight=False)
            if byte in (ord("q"), CTRL_C):
                break

    @app.command()
    def center(
        text: Annotated[str, typer.Argument(help="Text to center; \\n starts a new line")],
        block: Annotated[bool, typer.Option("--block", "-b", help="Shift all lines by the first line's offset")] = False,
        visual_width: Annotated[int, typer.Option("--visual-width", "-w", help="Width to center on (0 = auto)")] = 0,
    ) -> None:
        """Center text in the terminal."""
        text = text.replace("\\n", "\n")
        if not visual_width and termkit.visible_len(text) != len(text):
            visual_width = termkit.visible_len(text.split("\n")[0])

        layout = termkit.center_text_block if block else termkit.center_text
        try:
            print(layout(text, visual_width))
        except GeometryUnavailable as e:
            err_console.print(f"[red]{e}[/]")
            raise typer.Exit(1)

    @app.command()
    def swatch(
        r: Annotated[int, typer.Argument(help="Red (0-255)")],
        g: Annotated[int, typer.Argument(help="Green (0-255)")],
        b: Annotated[int, typer.Argument(help="Blue (0-255)")],
        background: Annotated[bool, typer.Option("--background", "-B", help="Color the background")] = False,
        pad: Annotated[bool, typer.Option("--pad", "-p", help="Pad for the escape sequence overhead")] = False,
    ) -> None:
        """Print a sample of a 24-bit color."""
        role = termkit.ColorRole.BACKGROUND if background else termkit.ColorRole.FOREGROUND
        try:
            sample = termkit.color_sequence(f" {r},{g},{b} ", role, r, g, b, pad)
        except ValueError as e:
            err_console.print(f"[red]{e}[/]")
            raise typer.Exit(1)
        print(termkit.bold(sample))

    return app
