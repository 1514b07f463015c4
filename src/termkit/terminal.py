"""Terminal output - writes escape sequences straight to stdout."""

from __future__ import annotations

import sys

from termkit.codec import escape
from termkit.codec.escape import Direction
from termkit.core.constants import DEFAULT_STYLE
from termkit.core.geometry import TerminalSize, query_terminal_size
from termkit.core.raw import read_raw_byte


class Terminal:
    """Printing counterparts of the escape builders."""

    @staticmethod
    def size() -> TerminalSize:
        """Get current terminal dimensions. Raises GeometryUnavailable."""
        return query_terminal_size()

    @staticmethod
    def getch() -> int:
        """Read one unechoed byte from stdin."""
        return read_raw_byte()

    @staticmethod
    def write(text: str) -> None:
        """Write text to terminal."""
        sys.stdout.write(text)
        sys.stdout.flush()

    @staticmethod
    def reset() -> None:
        """Reset all terminal attributes."""
        Terminal.write(DEFAULT_STYLE)

    @staticmethod
    def clear() -> None:
        """Clear screen and scrollback, cursor to home."""
        Terminal.write(escape.clear_screen_and_history())

    @staticmethod
    def clear_line() -> None:
        Terminal.write(escape.clear_line())

    @staticmethod
    def move_cursor_up(count: int = 1) -> None:
        Terminal.write(escape.move_cursor(Direction.UP, count))

    @staticmethod
    def move_cursor_down(count: int = 1) -> None:
        Terminal.write(escape.move_cursor(Direction.DOWN, count))

    @staticmethod
    def move_cursor_left(count: int = 1) -> None:
        Terminal.write(escape.move_cursor(Direction.LEFT, count))

    @staticmethod
    def move_cursor_right(count: int = 1) -> None:
        Terminal.write(escape.move_cursor(Direction.RIGHT, count))

    @staticmethod
    def move_to(line: int, column: int) -> None:
        """Move cursor to position (1-indexed)."""
        Terminal.write(escape.set_cursor(line, column))

    @staticmethod
    def save_cursor() -> None:
        Terminal.write(escape.save_cursor())

    @staticmethod
    def restore_cursor() -> None:
        Terminal.write(escape.restore_cursor())

    @staticmethod
    def hide_cursor() -> None:
        """Hide the cursor."""
        Terminal.write(escape.hide_cursor())

    @staticmethod
    def show_cursor() -> None:
        """Show the cursor."""
        Terminal.write(escape.show_cursor())

    @staticmethod
    def set_title(title: str) -> None:
        """Set the terminal's window title."""
        Terminal.write(escape.set_title(title))
