"""
termkit: terminal control primitives

Raw keystroke input that never leaves the terminal raw, ANSI styling and
cursor sequences, and geometry-aware centering.

Quick Start:
    >>> import termkit
    >>> termkit.install_interrupt_guard()
    >>> print(termkit.center_line(termkit.bold("Press a key")))
    >>> key = termkit.getch()

Features:
    - Single byte raw reads with attributes restored on every exit path
    - Interrupt guard that resets styling before the process exits
    - 24-bit color, bold and underline wrappers with optional width padding
    - Cursor movement, screen clearing and window title sequences
    - Line, paragraph and block centering
"""

import logging

__version__ = "0.1.0"

# Escape sequences
from termkit.codec.ansi_text import strip_ansi, visible_len
from termkit.codec.escape import (
    BackgroundColor,
    Bold,
    ColorRole,
    Direction,
    ForegroundColor,
    Reset,
    Style,
    Underline,
    bold,
    clear_line,
    clear_screen_and_history,
    color_sequence,
    hide_cursor,
    move_cursor,
    restore_cursor,
    rgb_bg,
    rgb_fg,
    save_cursor,
    set_cursor,
    set_title,
    show_cursor,
    styled,
    underline,
)

# Terminal control
from termkit.core.constants import DEFAULT_STYLE, NORMAL_SCREEN
from termkit.core.errors import (
    GeometryUnavailable,
    RawModeActive,
    SignalRegistrationFailed,
    TerminalError,
    TerminalRestoreFailed,
)
from termkit.core.geometry import TerminalSize, query_terminal_size
from termkit.core.guard import GuardConfig, install_interrupt_guard
from termkit.core.layout import center_line, center_text, center_text_block
from termkit.core.raw import RawModeController, getch, raw_mode, read_raw_byte
from termkit.terminal import Terminal

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Styles
    "Style",
    "ForegroundColor",
    "BackgroundColor",
    "Bold",
    "Underline",
    "Reset",
    "ColorRole",
    "Direction",
    "color_sequence",
    "rgb_fg",
    "rgb_bg",
    "bold",
    "underline",
    "styled",
    "strip_ansi",
    "visible_len",
    "DEFAULT_STYLE",
    "NORMAL_SCREEN",
    # Cursor and screen
    "move_cursor",
    "set_cursor",
    "save_cursor",
    "restore_cursor",
    "clear_line",
    "clear_screen_and_history",
    "hide_cursor",
    "show_cursor",
    "set_title",
    "Terminal",
    # Raw input
    "RawModeController",
    "read_raw_byte",
    "getch",
    "raw_mode",
    # Geometry and layout
    "TerminalSize",
    "query_terminal_size",
    "center_line",
    "center_text",
    "center_text_block",
    # Interrupt handling
    "GuardConfig",
    "install_interrupt_guard",
    # Errors
    "TerminalError",
    "GeometryUnavailable",
    "TerminalRestoreFailed",
    "SignalRegistrationFailed",
    "RawModeActive",
]
