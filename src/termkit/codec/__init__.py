"""Escape sequence construction and measurement."""

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

__all__ = [
    # Styles
    "Style",
    "ForegroundColor",
    "BackgroundColor",
    "Bold",
    "Underline",
    "Reset",
    "ColorRole",
    "Direction",
    # Wrapping
    "color_sequence",
    "rgb_fg",
    "rgb_bg",
    "bold",
    "underline",
    "styled",
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
    # Measuring
    "strip_ansi",
    "visible_len",
]
