"""ANSI/VT escape sequence construction.

Everything here is pure string building. Styling helpers wrap the text they
are given and always close what they open, so output that follows is never
affected. Positioning helpers return bare sequences; the ``Terminal`` facade
writes them out.

Sequence references:
- https://invisible-island.net/xterm/ctlseqs/ctlseqs.html
- https://learn.microsoft.com/en-us/windows/console/console-virtual-terminal-sequences
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from termkit.core.constants import BEL, CSI, DEFAULT_STYLE, OSC


class ColorRole(Enum):
    """Which layer a 24-bit color applies to."""
    FOREGROUND = "fg"
    BACKGROUND = "bg"

    @property
    def set_code(self) -> str:
        return "38" if self is ColorRole.FOREGROUND else "48"

    @property
    def reset_code(self) -> str:
        return "39" if self is ColorRole.FOREGROUND else "49"


class Direction(Enum):
    """Cursor movement direction and its CSI final byte."""
    UP = "A"
    DOWN = "B"
    RIGHT = "C"
    LEFT = "D"


class Style(ABC):
    """A styling request that can wrap inline text."""

    @property
    @abstractmethod
    def opener(self) -> str:
        """Sequence emitted before the wrapped text."""

    @property
    @abstractmethod
    def closer(self) -> str:
        """Sequence emitted after the wrapped text."""

    @property
    def overhead(self) -> int:
        """Number of non-printing characters this style injects."""
        return len(self.opener) + len(self.closer)

    def wrap(self, text: str, pad: bool = False) -> str:
        """Wrap text, optionally left-padded by the style's overhead."""
        padding = " " * self.overhead if pad else ""
        return f"{padding}{self.opener}{text}{self.closer}"


def _check_channel(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} channel must be an int, got {value!r}")
    if not 0 <= value <= 255:
        raise ValueError(f"{name} channel must be 0-255, got {value}")


@dataclass(frozen=True)
class _RGBColor(Style):
    r: int
    g: int
    b: int

    role = ColorRole.FOREGROUND

    def __post_init__(self) -> None:
        _check_channel("red", self.r)
        _check_channel("green", self.g)
        _check_channel("blue", self.b)

    @property
    def opener(self) -> str:
        return f"{CSI}{self.role.set_code};2;{self.r};{self.g};{self.b}m"

    @property
    def closer(self) -> str:
        return f"{CSI}{self.role.reset_code}m"


@dataclass(frozen=True)
class ForegroundColor(_RGBColor):
    """24-bit text color."""
    role = ColorRole.FOREGROUND


@dataclass(frozen=True)
class BackgroundColor(_RGBColor):
    """24-bit background color."""
    role = ColorRole.BACKGROUND


@dataclass(frozen=True)
class Bold(Style):
    """Increased intensity, closed with 'normal intensity'."""

    @property
    def opener(self) -> str:
        return f"{CSI}1m"

    @property
    def closer(self) -> str:
        return f"{CSI}22m"


@dataclass(frozen=True)
class Underline(Style):
    """Single underline."""

    @property
    def opener(self) -> str:
        return f"{CSI}4m"

    @property
    def closer(self) -> str:
        return f"{CSI}24m"


@dataclass(frozen=True)
class Reset(Style):
    """Reset every attribute. Has nothing to close."""

    @property
    def opener(self) -> str:
        return DEFAULT_STYLE

    @property
    def closer(self) -> str:
        return ""


# Styling

def color_sequence(
    text: str,
    role: ColorRole,
    r: int,
    g: int,
    b: int,
    pad: bool = False,
) -> str:
    """
    Wrap text in a 24-bit color for the given role.

    The opener is closed by the reset code of the same role, so a foreground
    color never clears a background and vice versa.

    Args:
        text: Text to color
        role: Foreground or background
        r, g, b: Channel intensities (0-255)
        pad: Prefix with one space per non-printing character, for callers
             that align on raw string length

    Raises:
        ValueError: If a channel is outside 0-255
    """
    style = ForegroundColor(r, g, b) if role is ColorRole.FOREGROUND else BackgroundColor(r, g, b)
    return style.wrap(text, pad)


def rgb_fg(text: str, r: int, g: int, b: int, pad: bool = False) -> str:
    """Color the foreground of text."""
    return color_sequence(text, ColorRole.FOREGROUND, r, g, b, pad)


def rgb_bg(text: str, r: int, g: int, b: int, pad: bool = False) -> str:
    """Color the background of text."""
    return color_sequence(text, ColorRole.BACKGROUND, r, g, b, pad)


def bold(text: str, pad: bool = False) -> str:
    """Make the text look thick."""
    return Bold().wrap(text, pad)


def underline(text: str, pad: bool = False) -> str:
    """Draw a line under the text."""
    return Underline().wrap(text, pad)


def styled(text: str, *styles: Style, pad: bool = False) -> str:
    """
    Wrap text in several styles, first style outermost.

    Padding, when requested, covers the combined overhead of all styles and
    is placed once in front of the result.
    """
    result = text
    for style in reversed(styles):
        result = style.wrap(result)
    if pad:
        result = " " * sum(style.overhead for style in styles) + result
    return result


# Cursor and screen

def move_cursor(direction: Direction, count: int = 1) -> str:
    """Move the cursor count cells in a direction."""
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    return f"{CSI}{count}{direction.value}"


def set_cursor(line: int, column: int) -> str:
    """Put the cursor at (line, column); 1,1 is the top left corner."""
    return f"{CSI}{line};{column}f"


def save_cursor() -> str:
    return f"{CSI}s"


def restore_cursor() -> str:
    return f"{CSI}u"


def clear_line() -> str:
    """Erase the whole current line."""
    return f"{CSI}2K"


def clear_screen_and_history() -> str:
    """Erase the screen and the scrollback, then home the cursor."""
    return f"{CSI}2J{CSI}3J" + set_cursor(1, 1)


def hide_cursor() -> str:
    return f"{CSI}?25l"


def show_cursor() -> str:
    return f"{CSI}?25h"


def set_title(title: str) -> str:
    """Set the window title."""
    return f"{OSC}2;{title}{BEL}"
