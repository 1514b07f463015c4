"""Platform backends for terminal driver access.

Raw input, attribute snapshots and size queries differ between POSIX
terminals and the Windows console. Each platform gets one backend class; the
rest of the package only talks to ``TerminalBackend``.
"""

from __future__ import annotations

import os
import struct
import sys
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Any


class TerminalBackend(ABC):
    """Capability interface over the terminal driver."""

    #: Whether ``set_attributes`` may run from inside a signal handler
    restore_is_signal_safe: bool = False

    @abstractmethod
    def get_attributes(self, fd: int) -> Any:
        """Snapshot the line-discipline settings of fd."""

    @abstractmethod
    def set_attributes(self, fd: int, attributes: Any) -> None:
        """Re-apply a snapshot taken by ``get_attributes``."""

    @abstractmethod
    def set_raw(self, fd: int) -> None:
        """Switch fd to raw mode: no echo, no line buffering, no signals."""

    @abstractmethod
    def read_byte(self, fd: int) -> bytes:
        """Block until one byte is available. Empty at end of input."""

    @abstractmethod
    def terminal_size(self, fd: int) -> tuple[int, int]:
        """Return (columns, rows). Raises OSError without a terminal."""


class PosixBackend(TerminalBackend):
    """termios-based backend for Linux, macOS and the BSDs.

    Python runs signal handlers on the main thread between bytecodes, so
    ``tcsetattr`` is allowed from the interrupt guard.
    """

    restore_is_signal_safe = True

    def get_attributes(self, fd: int) -> list[Any]:
        import termios
        try:
            return termios.tcgetattr(fd)
        except termios.error as exc:
            raise OSError(*exc.args) from exc

    def set_attributes(self, fd: int, attributes: list[Any]) -> None:
        import termios
        try:
            termios.tcsetattr(fd, termios.TCSADRAIN, attributes)
        except termios.error as exc:
            raise OSError(*exc.args) from exc

    def set_raw(self, fd: int) -> None:
        import termios
        import tty
        try:
            tty.setraw(fd, termios.TCSANOW)
        except termios.error as exc:
            raise OSError(*exc.args) from exc

    def read_byte(self, fd: int) -> bytes:
        return os.read(fd, 1)

    def terminal_size(self, fd: int) -> tuple[int, int]:
        import fcntl
        import termios
        packed = fcntl.ioctl(fd, termios.TIOCGWINSZ, struct.pack("HHHH", 0, 0, 0, 0))
        rows, cols, _, _ = struct.unpack("HHHH", packed)
        return cols, rows


class WindowsBackend(TerminalBackend):
    """msvcrt-based backend for the Windows console.

    ``msvcrt.getch`` reads unechoed, unbuffered input without touching the
    console mode, so there is nothing to snapshot or restore.
    """

    restore_is_signal_safe = False

    def get_attributes(self, fd: int) -> None:
        return None

    def set_attributes(self, fd: int, attributes: None) -> None:
        pass

    def set_raw(self, fd: int) -> None:
        pass

    def read_byte(self, fd: int) -> bytes:
        import msvcrt
        return msvcrt.getch()

    def terminal_size(self, fd: int) -> tuple[int, int]:
        size = os.get_terminal_size(fd)
        return size.columns, size.lines


@lru_cache(maxsize=None)
def default_backend() -> TerminalBackend:
    """The backend for the running platform, chosen once per process."""
    if sys.platform == "win32":
        return WindowsBackend()
    return PosixBackend()
