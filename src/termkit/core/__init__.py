"""Core terminal control - raw input, geometry, layout, interrupt handling."""

from termkit.core.backend import PosixBackend, TerminalBackend, WindowsBackend, default_backend
from termkit.core.errors import (
    GeometryUnavailable,
    RawModeActive,
    SignalRegistrationFailed,
    TerminalError,
    TerminalRestoreFailed,
)
from termkit.core.geometry import TerminalSize, query_terminal_size
from termkit.core.guard import GuardConfig, InterruptGuard, install_interrupt_guard
from termkit.core.layout import center_line, center_text, center_text_block
from termkit.core.raw import RawModeController, getch, raw_mode, read_raw_byte
from termkit.core.state import ProcessTerminalState, terminal_state

__all__ = [
    "TerminalBackend",
    "PosixBackend",
    "WindowsBackend",
    "default_backend",
    "TerminalError",
    "GeometryUnavailable",
    "TerminalRestoreFailed",
    "SignalRegistrationFailed",
    "RawModeActive",
    "TerminalSize",
    "query_terminal_size",
    "GuardConfig",
    "InterruptGuard",
    "install_interrupt_guard",
    "center_line",
    "center_text",
    "center_text_block",
    "RawModeController",
    "read_raw_byte",
    "getch",
    "raw_mode",
    "ProcessTerminalState",
    "terminal_state",
]
