"""Shared constants for terminal control."""

import signal

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
OSC = f"{ESC}]"
BEL = "\x07"

# Reset all SGR attributes (colors and text effects)
DEFAULT_STYLE = f"{CSI}0m"

# Leave the alternate screen buffer
NORMAL_SCREEN = f"{CSI}?47l"

# Exit status used by the interrupt guard
INTERRUPT_EXIT_STATUS = 0

# Exit status when the terminal could not be put back in its saved mode
RESTORE_FAILED_EXIT_STATUS = 70

# Signals that request termination; missing ones are skipped per platform
INTERRUPT_SIGNAL_NAMES: tuple[str, ...] = ("SIGINT", "SIGTERM", "SIGHUP")


def interrupt_signals() -> tuple[signal.Signals, ...]:
    """Termination-requesting signals available on this platform."""
    return tuple(
        getattr(signal, name)
        for name in INTERRUPT_SIGNAL_NAMES
        if hasattr(signal, name)
    )

# Standard file descriptors
STDIN_FILENO = 0
STDOUT_FILENO = 1
