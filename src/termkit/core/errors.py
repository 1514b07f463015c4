"""Exception types raised by terminal operations."""


class TerminalError(Exception):
    """Base class for terminal control failures."""


class GeometryUnavailable(TerminalError):
    """No controlling terminal to measure.

    Raised when output is redirected or the platform reports a zero width.
    Callers can recover by passing an explicit terminal width to the layout
    functions.
    """


class TerminalRestoreFailed(TerminalError):
    """Saved terminal attributes could not be re-applied.

    The terminal is left in an unknown, raw-like state. The raw mode
    controller escalates this to process termination.
    """


class SignalRegistrationFailed(TerminalError):
    """The platform refused to register the interrupt handler."""


class RawModeActive(TerminalError):
    """A raw read was requested while another one is still in progress."""
