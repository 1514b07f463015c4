"""Raw-mode single byte reads with guaranteed restoration.

State machine: NORMAL -> RAW -> NORMAL, never nested. The attribute snapshot
is published to the process-wide state before the terminal is switched and
before any blocking read starts, so the interrupt guard always has something
meaningful to fall back on.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import Any, Iterator, Optional

from termkit.core.backend import TerminalBackend, default_backend
from termkit.core.constants import RESTORE_FAILED_EXIT_STATUS, STDIN_FILENO
from termkit.core.errors import RawModeActive, TerminalRestoreFailed
from termkit.core.state import terminal_state

logger = logging.getLogger(__name__)


class RawModeController:
    """Puts one terminal fd in raw mode for the duration of a read."""

    def __init__(self, fd: int = STDIN_FILENO, backend: Optional[TerminalBackend] = None) -> None:
        self.fd = fd
        self.backend = backend or default_backend()

    @contextmanager
    def raw_mode(self) -> Iterator[None]:
        """
        Context manager for raw terminal mode.

        The saved attributes are re-applied on every exit path. If that fails
        the process terminates with RESTORE_FAILED_EXIT_STATUS.

        Raises:
            RawModeActive: If a raw read is already in progress
            OSError: If fd is not a terminal
        """
        state = terminal_state()
        if state.raw_active:
            raise RawModeActive(f"fd {state.fd} is already in raw mode")

        saved = self.backend.get_attributes(self.fd)
        try:
            state.enter_raw(self.fd, saved)
            logger.debug("entering raw mode on fd %d", self.fd)
            self.backend.set_raw(self.fd)
            yield
        finally:
            self._restore(saved)

    def _set_attributes(self, saved: Any) -> None:
        # tcsetattr is not retried by the interpreter after EINTR
        while True:
            try:
                self.backend.set_attributes(self.fd, saved)
                return
            except InterruptedError:
                logger.debug("attribute restore on fd %d interrupted, retrying", self.fd)

    def _restore(self, saved: Any) -> None:
        state = terminal_state()
        try:
            self._set_attributes(saved)
        except OSError as exc:
            failure = TerminalRestoreFailed(
                f"could not restore terminal attributes on fd {self.fd}: {exc}"
            )
            logger.critical("%s", failure)
            sys.stderr.write(f"termkit: {failure}\n")
            sys.stderr.flush()
            raise SystemExit(RESTORE_FAILED_EXIT_STATUS) from failure
        finally:
            state.leave_raw()
        logger.debug("restored terminal attributes on fd %d", self.fd)

    def read_byte(self) -> int:
        """
        Read one byte without echo or line buffering.

        Raises:
            EOFError: If input is closed
        """
        with self.raw_mode():
            data = self.backend.read_byte(self.fd)
        if not data:
            raise EOFError(f"end of input on fd {self.fd}")
        return data[0]


_controller: Optional[RawModeController] = None


def default_controller() -> RawModeController:
    """Controller bound to stdin, created on first use."""
    global _controller
    if _controller is None:
        _controller = RawModeController()
    return _controller


def read_raw_byte() -> int:
    """Read a single unechoed byte from stdin."""
    return default_controller().read_byte()


# Conventional name for a single unbuffered keystroke read
getch = read_raw_byte


@contextmanager
def raw_mode() -> Iterator[None]:
    """Keep stdin in raw mode for the body of a with-block."""
    with default_controller().raw_mode():
        yield
