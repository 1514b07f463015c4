"""Interrupt guard: put the terminal back before the process dies.

The handler is kept to what is safe with minimal assumptions about program
state: an attribute restore when the backend allows it, an unbuffered
``os.write`` of the reset sequences, and ``os._exit``. Buffered
streams, logging and exceptions are never touched from the handler.

Restoring the exact saved attributes is best-effort. When the backend does
not allow it from a signal handler, only the reset sequences are emitted.
"""

from __future__ import annotations

import logging
import os
import signal
from dataclasses import dataclass, field
from types import FrameType
from typing import Any, Optional

from termkit.core.backend import TerminalBackend, default_backend
from termkit.core.constants import (
    DEFAULT_STYLE,
    INTERRUPT_EXIT_STATUS,
    NORMAL_SCREEN,
    STDOUT_FILENO,
    interrupt_signals,
)
from termkit.core.errors import SignalRegistrationFailed
from termkit.core.state import terminal_state

logger = logging.getLogger(__name__)

RESET_BYTES = f"{DEFAULT_STYLE}{NORMAL_SCREEN}\n".encode("ascii")


@dataclass(frozen=True)
class GuardConfig:
    """Which signals to guard and how to leave."""
    signals: tuple[signal.Signals, ...] = field(default_factory=interrupt_signals)
    exit_status: int = INTERRUPT_EXIT_STATUS
    output_fd: int = STDOUT_FILENO


class InterruptGuard:
    """Signal handler that resets the terminal and terminates."""

    def __init__(self, config: GuardConfig, backend: TerminalBackend) -> None:
        self.config = config
        self.backend = backend
        self._previous: dict[int, Any] = {}

    def install(self) -> None:
        """
        Register the handler for every configured signal.

        Raises:
            SignalRegistrationFailed: If any registration is refused; handlers
                registered so far are put back first
        """
        for sig in self.config.signals:
            try:
                self._previous[sig] = signal.signal(sig, self.handle)
            except (OSError, ValueError) as exc:
                self.uninstall()
                raise SignalRegistrationFailed(
                    f"cannot register handler for {signal.Signals(sig).name}: {exc}"
                ) from exc
        logger.debug(
            "interrupt guard installed for %s",
            ", ".join(signal.Signals(sig).name for sig in self.config.signals),
        )

    def uninstall(self) -> None:
        """Put back whatever handlers were registered before."""
        for sig, previous in self._previous.items():
            signal.signal(sig, previous)
        self._previous.clear()

    def handle(self, signum: int, frame: Optional[FrameType]) -> None:
        # Output processing must be back on before the trailing newline
        self._restore_attributes()
        try:
            os.write(self.config.output_fd, RESET_BYTES)
        except OSError:
            pass
        os._exit(self.config.exit_status)

    def _restore_attributes(self) -> None:
        if not self.backend.restore_is_signal_safe:
            return
        state = terminal_state()
        if not state.raw_active or state.fd is None:
            return
        try:
            self.backend.set_attributes(state.fd, state.saved)
        except OSError:
            pass


_guard: Optional[InterruptGuard] = None


def install_interrupt_guard(
    config: Optional[GuardConfig] = None,
    backend: Optional[TerminalBackend] = None,
) -> InterruptGuard:
    """
    Install the process-wide interrupt guard.

    Idempotent: later calls return the guard installed by the first one and
    register nothing.

    Raises:
        SignalRegistrationFailed: If the platform refuses the handler, e.g.
            when called outside the main thread
    """
    global _guard
    if _guard is not None:
        logger.debug("interrupt guard already installed")
        return _guard

    guard = InterruptGuard(config or GuardConfig(), backend or default_backend())
    guard.install()
    _guard = guard
    return guard
