"""Process-wide terminal state shared with the interrupt guard.

Signal handlers cannot receive arguments from the code they interrupt, so the
last attribute snapshot lives in one process-scoped object. The raw mode
controller is the only writer; the interrupt guard is the only reader. Both go
through ``terminal_state()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class ProcessTerminalState:
    """Most recent attribute snapshot and whether a raw read is in progress."""
    fd: Optional[int] = None
    saved: Any = None
    raw_active: bool = False

    def enter_raw(self, fd: int, saved: Any) -> None:
        """Record the snapshot taken just before switching fd to raw mode."""
        self.fd = fd
        self.saved = saved
        self.raw_active = True

    def leave_raw(self) -> None:
        """Mark the raw read finished. The snapshot is kept as last known good."""
        self.raw_active = False


_state: Optional[ProcessTerminalState] = None


def terminal_state() -> ProcessTerminalState:
    """Return the process-wide state, creating it on first use."""
    global _state
    if _state is None:
        _state = ProcessTerminalState()
    return _state
