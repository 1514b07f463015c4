"""Terminal size queries."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from termkit.core.backend import TerminalBackend, default_backend
from termkit.core.constants import STDOUT_FILENO
from termkit.core.errors import GeometryUnavailable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    width: int
    height: int


def query_terminal_size(
    fd: int = STDOUT_FILENO,
    backend: Optional[TerminalBackend] = None,
) -> TerminalSize:
    """
    Get current terminal dimensions.

    The size is read fresh on every call since the window may have been
    resized in between.

    Raises:
        GeometryUnavailable: If fd is not a terminal or reports zero columns
    """
    backend = backend or default_backend()
    try:
        cols, rows = backend.terminal_size(fd)
    except OSError as exc:
        logger.debug("size query on fd %d failed: %s", fd, exc)
        raise GeometryUnavailable(f"fd {fd} has no terminal size: {exc}") from exc

    if cols <= 0:
        raise GeometryUnavailable(f"fd {fd} reports a terminal width of {cols}")
    return TerminalSize(width=cols, height=rows)
