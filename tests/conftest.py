"""Shared fixtures: a scripted terminal backend and clean process-wide state."""

from __future__ import annotations

from typing import Any, Callable, Optional

import pytest

from termkit.core import guard as guard_module
from termkit.core import raw as raw_module
from termkit.core import state as state_module
from termkit.core.backend import TerminalBackend
from termkit.core.state import terminal_state

COOKED = ["cooked", "echo", "icanon"]
RAW = ["raw"]


class FakeBackend(TerminalBackend):
    """
    In-memory terminal driver.

    Attributes are a plain list; ``set_raw`` replaces them with ``RAW``.
    Bytes to read are queued in ``pending``; an empty queue reads as EOF.
    """

    restore_is_signal_safe = True

    def __init__(self, pending: bytes = b"", size: tuple[int, int] = (80, 24)) -> None:
        self.attributes: list[Any] = list(COOKED)
        self.pending = bytearray(pending)
        self.size = size
        self.read_calls = 0
        self.restore_calls: list[list[Any]] = []
        self.fail_restore = False
        self.fail_size: Optional[OSError] = None
        self.on_read: Optional[Callable[[], None]] = None

    def get_attributes(self, fd: int) -> list[Any]:
        return list(self.attributes)

    def set_attributes(self, fd: int, attributes: list[Any]) -> None:
        self.restore_calls.append(attributes)
        if self.fail_restore:
            raise OSError(5, "Input/output error")
        self.attributes = list(attributes)

    def set_raw(self, fd: int) -> None:
        # The snapshot must already be published before the switch
        assert terminal_state().raw_active
        self.attributes = list(RAW)

    def read_byte(self, fd: int) -> bytes:
        self.read_calls += 1
        if self.on_read is not None:
            self.on_read()
        if not self.pending:
            return b""
        return bytes([self.pending.pop(0)])

    def terminal_size(self, fd: int) -> tuple[int, int]:
        if self.fail_size is not None:
            raise self.fail_size
        return self.size


@pytest.fixture(autouse=True)
def clean_process_state(monkeypatch: pytest.MonkeyPatch):
    """Give every test fresh singletons and drop any installed guard."""
    monkeypatch.setattr(state_module, "_state", None)
    monkeypatch.setattr(raw_module, "_controller", None)
    monkeypatch.setattr(guard_module, "_guard", None)
    yield
    if guard_module._guard is not None:
        guard_module._guard.uninstall()


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()
