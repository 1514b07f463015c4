"""ANSI text utilities - measuring strings that carry escape codes."""

from __future__ import annotations

import re

# CSI sequences (including ~ terminator for F-keys, ? private modes) and
# BEL-terminated OSC sequences such as window titles
_ANSI_ESCAPE = re.compile(r'\x1b\[[0-9;?]*[A-Za-z~]|\x1b\][^\x07]*\x07')


def strip_ansi(s: str) -> str:
    """Remove escape sequences, keeping only printable text."""
    return _ANSI_ESCAPE.sub('', s)


def visible_len(s: str) -> int:
    """Get visible length of string (excluding ANSI escape codes)."""
    return len(strip_ansi(s))
