"""Horizontal centering against the current terminal width.

Two policies for multi-line text:
- center_text:       every line gets its own offset (unless a visual width
                     is forced), so ragged lines each sit in the middle
- center_text_block: one offset for the whole block, taken from the first
                     line, so pre-aligned content keeps its shape

Lines break on LF or CRLF; each separator is kept as it was. Offsets
saturate at zero when the text is wider than the terminal.
"""

from __future__ import annotations

import re
from typing import Optional

from termkit.core.geometry import query_terminal_size

_LINE_BREAK = re.compile(r"(\r?\n)")


def _terminal_width(term_width: Optional[int]) -> int:
    if term_width is not None:
        return term_width
    return query_terminal_size().width


def _offset(term_width: int, effective_width: int) -> int:
    return max(0, term_width // 2 - effective_width // 2)


def _split_lines(text: str) -> tuple[list[str], list[str]]:
    """Split text into lines and the separators between them."""
    parts = _LINE_BREAK.split(text)
    return parts[0::2], parts[1::2]


def _join_lines(lines: list[str], separators: list[str]) -> str:
    result = [lines[0]]
    for separator, line in zip(separators, lines[1:]):
        result.append(separator)
        result.append(line)
    return "".join(result)


def center_line(line: str, visual_width: int = 0, *, term_width: Optional[int] = None) -> str:
    """
    Center a single line by left-padding it with spaces.

    Args:
        line: Text to center
        visual_width: Width to center on instead of len(line); useful when
                      the line contains non-printing characters. 0 = auto
        term_width: Terminal width to use instead of querying it

    Raises:
        GeometryUnavailable: If term_width is not given and there is no terminal
    """
    width = _terminal_width(term_width)
    effective = visual_width if visual_width else len(line)
    return " " * _offset(width, effective) + line


def center_text(text: str, visual_width: int = 0, *, term_width: Optional[int] = None) -> str:
    """
    Center a paragraph line by line.

    A nonzero visual_width applies to every line; otherwise each line is
    measured on its own.
    """
    width = _terminal_width(term_width)
    lines, separators = _split_lines(text)
    centered = [center_line(line, visual_width, term_width=width) for line in lines]
    return _join_lines(centered, separators)


def center_text_block(text: str, visual_width: int = 0, *, term_width: Optional[int] = None) -> str:
    """
    Center a paragraph as one block.

    Every line is shifted by the same offset, computed from visual_width or,
    when that is 0, from the length of the first line.
    """
    width = _terminal_width(term_width)
    lines, separators = _split_lines(text)
    effective = visual_width if visual_width else len(lines[0])
    padding = " " * _offset(width, effective)
    return _join_lines([padding + line for line in lines], separators)
