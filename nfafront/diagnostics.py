# nfafront/diagnostics.py
"""Source locations for lexer and parser messages."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    line: int      # 1-based
    col: int       # 1-based
    snippet: str   # the source line, then a caret under `col`


def locate(src: str, pos: int) -> Location:
    """Line, column and caret snippet for offset `pos` (may equal len(src))."""
    head = src[:pos]
    line_start = head.rfind("\n") + 1
    line_end = src.find("\n", pos)
    if line_end < 0:
        line_end = len(src)
    col = pos - line_start + 1
    snippet = src[line_start:line_end] + "\n" + " " * (col - 1) + "^"
    return Location(head.count("\n") + 1, col, snippet)
