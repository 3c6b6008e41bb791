#!/usr/bin/env python3
# shellcore/ui/utils/__init__.py
from __future__ import annotations
from .ansi import (
    ANSI,
    CARRIAGE_RETURN,
    CLEAR_SCREEN,
    CRLF,
    ERASE_BACK,
    ERASE_LINE,
    colorize,
    sgr,
    strip_ansi,
)
from .console import print_line, set_terminal_title

__all__ = [
    "ANSI",
    "CARRIAGE_RETURN",
    "CLEAR_SCREEN",
    "CRLF",
    "ERASE_BACK",
    "ERASE_LINE",
    "colorize",
    "sgr",
    "strip_ansi",
    "print_line",
    "set_terminal_title",
]
