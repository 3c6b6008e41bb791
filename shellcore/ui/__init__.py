#!/usr/bin/env python3
# shellcore/ui/__init__.py
from __future__ import annotations
# Re-export convenient top-level API
from .utils import (
    ANSI,
    CARRIAGE_RETURN,
    CLEAR_SCREEN,
    CRLF,
    ERASE_BACK,
    ERASE_LINE,
    colorize,
    sgr,
    strip_ansi,
    print_line,
    set_terminal_title,
)
from .static import (
    init_logger,
    ColorizingStreamHandler,
    PlainFormatter,
)
from .renderer import Renderer, TerminalRenderer

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
    "init_logger",
    "ColorizingStreamHandler",
    "PlainFormatter",
    "Renderer",
    "TerminalRenderer",
]
