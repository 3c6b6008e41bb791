#!/usr/bin/env python3
# shellcore/ui/utils/console.py
from __future__ import annotations

import sys


def print_line(text: str = "", *, file=None, flush: bool = False) -> None:
    """Single-line print used by boot/config status output (outside raw mode)."""
    file = file or sys.stdout
    file.write(f"{text}\n")
    if flush:
        file.flush()


def set_terminal_title(title_text: str, *, file=None) -> None:
    """Set the terminal window title via OSC 2."""
    file = file or sys.stdout
    file.write(f"\x1b]2;{title_text}\x07")
    file.flush()
