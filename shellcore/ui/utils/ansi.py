#!/usr/bin/env python3
# shellcore/ui/utils/ansi.py
from __future__ import annotations

import re

# ---- Core SGR maps ----------------------------------------------------------

# Standard 8 colors + bright variants.
# Foreground: 30-37, Bright Foreground: 90-97
ANSI = {
    # reset
    "reset": "\x1b[0m",

    # styles
    "bold": "\x1b[1m",
    "dim": "\x1b[2m",
    "underline": "\x1b[4m",

    # fg 8-color
    "black": "\x1b[30m",
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "magenta": "\x1b[35m",
    "cyan": "\x1b[36m",
    "white": "\x1b[37m",

    # fg bright 8-color
    "bright_black": "\x1b[90m",
}

# Line / screen control (CSI)
CARRIAGE_RETURN = "\r"
ERASE_LINE = "\x1b[K"            # erase from cursor to end of line
ERASE_BACK = "\b \b"             # move left, blank the cell, move left
CLEAR_SCREEN = "\x1b[2J\x1b[3J\x1b[H"  # visible area, scrollback, home
CRLF = "\r\n"

# Useful compiled regex
ANSI_REGEX = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")


# ---- Utilities --------------------------------------------------------------

def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from text."""
    return ANSI_REGEX.sub("", text)


def sgr(*codes: int) -> str:
    """
    Build one combined SGR sequence, e.g. sgr(1, 32) -> '\\x1b[1;32m'.

    Unlike `colorize`, this keeps several attributes in a single escape so
    the emitted bytes match the classic bash-style prompt exactly.
    """
    return f"\x1b[{';'.join(str(c) for c in codes)}m"


# ---- High-level helpers -----------------------------------------------------


def colorize(text: str, *styles: str) -> str:
    """
    Wrap text with one or more SGR styles/keys from ANSI (e.g., 'red', 'bold').
    Always auto-resets at the end.
    """
    seq = "".join(ANSI[s] for s in styles if s in ANSI)
    return f"{seq}{text}{ANSI['reset']}" if seq else text
