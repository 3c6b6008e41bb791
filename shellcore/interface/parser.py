#!/usr/bin/env python3
# shellcore/interface/parser.py
from __future__ import annotations

"""
Command line splitting.

Lines are split on single spaces, not shell-style: there is no quoting, and
consecutive spaces produce empty arguments so `echo` reproduces the spacing
it was given.
"""


def split_command(line: str) -> tuple[str, list[str]]:
    """
    Split a committed (already trimmed) line into (command, args).

    The command name is lower-cased; arguments are passed through untouched.
    """
    first, *rest = line.split(" ")
    return first.lower(), rest
