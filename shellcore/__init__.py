#!/usr/bin/env python3
# shellcore/__init__.py
from __future__ import annotations
"""
Core package for the portfolio shell.

Avoid eager imports that trigger package initialization cascades: let
'shellcore.commands', 'shellcore.interface' and 'shellcore.boot' expose their
APIs via their own __init__.py files.
"""

__version__ = "1.0.0"
