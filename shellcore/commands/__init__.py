#!/usr/bin/env python3
# shellcore/commands/__init__.py
from __future__ import annotations

"""
Package for command management and registration.

Provides:
- Data structures and protocols (`Command`, `CommandCallback`).
- Ordered, freezable registry and decorators (`REGISTRY`, `command`, `register_command`).

This package re-exports public APIs from:
- command_types.py
- commands.py
"""


# Re-export from submodules
from .command_types import Command, CommandCallback, RegistryFrozenError
from .commands import REGISTRY, CommandRegistry, command, register_command

__all__ = [
    "Command",
    "CommandCallback",
    "CommandRegistry",
    "RegistryFrozenError",
    "REGISTRY",
    "command",
    "register_command",
]
