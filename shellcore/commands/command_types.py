#!/usr/bin/env python3
# shellcore/commands/command_types.py
from __future__ import annotations

"""
Command data structures and protocols.

This module defines:
- CommandCallback: the callable protocol for any command implementation.
- Command: a registered command with metadata and a callable.
- RegistryFrozenError: raised when registering into a frozen registry.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:  # pragma: no cover
    from shellcore.interface.handler import Session


class CommandCallback(Protocol):
    """
    Protocol for any command function.

    A callback receives the owning session and the raw argument tokens. It
    writes its own output and must end by calling ``session.prompt()`` or
    ``session.schedule_restart(...)``.
    """

    def __call__(self, session: Session, *args: str) -> None:  # pragma: no cover - signature only
        ...


class RegistryFrozenError(RuntimeError):
    """Raised when a command is registered after the registry was frozen."""


@dataclass(slots=True)
class Command:
    """
    A registered command with metadata and a callable to execute.

    Important fields:
        name: Primary unique command name (case-sensitive).
        description: Short, user-facing description.
        example: Usage column shown by `help` (defaults to the name).
        callback: Function implementing the command.
        module: Python module path where the command is defined.
        category: Logical group for help menu organization.
        hidden: Registered and completable, but left out of the help listing.
    """

    name: str
    description: str
    example: str
    callback: CommandCallback
    module: str = field(default="", repr=False)
    category: str = "general"
    hidden: bool = False

    @property
    def usage(self) -> str:
        return self.example or self.name

    def invoke(self, session: Session, args: list[str]) -> None:
        """Execute the underlying command callback with provided arguments."""
        self.callback(session, *args)
