#!/usr/bin/env python3
# shellcore/commands/commands.py
from __future__ import annotations

"""
Command registry and decorator utilities.

This module provides:
- CommandRegistry: ordered, freezable registry of commands.
- command: decorator to register functions as commands with metadata.
- register_command: explicit API to register pre-built Command objects.
"""

from typing import Callable, Dict, Iterable, Optional

from shellcore.commands.command_types import Command, CommandCallback, RegistryFrozenError


class CommandRegistry:
    """
    Holds all command definitions and provides lookup utilities.

    Enumeration order is registration order. Once frozen, the set of
    commands is closed and any further registration raises.
    """

    def __init__(self, commands: Iterable[Command] = ()) -> None:
        # Primary name -> Command (insertion ordered)
        self._commands_by_name: Dict[str, Command] = {}
        # Category -> description text
        self._category_descriptions: Dict[str, str] = {}
        self._frozen = False
        for command_obj in commands:
            self.register(command_obj)

    # ---------------- Registration ----------------

    def register(self, command_obj: Command) -> None:
        """Register a command, ensuring no collisions."""
        if self._frozen:
            raise RegistryFrozenError(
                f"Cannot register '{command_obj.name}': registry is frozen.")
        if command_obj.name in self._commands_by_name:
            raise ValueError(
                f"Command '{command_obj.name}' already registered.")
        self._commands_by_name[command_obj.name] = command_obj

    def freeze(self) -> "CommandRegistry":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ---------------- Lookup ----------------

    def get(self, name: str) -> Optional[Command]:
        """Return the command by exact name, or None if not found."""
        return self._commands_by_name.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._commands_by_name

    def __len__(self) -> int:
        return len(self._commands_by_name)

    def all(self) -> list[Command]:
        return list(self._commands_by_name.values())

    def names(self) -> list[str]:
        """Return all command names in registration order (used for completion)."""
        return list(self._commands_by_name.keys())

    # ---------------- Categories ----------------

    def categories(self) -> dict[str, list[Command]]:
        """Group commands by category for help output, in first-seen order."""
        grouped: dict[str, list[Command]] = {}
        for cmd in self._commands_by_name.values():
            grouped.setdefault(cmd.category, []).append(cmd)
        return grouped

    def set_category_description(self, category: str, description: str) -> None:
        """Set display text for a category in help menus."""
        self._category_descriptions[category] = description.strip()

    def get_category_description(self, category: str) -> str:
        """Return display text for a category, or an empty string."""
        return self._category_descriptions.get(category, "")


# Global registry, populated by the plugin loader and frozen at boot
REGISTRY = CommandRegistry()


def command(
    *,
    name: str | None = None,
    description: str | None = None,
    example: str | None = None,
    category: str | None = None,
    hidden: bool = False,
    registry: CommandRegistry | None = None,
) -> Callable[[CommandCallback], CommandCallback]:
    """
    Decorator to register a function as a shell command with metadata.

    - Function name is transformed from snake_case to kebab-case for `name` if not provided.
    - The docstring is used as description when none is given.
    """

    def wrapper(func: CommandCallback) -> CommandCallback:
        command_obj = Command(
            name=name or func.__name__.replace("_", "-"),
            description=(description or (func.__doc__ or "")).strip(),
            example=example or "",
            callback=func,
            category=category or "general",
            hidden=hidden,
        )
        command_obj.module = func.__module__
        (registry if registry is not None else REGISTRY).register(command_obj)
        return func

    return wrapper


def register_command(command_obj: Command, registry: CommandRegistry | None = None) -> None:
    """Explicit API for modules that construct Command objects directly."""
    (registry if registry is not None else REGISTRY).register(command_obj)
