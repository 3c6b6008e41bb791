#!/usr/bin/env python3
# shellcore/interface/loader.py
from __future__ import annotations

"""
Dynamic command loader.

Features:
- Imports the subpackages of a plugin package (default: 'plugins').
- Honors the package's LOAD_ORDER so registry enumeration order is fixed;
  remaining subpackages follow alphabetically.
- Imports 'entrypoint.py' inside a subpackage when present.
- Derives categories from module paths if not explicitly set.
- Collects category descriptions from either CATEGORY_DESCRIPTION or module docstring.
"""

import importlib
import importlib.util
import pkgutil
from types import ModuleType

from shellcore.commands import REGISTRY, CommandRegistry


def _ordered_modules(package: ModuleType, base_paths: list[str]) -> list[pkgutil.ModuleInfo]:
    """Public modules of the package, LOAD_ORDER first, then by name."""
    found = {
        info.name: info
        for base_path in base_paths
        for info in pkgutil.iter_modules([base_path])
        if not info.name.startswith("_")
    }
    preferred = [name for name in getattr(package, "LOAD_ORDER", ()) if name in found]
    rest = sorted(name for name in found if name not in preferred)
    return [found[name] for name in (*preferred, *rest)]


def load_commands(commands_package: str = "plugins") -> int:
    """
    Import all modules under the given package (e.g., 'plugins').

    Supported layouts:
      1) Plain modules: plugins/foo.py  -> import plugins.foo
      2) Packages with an entrypoint: plugins/bar/entrypoint.py
         -> import plugins.bar.entrypoint

    Decorated commands land in REGISTRY as their modules are imported.
    Importing is idempotent: modules already imported are not re-registered.
    Returns the number of modules visited.
    """

    registry = REGISTRY
    package = importlib.import_module(commands_package)
    package_paths = [str(p) for p in getattr(package, "__path__", [])]

    if not package_paths:
        raise RuntimeError(
            f"'{commands_package}' must be a package (folder) with modules.")

    loaded_count = 0
    discovered_subpackages: list[str] = []

    for modinfo in _ordered_modules(package, package_paths):
        module_name = modinfo.name
        if modinfo.ispkg:
            discovered_subpackages.append(module_name)
            entry_name = f"{commands_package}.{module_name}.entrypoint"
            if importlib.util.find_spec(entry_name) is not None:
                importlib.import_module(entry_name)
            else:
                importlib.import_module(f"{commands_package}.{module_name}")
        else:
            importlib.import_module(f"{commands_package}.{module_name}")
        loaded_count += 1

    _assign_categories_from_modules(commands_package, registry)
    _collect_category_descriptions(commands_package, discovered_subpackages, registry)
    return loaded_count


def _assign_categories_from_modules(commands_package: str, registry: CommandRegistry) -> None:
    """
    Derive category from first subpackage segment (e.g. 'system.entrypoint')
    if not explicitly set (default 'general').
    """
    prefix = f"{commands_package}."
    for command_obj in registry.all():
        if command_obj.category != "general" or not command_obj.module.startswith(prefix):
            continue
        segments = command_obj.module[len(prefix):].split(".")
        if len(segments) >= 2:
            command_obj.category = segments[0]


def _collect_category_descriptions(
    commands_package: str, subpackages: list[str], registry: CommandRegistry
) -> None:
    """
    Category description is taken from:
      1) plugins.<category>.CATEGORY_DESCRIPTION (string), or
      2) plugins.<category> module docstring (__doc__), else "".
    """
    for category in subpackages:
        module = importlib.import_module(f"{commands_package}.{category}")

        description_text = ""
        value = getattr(module, "CATEGORY_DESCRIPTION", None)
        if isinstance(value, str):
            description_text = value
        elif isinstance(module.__doc__, str):
            description_text = module.__doc__

        registry.set_category_description(category, description_text)
