#!/usr/bin/env python3
# shellcore/boot/boot.py
from __future__ import annotations
"""
Boot sequence for the portfolio shell.

Steps run in order and, when verbose, report Linux-style [  OK  ] / [FAILED]
lines. The command registry is frozen at the end so every session sees the
same closed, ordered set of commands.
"""

import importlib
import logging
import platform
from dataclasses import dataclass, replace
from typing import Any, Callable, Optional

from shellcore.commands import REGISTRY, CommandRegistry
from shellcore.config import AppConfig, load_config_or_default
from shellcore.interface.loader import load_commands
from shellcore.ui import colorize, init_logger, print_line


@dataclass(slots=True)
class BootState:
    config: AppConfig
    logger: logging.Logger
    registry: CommandRegistry
    loaded_count: int


def _step(label: str, fn: Callable[[], Any], *, verbose: bool) -> Any:
    """Run a boot step with status output."""
    try:
        out = fn()
    except Exception as exc:
        if verbose:
            print_line(
                colorize(f"[FAILED] {label} ({type(exc).__name__}: {exc})", "red")
            )
        raise
    if verbose:
        print_line(colorize(f"[  OK  ] {label}", "green"))
    return out


def boot_sequence(
    *,
    verbose: bool = False,
    overrides: Optional[dict[str, Any]] = None,
) -> BootState:
    """
    Load configuration, logging and commands.

    `overrides` replaces AppConfig fields after loading (CLI flags win over
    files and environment).
    """
    _step(
        f"Detect environment: {platform.system()} {platform.release()} / Python {platform.python_version()}",
        lambda: None,
        verbose=verbose,
    )

    # ---------- config ----------
    config = _step("Load configuration", load_config_or_default, verbose=verbose)
    if overrides:
        config = replace(config, **overrides)

    # ---------- logging ----------
    level = getattr(logging, config.log_level) if config.log_level else logging.WARNING
    logger = _step(
        "Initialize logger",
        lambda: init_logger(
            "shellcore",
            level=level,
            logfile=str(config.log_file_path) if config.log_file_path else None,
        ),
        verbose=verbose,
    )

    # ---------- commands ----------
    pkg_name = config.plugin_package
    _step(f"Locate commands package '{pkg_name}'",
          lambda: importlib.import_module(pkg_name), verbose=verbose)
    _step("Load command definitions", lambda: load_commands(pkg_name), verbose=verbose)
    loaded_count = len(REGISTRY)
    _step(f"Freeze command registry ({loaded_count} commands)", REGISTRY.freeze, verbose=verbose)
    _step("Warm command names for completion", REGISTRY.names, verbose=verbose)
    _step("Boot complete", lambda: None, verbose=verbose)

    logger.debug("boot complete: %d commands from %s", loaded_count, pkg_name)
    return BootState(
        config=config,
        logger=logger,
        registry=REGISTRY,
        loaded_count=loaded_count,
    )
