#!/usr/bin/env python3
# shellcore/__main__.py
from __future__ import annotations

"""Command line entry point: `python -m shellcore` / `portfolio-shell`."""

import argparse
from typing import Any, Optional, Sequence

from shellcore import __version__
from shellcore.boot import boot_sequence
from shellcore.interface import TerminalHost


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="portfolio-shell",
        description="Simulated Linux shell for an interactive portfolio.",
    )
    parser.add_argument("--user", help="user name shown in the prompt")
    parser.add_argument("--host", help="host name shown in the prompt")
    parser.add_argument("--no-banner", action="store_true", help="skip the welcome banner")
    parser.add_argument("--verbose-boot", action="store_true", help="print boot steps")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)

    overrides: dict[str, Any] = {}
    if args.user:
        overrides["session_user"] = args.user
    if args.host:
        overrides["session_host"] = args.host
    if args.no_banner:
        overrides["show_banner"] = False

    state = boot_sequence(verbose=args.verbose_boot, overrides=overrides)
    config = state.config
    TerminalHost(
        state.registry,
        user=config.session_user,
        host=config.session_host,
        history_limit=config.history_limit,
        restart_delay=config.restart_delay,
        enable_completion=config.enable_completion,
        show_banner=config.show_banner,
    ).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
