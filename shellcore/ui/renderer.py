#!/usr/bin/env python3
# shellcore/ui/renderer.py
from __future__ import annotations

"""
Rendering surface used by a shell session.

The engine only ever talks to the `Renderer` protocol. `TerminalRenderer`
is the production surface: it forwards writes verbatim to a prompt_toolkit
`Output` (stdout in raw mode), so escape sequences reach the terminal intact.
"""

from typing import Protocol, runtime_checkable

from prompt_toolkit.output import Output, create_output

from .utils import CARRIAGE_RETURN, CLEAR_SCREEN, CRLF, ERASE_LINE


@runtime_checkable
class Renderer(Protocol):
    """Narrow write-only surface consumed by the engine."""

    columns: int

    def write(self, text: str) -> None: ...

    def write_line(self, text: str = "") -> None: ...

    def clear_all(self) -> None: ...

    def erase_current_line(self) -> None: ...


class TerminalRenderer:
    """Renderer backed by a prompt_toolkit Output."""

    def __init__(self, output: Output | None = None) -> None:
        self._output = output or create_output()

    @property
    def columns(self) -> int:
        try:
            return self._output.get_size().columns
        except OSError:
            # Not a terminal (pipe, closed descriptor)
            return 80

    def write(self, text: str) -> None:
        if not text:
            return
        self._output.write_raw(text)
        self._output.flush()

    def write_line(self, text: str = "") -> None:
        # Raw mode: a bare LF would not return the carriage.
        self.write(f"{text}{CRLF}")

    def clear_all(self) -> None:
        self.write(CLEAR_SCREEN)

    def erase_current_line(self) -> None:
        self.write(f"{CARRIAGE_RETURN}{ERASE_LINE}")
