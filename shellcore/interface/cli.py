#!/usr/bin/env python3
# shellcore/interface/cli.py
from __future__ import annotations

"""
Interactive terminal frontend.

prompt_toolkit reads the keyboard in raw mode and parses escape sequences
into KeyPress objects; `translate_key_press` maps those onto the engine's
KeyEvent vocabulary. `TerminalHost` owns the asyncio loop, the surface and
the current Session, and replaces the Session whenever it restarts.
"""

import asyncio
import logging
from typing import Optional

from prompt_toolkit.input import Input, create_input
from prompt_toolkit.key_binding.key_processor import KeyPress
from prompt_toolkit.keys import Keys
from prompt_toolkit.output import Output, create_output

from shellcore.commands import CommandRegistry
from shellcore.interface.handler import Session
from shellcore.interface.keys import Key, KeyEvent
from shellcore.ui import TerminalRenderer, set_terminal_title

logger = logging.getLogger("shellcore.cli")

# prompt_toolkit key -> logical key. Enter/Tab/Backspace are aliases of
# ControlM/ControlI/ControlH; DEL (0x7f) is parsed as ControlH too.
_KEY_MAP: dict[Keys, KeyEvent] = {
    Keys.ControlM: KeyEvent(Key.COMMIT),
    Keys.ControlJ: KeyEvent(Key.COMMIT),
    Keys.ControlH: KeyEvent(Key.ERASE),
    Keys.Up: KeyEvent(Key.RECALL_PREVIOUS),
    Keys.Down: KeyEvent(Key.RECALL_NEXT),
    Keys.ControlI: KeyEvent(Key.COMPLETION),
    Keys.ControlC: KeyEvent(Key.INTERRUPT, ctrl=True),
    Keys.ControlL: KeyEvent(Key.CLEAR_SCREEN, ctrl=True),
}

# Closing the surface (host level, never routed to a session)
DISCONNECT_KEYS = frozenset({Keys.ControlD})


def _translate_paste(data: str) -> list[KeyEvent]:
    events: list[KeyEvent] = []
    for ch in data.replace("\r\n", "\n"):
        if ch in "\r\n":
            events.append(KeyEvent(Key.COMMIT))
        else:
            events.append(KeyEvent.char_key(ch))
    return events


def translate_key_press(press: KeyPress) -> list[KeyEvent]:
    """Map one prompt_toolkit KeyPress to zero or more KeyEvents."""
    key = press.key
    if key == Keys.BracketedPaste:
        return _translate_paste(press.data)
    if isinstance(key, Keys):
        mapped = _KEY_MAP.get(key)
        if mapped is not None:
            return [mapped]
        # Arrows, function keys, other control chords: no printable payload
        return [KeyEvent(Key.OTHER, ctrl=key.value.startswith("c-"))]
    return [KeyEvent.char_key(key)]


def translate_key_presses(presses: list[KeyPress]) -> list[KeyEvent]:
    """
    Map a batch of KeyPresses, folding Alt chords.

    The terminal sends Alt+x as ESC followed by x; prompt_toolkit parses that
    into an Escape press and a character press, which become one alt event.
    """
    events: list[KeyEvent] = []
    pending_escape = False
    for press in presses:
        if pending_escape:
            pending_escape = False
            if not isinstance(press.key, Keys):
                events.append(KeyEvent(Key.OTHER, press.key, alt=True))
                continue
            events.append(KeyEvent(Key.OTHER))
        if press.key == Keys.Escape:
            pending_escape = True
            continue
        events.extend(translate_key_press(press))
    if pending_escape:
        events.append(KeyEvent(Key.OTHER))
    return events


class TerminalHost:
    """
    Runs sessions on the local terminal.

    Ctrl-D (or input EOF) disconnects the surface: the current session is
    closed, cancelling any pending restart, and `run` returns.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        *,
        user: str = "ash",
        host: str = "portfolio",
        history_limit: Optional[int] = 1000,
        restart_delay: float = 1.0,
        enable_completion: bool = True,
        show_banner: bool = True,
        input: Optional[Input] = None,
        output: Optional[Output] = None,
    ) -> None:
        self.registry = registry
        self.user = user
        self.host = host
        self.history_limit = history_limit
        self.restart_delay = restart_delay
        self.enable_completion = enable_completion
        self.show_banner = show_banner
        self._input = input
        self._output = output
        self._renderer: Optional[TerminalRenderer] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._done: Optional[asyncio.Event] = None
        self.session: Optional[Session] = None
        self.sessions_started = 0

    def run(self) -> None:
        asyncio.run(self._main())

    async def _main(self) -> None:
        self._loop = asyncio.get_running_loop()
        self._done = asyncio.Event()
        terminal_input = self._input or create_input()
        output = self._output or create_output()
        self._renderer = TerminalRenderer(output)
        set_terminal_title(f"{self.user}@{self.host}")

        # Pastes arrive as one BracketedPaste press instead of loose keys
        output.enable_bracketed_paste()
        output.flush()
        try:
            with terminal_input.raw_mode(), terminal_input.attach(lambda: self._on_input(terminal_input)):
                self._start_session()
                await self._done.wait()
        finally:
            output.disable_bracketed_paste()
            output.flush()

        if self.session is not None:
            self.session.close()
        self._renderer.write_line()

    def new_session(self) -> Session:
        assert self._loop is not None and self._renderer is not None
        return Session(
            self.registry,
            self._renderer,
            self._loop,
            user=self.user,
            host=self.host,
            history_limit=self.history_limit,
            restart_delay=self.restart_delay,
            enable_completion=self.enable_completion,
            on_restart=self._on_restart,
        )

    def _start_session(self) -> None:
        self.session = self.new_session()
        self.sessions_started += 1
        logger.debug("session #%d started", self.sessions_started)
        self.session.start(banner=self.show_banner)

    def _on_restart(self, old: Session) -> None:
        # Equivalent of reloading the page: wipe the surface, fresh state.
        assert self._renderer is not None
        self._renderer.clear_all()
        self._start_session()

    def _on_input(self, terminal_input: Input) -> None:
        assert self._done is not None
        presses: list[KeyPress] = []
        disconnect = False
        for press in terminal_input.read_keys():
            if press.key in DISCONNECT_KEYS:
                disconnect = True
                break
            presses.append(press)
        for event in translate_key_presses(presses):
            # A restart swaps the session mid-batch
            if self.session is not None:
                self.session.handle_key(event)
        if disconnect or terminal_input.closed:
            self._done.set()
