#!/usr/bin/env python3
# shellcore/interface/handler.py
from __future__ import annotations

"""
Key handling and command dispatch for one shell session.

A Session owns the input line, the history and the restart timer for one
connected surface. Key events are processed one at a time:

  commit          -> record + dispatch (or just re-prompt on blank input)
  erase           -> backspace
  recall-previous -> older history entry
  recall-next     -> newer history entry, then a fresh line
  completion      -> command name completion
  interrupt       -> ^C, discard the line
  clear-screen    -> wipe the surface
  other           -> printable characters are appended

Command callbacks write their own output and end by calling `prompt()`, or
by deferring it with `schedule_restart()` (exit / reboot).
"""

import logging
from enum import Enum
from typing import Any, Callable, Optional, Protocol

from shellcore.commands import CommandRegistry
from shellcore.interface.completion import CompletionKind, complete
from shellcore.interface.history import HistoryBuffer, Recall
from shellcore.interface.keys import Key, KeyEvent
from shellcore.interface.line import InputLine
from shellcore.interface.parser import split_command
from shellcore.ui import Renderer, sgr

logger = logging.getLogger("shellcore.session")

RESTART_NOTICE = "\r\nPress any key to restart..."
HELP_TIP = "TIP: Use arrow up/down keys for command history."


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Anything with asyncio's `call_later` shape (the event loop itself fits)."""

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> TimerHandle: ...


class SessionState(str, Enum):
    ACTIVE = "active"
    AWAITING_RESTART = "awaiting-restart"
    CLOSED = "closed"


class DispatchOutcome(str, Enum):
    EMPTY = "empty"
    UNKNOWN = "unknown"
    HANDLED = "handled"
    FAILED = "failed"


def format_prompt(user: str, host: str) -> str:
    """Bash-style `user@host:~$ ` prompt with bold green / bold blue segments."""
    reset = sgr(0)
    return f"{sgr(1, 32)}{user}@{host}{reset}:{sgr(1, 34)}~{reset}$ "


def format_help_listing(registry: CommandRegistry) -> list[str]:
    """Render the `help` listing grouped by category, in registry order."""
    lines = ["Available Commands", ""]
    for category, commands in registry.categories().items():
        visible = [cmd for cmd in commands if not cmd.hidden]
        if not visible:
            continue
        lines.append(f"{category.upper()}:")
        for cmd in visible:
            lines.append(f"  {cmd.usage:<22} - {cmd.description}")
        lines.append("")
    lines.append(HELP_TIP)
    return lines


def format_help_topic(registry: CommandRegistry, topic: str) -> list[str]:
    """Render `help <topic>` for a command name or a category name."""
    command_obj = registry.get(topic)
    if command_obj is not None:
        return [
            f"Name:        {command_obj.name}",
            f"Category:    {command_obj.category}",
            f"Description: {command_obj.description or '(none)'}",
            f"Usage:       {command_obj.usage}",
        ]

    commands = registry.categories().get(topic)
    if not commands:
        return [f"help: no such command or category: {topic}"]
    description = registry.get_category_description(topic)
    lines = [f"{topic.upper()}: {description}" if description else f"{topic.upper()}:"]
    lines.extend(
        f"  {cmd.usage:<22} - {cmd.description}" for cmd in commands if not cmd.hidden)
    return lines


class Session:
    """
    Line editing and command dispatch for one connected display surface.

    Args:
        registry: Frozen command registry shared by all sessions.
        renderer: Output surface.
        scheduler: Provides `call_later`; used for exit / reboot only.
        user, host: Shown in the prompt and by informational commands.
        history_limit: Max remembered lines (None/0 for unbounded).
        restart_delay: Seconds before exit / reboot take effect.
        enable_completion: When False the completion key is ignored.
        on_restart: Called with the old session when it restarts; the host
            is expected to build a fresh session on a cleared surface.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        renderer: Renderer,
        scheduler: Scheduler,
        *,
        user: str = "ash",
        host: str = "portfolio",
        history_limit: Optional[int] = 1000,
        restart_delay: float = 1.0,
        enable_completion: bool = True,
        on_restart: Optional[Callable[["Session"], None]] = None,
    ) -> None:
        self.registry = registry
        self.renderer = renderer
        self.user = user
        self.host = host
        self.history = HistoryBuffer(history_limit)
        self.line = InputLine(renderer, format_prompt(user, host))
        self.restart_delay = restart_delay
        self.enable_completion = enable_completion

        self._scheduler = scheduler
        self._on_restart = on_restart
        self._state = SessionState.ACTIVE
        self._timer: Optional[TimerHandle] = None
        self._restart_on_key = False
        self._prompted = False

    # ---------------- State ----------------

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def columns(self) -> int:
        return getattr(self.renderer, "columns", 80)

    @property
    def restart_pending(self) -> bool:
        return self._timer is not None

    def start(self, *, banner: bool = True) -> None:
        """Greet the surface: banner (when registered) followed by a prompt."""
        if banner and "banner" in self.registry:
            self.dispatch("banner")
        else:
            self.prompt()

    def close(self) -> None:
        """Tear the session down, releasing any pending restart timer."""
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self._restart_on_key = False
        self._state = SessionState.CLOSED
        logger.debug("session %s@%s closed", self.user, self.host)

    # ---------------- Output surface for commands ----------------

    def write(self, text: str) -> None:
        self.renderer.write(text)

    def write_line(self, text: str = "") -> None:
        self.renderer.write_line(text)

    def write_lines(self, lines: list[str]) -> None:
        for text in lines:
            self.renderer.write_line(text)

    def clear_screen(self) -> None:
        self.renderer.clear_all()

    def prompt(self) -> None:
        self._prompted = True
        self.line.prompt()

    # ---------------- Restart ----------------

    def schedule_restart(self, delay: Optional[float] = None, *, on_key: bool = False) -> None:
        """
        Defer prompting and restart the session after `delay` seconds.

        With on_key=True the timer only arms a one-shot listener: the
        restart happens on the next key press after the notice is shown.
        Only one restart can be pending; later calls are ignored.
        """
        if self._state is not SessionState.ACTIVE:
            return
        delay = self.restart_delay if delay is None else delay
        self._state = SessionState.AWAITING_RESTART
        self._timer = self._scheduler.call_later(delay, self._restart_timer_fired, on_key)
        logger.debug("restart scheduled in %.2fs (on_key=%s)", delay, on_key)

    def _restart_timer_fired(self, on_key: bool) -> None:
        self._timer = None
        if self._state is not SessionState.AWAITING_RESTART:
            return
        if on_key:
            self.write(RESTART_NOTICE)
            self._restart_on_key = True
        else:
            self.restart()

    def restart(self) -> None:
        """Close this session and hand control back to the host."""
        if self._state is SessionState.CLOSED:
            return
        logger.info("session restart")
        self.close()
        if self._on_restart is not None:
            self._on_restart(self)

    # ---------------- Key handling ----------------

    def handle_key(self, event: KeyEvent) -> None:
        if self._state is SessionState.CLOSED:
            return
        if self._state is SessionState.AWAITING_RESTART:
            if self._restart_on_key:
                self.restart()
            return

        if event.key is Key.COMMIT:
            self.commit()
        elif event.key is Key.ERASE:
            self.line.backspace()
        elif event.key is Key.RECALL_PREVIOUS:
            self._recall(self.history.recall_previous())
        elif event.key is Key.RECALL_NEXT:
            self._recall(self.history.recall_next())
        elif event.key is Key.COMPLETION:
            if self.enable_completion:
                self.complete()
        elif event.key is Key.INTERRUPT:
            self.line.interrupt()
            self.prompt()
        elif event.key is Key.CLEAR_SCREEN:
            self.clear_screen()
            self.prompt()
        elif event.char and not event.modified:
            self.line.append(event.char)

    def feed(self, events: list[KeyEvent]) -> None:
        for event in events:
            self.handle_key(event)

    def _recall(self, recalled: str | Recall | None) -> None:
        if recalled is None:
            return
        self.line.clear()
        if recalled is not Recall.FRESH_LINE:
            self.line.replace(recalled)

    def complete(self) -> None:
        result = complete(self.registry, self.line.text)
        if result.kind is CompletionKind.UNIQUE:
            self.line.clear()
            self.line.replace(result.candidates[0])
        elif result.kind is CompletionKind.AMBIGUOUS:
            pending = self.line.text
            self.write_line()
            self.write_line("  ".join(result.candidates))
            self.prompt()
            self.line.replace(pending)

    # ---------------- Dispatch ----------------

    def commit(self) -> DispatchOutcome:
        text = self.line.commit()
        if not text:
            self.prompt()
            return DispatchOutcome.EMPTY
        self.history.record(text)
        return self.dispatch(text)

    def dispatch(self, text: str) -> DispatchOutcome:
        """Run one command line. Unknown commands are reported, never raised."""
        name, args = split_command(text)
        command_obj = self.registry.get(name)
        if command_obj is None:
            logger.info("unknown command: %s", name)
            self.write_line(f"bash: {name}: command not found")
            self.prompt()
            return DispatchOutcome.UNKNOWN

        logger.debug("dispatch %s %r", name, args)
        self._prompted = False
        outcome = DispatchOutcome.HANDLED
        try:
            command_obj.invoke(self, args)
        except Exception as exc:
            logger.exception("command %s failed", name)
            self.write_line(f"[error] {type(exc).__name__}: {exc}")
            outcome = DispatchOutcome.FAILED

        if self._state is SessionState.ACTIVE and not self._prompted:
            if outcome is DispatchOutcome.HANDLED:
                logger.warning("command %s returned without prompting", name)
            self.prompt()
        return outcome
