"""Shared fixtures: an in-memory renderer, a manual clock and a loaded registry."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from shellcore.commands import REGISTRY, CommandRegistry
from shellcore.interface import Session, load_commands
from shellcore.ui import CLEAR_SCREEN, CRLF, strip_ansi


class RecordingRenderer:
    """Renderer that keeps every call and the resulting byte stream."""

    def __init__(self, columns: int = 100) -> None:
        self.columns = columns
        self.calls: list[tuple[str, str]] = []
        self.transcript = ""

    def write(self, text: str) -> None:
        self.calls.append(("write", text))
        self.transcript += text

    def write_line(self, text: str = "") -> None:
        self.calls.append(("write_line", text))
        self.transcript += text + CRLF

    def clear_all(self) -> None:
        self.calls.append(("clear_all", ""))
        self.transcript += CLEAR_SCREEN

    def erase_current_line(self) -> None:
        self.calls.append(("erase_current_line", ""))

    @property
    def plain(self) -> str:
        return strip_ansi(self.transcript)

    @property
    def lines(self) -> list[str]:
        return self.plain.split(CRLF)

    def reset(self) -> None:
        self.calls.clear()
        self.transcript = ""


class ManualTimer:
    def __init__(self, when: float, callback: Callable[..., Any], args: tuple[Any, ...]) -> None:
        self.when = when
        self.callback = callback
        self.args = args
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """call_later-compatible scheduler driven by `advance`."""

    def __init__(self) -> None:
        self.now = 0.0
        self.timers: list[ManualTimer] = []

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> ManualTimer:
        timer = ManualTimer(self.now + delay, callback, args)
        self.timers.append(timer)
        return timer

    @property
    def pending(self) -> list[ManualTimer]:
        return [t for t in self.timers if not (t.cancelled or t.fired)]

    def advance(self, seconds: float) -> None:
        self.now += seconds
        while True:
            due = sorted((t for t in self.pending if t.when <= self.now), key=lambda t: t.when)
            if not due:
                return
            timer = due[0]
            timer.fired = True
            timer.callback(*timer.args)


@pytest.fixture(scope="session")
def registry() -> CommandRegistry:
    load_commands("plugins")
    return REGISTRY.freeze()


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def make_session(registry, renderer, scheduler) -> Callable[..., Session]:
    def factory(**kwargs: Any) -> Session:
        kwargs.setdefault("registry", registry)
        reg = kwargs.pop("registry")
        return Session(reg, renderer, scheduler, **kwargs)

    return factory


@pytest.fixture
def session(make_session) -> Session:
    return make_session()
