#!/usr/bin/env python3
# shellcore/interface/keys.py
from __future__ import annotations

"""
Discrete key events delivered to a session.

Key sources (the prompt_toolkit terminal adapter, tests, scripted replays)
tag every event with a logical key name so the engine never sees platform
key codes.
"""

from dataclasses import dataclass
from enum import Enum


class Key(str, Enum):
    COMMIT = "commit"
    ERASE = "erase"
    RECALL_PREVIOUS = "recall-previous"
    RECALL_NEXT = "recall-next"
    COMPLETION = "completion"
    INTERRUPT = "interrupt"
    CLEAR_SCREEN = "clear-screen"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class KeyEvent:
    key: Key
    char: str = ""
    alt: bool = False
    ctrl: bool = False
    meta: bool = False

    @property
    def modified(self) -> bool:
        """True when any of alt/ctrl/meta is held."""
        return self.alt or self.ctrl or self.meta

    @classmethod
    def char_key(cls, ch: str) -> "KeyEvent":
        return cls(Key.OTHER, ch)


def type_text(text: str) -> list[KeyEvent]:
    """Expand a string into one OTHER event per character."""
    return [KeyEvent.char_key(ch) for ch in text]
