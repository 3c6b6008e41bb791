#!/usr/bin/env python3
# shellcore/interface/__init__.py
from __future__ import annotations

"""
Package for the interactive line editor and command dispatch.

Provides:
- Key events and the input line / history data structures.
- Command name completion.
- The per-surface Session (key handling, dispatch, restart state machine).
- Dynamic command loader for the plugins package.
- The prompt_toolkit terminal frontend.
"""


# Leaf structures first (handler depends on them)
from .keys import Key, KeyEvent, type_text
from .history import HistoryBuffer, Recall
from .line import InputLine
from .completion import CompletionKind, CompletionResult, complete
from .parser import split_command

# Dispatcher / help
from .handler import (
    DispatchOutcome,
    Session,
    SessionState,
    format_help_listing,
    format_help_topic,
    format_prompt,
)

# Loader
from .loader import load_commands

# Terminal frontend (after the session is available)
from .cli import TerminalHost, translate_key_press, translate_key_presses

__all__ = [
    # keys
    "Key",
    "KeyEvent",
    "type_text",
    # history / line
    "HistoryBuffer",
    "Recall",
    "InputLine",
    # completion
    "CompletionKind",
    "CompletionResult",
    "complete",
    # parser
    "split_command",
    # handler
    "DispatchOutcome",
    "Session",
    "SessionState",
    "format_help_listing",
    "format_help_topic",
    "format_prompt",
    # loader
    "load_commands",
    # cli
    "TerminalHost",
    "translate_key_press",
    "translate_key_presses",
]
