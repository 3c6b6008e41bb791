#!/usr/bin/env python3
# shellcore/interface/completion.py
from __future__ import annotations

"""
Command name completion.

Only the first token is completed, and only while it is the whole line:
once arguments are present completion does nothing. Candidates are
case-sensitive prefix matches taken in registry enumeration order.
"""

from dataclasses import dataclass
from enum import Enum

from shellcore.commands import CommandRegistry


class CompletionKind(Enum):
    NONE = "none"
    UNIQUE = "unique"
    AMBIGUOUS = "ambiguous"


@dataclass(frozen=True, slots=True)
class CompletionResult:
    kind: CompletionKind
    candidates: tuple[str, ...] = ()

    @classmethod
    def none(cls) -> "CompletionResult":
        return cls(CompletionKind.NONE)

    @property
    def unique(self) -> str | None:
        return self.candidates[0] if self.kind is CompletionKind.UNIQUE else None


def _completion_token(partial: str) -> str | None:
    """Return the token eligible for completion, or None when not eligible."""
    text = partial.strip()
    if not text or " " in text:
        return None
    return text


def complete(registry: CommandRegistry, partial: str) -> CompletionResult:
    token = _completion_token(partial)
    if token is None:
        return CompletionResult.none()

    matches = tuple(name for name in registry.names() if name.startswith(token))
    if not matches:
        return CompletionResult.none()
    if len(matches) == 1:
        return CompletionResult(CompletionKind.UNIQUE, matches)
    return CompletionResult(CompletionKind.AMBIGUOUS, matches)
