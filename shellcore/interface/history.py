#!/usr/bin/env python3
# shellcore/interface/history.py
from __future__ import annotations

"""
In-memory command history with a recall cursor.

Entries are chronological and append-only (no dedup, no reordering). The
cursor ranges over 0..len(entries); len(entries) means "fresh line".
"""

from collections import deque
from enum import Enum
from typing import Iterator, Optional


class Recall(Enum):
    """Signal returned by `recall_next` when stepping past the newest entry."""

    FRESH_LINE = "fresh-line"


class HistoryBuffer:
    def __init__(self, limit: Optional[int] = None) -> None:
        # limit=None or 0 -> unbounded
        self._entries: deque[str] = deque(maxlen=limit or None)
        self._cursor = 0

    # ---------------- Inspection ----------------

    @property
    def entries(self) -> list[str]:
        return list(self._entries)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def recalling(self) -> bool:
        return self._cursor < len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> str:
        return self._entries[index]

    # ---------------- Mutation ----------------

    def record(self, line: str) -> None:
        """Append a committed line and park the cursor at the fresh line."""
        self._entries.append(line)
        self._cursor = len(self._entries)

    def recall_previous(self) -> Optional[str]:
        """Step back one entry; None at the oldest entry (cursor unchanged)."""
        if self._cursor <= 0:
            return None
        self._cursor -= 1
        return self._entries[self._cursor]

    def recall_next(self) -> str | Recall | None:
        """
        Step forward one entry.

        Returns the entry, or Recall.FRESH_LINE when leaving the newest
        entry, or None when already on the fresh line.
        """
        last = len(self._entries) - 1
        if self._cursor < last:
            self._cursor += 1
            return self._entries[self._cursor]
        if self._cursor == last:
            self._cursor = len(self._entries)
            return Recall.FRESH_LINE
        return None
