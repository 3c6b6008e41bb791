#!/usr/bin/env python3
# shellcore/interface/line.py
from __future__ import annotations

"""
The line currently being composed.

Every method that changes the buffer performs exactly one renderer call, so
what the user sees and what the engine holds never drift apart.
"""

from shellcore.ui import CARRIAGE_RETURN, CRLF, ERASE_BACK, ERASE_LINE, Renderer


class InputLine:
    def __init__(self, renderer: Renderer, prompt: str) -> None:
        self._renderer = renderer
        self.prompt_text = prompt
        self._buffer: list[str] = []

    @property
    def text(self) -> str:
        return "".join(self._buffer)

    def is_empty(self) -> bool:
        return not self._buffer

    def __len__(self) -> int:
        return len(self._buffer)

    # ---------------- Editing ----------------

    def append(self, ch: str) -> bool:
        """Append a printable character and echo it. Control chars are ignored."""
        if len(ch) != 1 or not ch.isprintable():
            return False
        self._buffer.append(ch)
        self._renderer.write(ch)
        return True

    def backspace(self) -> bool:
        if not self._buffer:
            return False
        self._buffer.pop()
        self._renderer.write(ERASE_BACK)
        return True

    def clear(self) -> None:
        """Empty the buffer and redraw the prompt on the same row."""
        self._buffer.clear()
        self._renderer.write(f"{CARRIAGE_RETURN}{ERASE_LINE}{self.prompt_text}")

    def replace(self, text: str) -> None:
        """Set the buffer wholesale (history recall, completion) and echo it."""
        self._buffer = [ch for ch in text if ch not in "\r\n"]
        self._renderer.write(self.text)

    def redraw(self) -> None:
        """Echo the buffer again after a fresh prompt (buffer unchanged)."""
        self._renderer.write(self.text)

    def commit(self) -> str:
        """Return the trimmed line, empty the buffer and end the row."""
        text = self.text.strip()
        self._buffer.clear()
        self._renderer.write_line()
        return text

    def interrupt(self) -> None:
        """Discard the buffer, echoing ^C."""
        self._buffer.clear()
        self._renderer.write_line("^C")

    def prompt(self) -> None:
        """Start a fresh, empty line below the current output."""
        self._buffer.clear()
        self._renderer.write(f"{CRLF}{self.prompt_text}")
