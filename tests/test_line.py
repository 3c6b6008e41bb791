"""Tests for the input line buffer and its paired renderer writes."""

from shellcore.interface import InputLine
from shellcore.ui import CRLF, ERASE_BACK, ERASE_LINE

PROMPT = "$ "


def test_commit_returns_trimmed_text_and_empties_buffer(renderer) -> None:
    line = InputLine(renderer, PROMPT)
    for ch in "  echo hi  ":
        line.append(ch)
    assert line.commit() == "echo hi"
    assert line.is_empty()
    assert renderer.calls[-1] == ("write_line", "")


def test_append_echoes_each_character(renderer) -> None:
    line = InputLine(renderer, PROMPT)
    line.append("a")
    line.append("b")
    assert renderer.calls == [("write", "a"), ("write", "b")]
    assert line.text == "ab"


def test_append_ignores_control_characters(renderer) -> None:
    line = InputLine(renderer, PROMPT)
    assert not line.append("\x01")
    assert not line.append("\n")
    assert not line.append("ab")
    assert line.is_empty()
    assert renderer.calls == []


def test_backspace_on_empty_buffer_is_noop(renderer) -> None:
    line = InputLine(renderer, PROMPT)
    assert not line.backspace()
    assert renderer.calls == []


def test_backspace_erases_one_column(renderer) -> None:
    line = InputLine(renderer, PROMPT)
    line.append("x")
    line.append("y")
    assert line.backspace()
    assert line.text == "x"
    assert renderer.calls[-1] == ("write", ERASE_BACK)


def test_clear_redraws_prompt_in_one_write(renderer) -> None:
    line = InputLine(renderer, PROMPT)
    line.append("x")
    renderer.reset()
    line.clear()
    assert line.is_empty()
    assert renderer.calls == [("write", f"\r{ERASE_LINE}{PROMPT}")]


def test_replace_sets_buffer_and_echoes(renderer) -> None:
    line = InputLine(renderer, PROMPT)
    line.replace("history")
    assert line.text == "history"
    assert renderer.calls == [("write", "history")]


def test_prompt_starts_fresh_line(renderer) -> None:
    line = InputLine(renderer, PROMPT)
    line.append("z")
    line.prompt()
    assert line.is_empty()
    assert renderer.transcript.endswith(f"z{CRLF}{PROMPT}")


def test_interrupt_discards_buffer(renderer) -> None:
    line = InputLine(renderer, PROMPT)
    line.append("q")
    line.interrupt()
    assert line.is_empty()
    assert renderer.calls[-1] == ("write_line", "^C")


def test_redraw_echoes_buffer_unchanged(renderer) -> None:
    line = InputLine(renderer, PROMPT)
    line.replace("ls")
    line.prompt()
    line.replace("ls")
    renderer.reset()
    line.redraw()
    assert line.text == "ls"
    assert renderer.calls == [("write", "ls")]
