"""Tests for key handling and dispatch in a running session."""

import logging

from shellcore.commands import Command, CommandRegistry
from shellcore.interface import (
    DispatchOutcome,
    Key,
    KeyEvent,
    SessionState,
    format_prompt,
    type_text,
)
from shellcore.ui import strip_ansi

PROMPT = strip_ansi(format_prompt("ash", "portfolio"))

UP = KeyEvent(Key.RECALL_PREVIOUS)
DOWN = KeyEvent(Key.RECALL_NEXT)
TAB = KeyEvent(Key.COMPLETION)
ENTER = KeyEvent(Key.COMMIT)


def run(session, text: str) -> None:
    session.feed([*type_text(text), ENTER])


def test_start_without_banner_shows_prompt(session, renderer) -> None:
    session.start(banner=False)
    assert renderer.plain == f"\r\n{PROMPT}"
    assert session.state is SessionState.ACTIVE


def test_start_with_banner(session, renderer) -> None:
    session.start()
    assert "Welcome to Ash's Terminal!" in renderer.plain
    assert renderer.plain.endswith(PROMPT)


def test_echo_round_trip(session, renderer) -> None:
    session.start(banner=False)
    run(session, "echo hello world")
    assert "hello world" in renderer.lines
    assert session.history.entries == ["echo hello world"]
    assert renderer.plain.endswith(PROMPT)


def test_echo_keeps_spacing(session, renderer) -> None:
    session.start(banner=False)
    run(session, "echo a  b")
    assert "a  b" in renderer.lines


def test_command_name_is_case_insensitive(session, renderer) -> None:
    session.start(banner=False)
    run(session, "ECHO hi")
    assert "hi" in renderer.lines
    assert session.history.entries == ["ECHO hi"]


def test_uname_variants(session, renderer) -> None:
    session.start(banner=False)
    run(session, "uname")
    run(session, "uname -a")
    assert "Fedora Linux 41 (Workstation Edition)" in renderer.lines
    assert "Fedora Linux 41 (Workstation Edition) x86_64 Python prompt_toolkit" in renderer.lines


def test_unknown_command_is_reported_and_recorded(session, renderer) -> None:
    session.start(banner=False)
    run(session, "NonExist")
    assert "bash: nonexist: command not found" in renderer.lines
    assert session.history.entries == ["NonExist"]
    assert renderer.plain.endswith(PROMPT)


def test_blank_commit_only_prompts(session, renderer) -> None:
    session.start(banner=False)
    assert session.commit() is DispatchOutcome.EMPTY
    run(session, "   ")
    assert session.history.entries == []
    assert renderer.plain.endswith(PROMPT)


def test_commit_outcomes(session) -> None:
    session.start(banner=False)
    session.feed(type_text("whoami"))
    assert session.commit() is DispatchOutcome.HANDLED
    session.feed(type_text("nope"))
    assert session.commit() is DispatchOutcome.UNKNOWN


def test_interrupt_discards_line_without_recording(session, renderer) -> None:
    session.start(banner=False)
    session.feed([*type_text("ech"), KeyEvent(Key.INTERRUPT, ctrl=True)])
    assert session.line.is_empty()
    assert session.history.entries == []
    assert renderer.plain.endswith(f"ech^C\r\n\r\n{PROMPT}")


def test_clear_screen_key(session, renderer) -> None:
    session.start(banner=False)
    session.feed(type_text("abc"))
    session.handle_key(KeyEvent(Key.CLEAR_SCREEN, ctrl=True))
    assert ("clear_all", "") in renderer.calls
    assert session.line.is_empty()
    assert renderer.plain.endswith(PROMPT)


def test_erase_removes_last_character(session) -> None:
    session.start(banner=False)
    session.feed([*type_text("ab"), KeyEvent(Key.ERASE), KeyEvent(Key.ERASE), KeyEvent(Key.ERASE)])
    assert session.line.is_empty()


def test_modified_and_control_characters_are_ignored(session) -> None:
    session.start(banner=False)
    session.handle_key(KeyEvent(Key.OTHER, "c", ctrl=True))
    session.handle_key(KeyEvent(Key.OTHER, "x", alt=True))
    session.handle_key(KeyEvent(Key.OTHER, "\x01"))
    session.handle_key(KeyEvent(Key.OTHER))
    assert session.line.is_empty()


def test_history_recall_walks_entries(session, renderer) -> None:
    session.start(banner=False)
    run(session, "echo a")
    run(session, "echo b")

    session.handle_key(UP)
    assert session.line.text == "echo b"
    session.handle_key(UP)
    assert session.line.text == "echo a"
    session.handle_key(UP)
    assert session.line.text == "echo a"
    assert session.history.cursor == 0

    session.handle_key(DOWN)
    assert session.line.text == "echo b"
    session.handle_key(DOWN)
    assert session.line.is_empty()
    assert session.history.cursor == 2

    before = list(renderer.calls)
    session.handle_key(DOWN)
    assert renderer.calls == before


def test_recall_redraw_clears_then_echoes(session, renderer) -> None:
    session.start(banner=False)
    run(session, "whoami")
    renderer.reset()
    session.handle_key(UP)
    assert [text for _, text in renderer.calls][-1] == "whoami"
    assert strip_ansi(renderer.calls[0][1]) == f"\r{PROMPT}"


def test_editing_a_recalled_line_keeps_the_cursor(session) -> None:
    session.start(banner=False)
    run(session, "echo a")
    run(session, "echo b")
    session.feed([UP, *type_text("x")])
    assert session.line.text == "echo bx"
    session.handle_key(UP)
    assert session.line.text == "echo a"


def test_commit_after_recall_resets_cursor(session) -> None:
    session.start(banner=False)
    run(session, "echo a")
    session.feed([UP, ENTER])
    assert session.history.entries == ["echo a", "echo a"]
    assert session.history.cursor == 2


def test_unique_completion_then_commit(session, renderer) -> None:
    session.start(banner=False)
    session.feed([*type_text("hel"), TAB])
    assert session.line.text == "help"
    session.handle_key(ENTER)
    assert "Available Commands" in renderer.lines
    assert session.history.entries == ["help"]
    assert renderer.plain.endswith(PROMPT)


def test_ambiguous_completion_lists_candidates_and_keeps_input(session, renderer) -> None:
    session.start(banner=False)
    session.feed([*type_text("h"), TAB])
    assert "help  history" in renderer.lines
    assert session.line.text == "h"
    assert renderer.plain.endswith(f"{PROMPT}h")


def test_completion_noop_cases(session, renderer) -> None:
    session.start(banner=False)
    session.feed(type_text("zz"))
    before = list(renderer.calls)
    session.handle_key(TAB)
    assert renderer.calls == before

    session.handle_key(KeyEvent(Key.INTERRUPT))
    session.feed(type_text("echo he"))
    before = list(renderer.calls)
    session.handle_key(TAB)
    assert renderer.calls == before
    assert session.line.text == "echo he"


def test_completion_can_be_disabled(make_session) -> None:
    session = make_session(enable_completion=False)
    session.start(banner=False)
    session.feed([*type_text("hel"), TAB])
    assert session.line.text == "hel"


def test_arguments_reach_the_handler_untouched(make_session) -> None:
    seen = []

    def grab(session, *args):
        seen.append(args)
        session.prompt()

    session = make_session(registry=CommandRegistry([
        Command(name="grab", description="", example="", callback=grab),
    ]))
    session.start(banner=False)
    run(session, "GRAB  A b")
    assert seen == [("", "A", "b")]


def test_failing_handler_reports_and_prompts(make_session, renderer) -> None:
    def boom(session, *args):
        raise RuntimeError("boom")

    session = make_session(registry=CommandRegistry([
        Command(name="boom", description="", example="", callback=boom),
    ]))
    session.start(banner=False)
    session.feed(type_text("boom"))
    assert session.commit() is DispatchOutcome.FAILED
    assert "[error] RuntimeError: boom" in renderer.lines
    assert renderer.plain.endswith(PROMPT)
    assert session.state is SessionState.ACTIVE


def test_handler_without_prompt_gets_one(make_session, renderer, caplog) -> None:
    def lazy(session, *args):
        session.write_line("done")

    session = make_session(registry=CommandRegistry([
        Command(name="lazy", description="", example="", callback=lazy),
    ]))
    session.start(banner=False)
    session_logger = logging.getLogger("shellcore.session")
    session_logger.addHandler(caplog.handler)
    try:
        with caplog.at_level(logging.WARNING, logger="shellcore.session"):
            assert session.dispatch("lazy") is DispatchOutcome.HANDLED
    finally:
        session_logger.removeHandler(caplog.handler)

    assert renderer.plain.endswith(f"done\r\n\r\n{PROMPT}")
    assert any("without prompting" in record.getMessage() for record in caplog.records)


def test_custom_user_and_host_in_prompt(make_session, renderer) -> None:
    session = make_session(user="guest", host="box")
    session.start(banner=False)
    run(session, "whoami")
    assert "guest" in renderer.lines
    assert renderer.plain.endswith("guest@box:~$ ")
