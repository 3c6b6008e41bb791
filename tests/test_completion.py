"""Tests for command name completion."""

import pytest

from shellcore.commands import Command, CommandRegistry
from shellcore.interface import CompletionKind, complete


def _noop(session, *args):
    session.prompt()


@pytest.fixture
def small_registry() -> CommandRegistry:
    return CommandRegistry([
        Command(name="help", description="", example="", callback=_noop),
        Command(name="history", description="", example="", callback=_noop),
    ])


def test_unique_prefix(small_registry) -> None:
    result = complete(small_registry, "he")
    assert result.kind is CompletionKind.UNIQUE
    assert result.unique == "help"


def test_ambiguous_prefix_keeps_registry_order(small_registry) -> None:
    result = complete(small_registry, "h")
    assert result.kind is CompletionKind.AMBIGUOUS
    assert result.candidates == ("help", "history")
    assert result.unique is None


def test_no_match(small_registry) -> None:
    assert complete(small_registry, "zz").kind is CompletionKind.NONE


@pytest.mark.parametrize("partial", ["", "   ", "help me", "h x"])
def test_blank_or_arguments_present_is_noop(small_registry, partial) -> None:
    assert complete(small_registry, partial).kind is CompletionKind.NONE


def test_matching_is_case_sensitive(small_registry) -> None:
    assert complete(small_registry, "HE").kind is CompletionKind.NONE


def test_loaded_registry_completion(registry) -> None:
    assert complete(registry, "neo").unique == "neofetch"
    assert complete(registry, "e").candidates == ("echo", "exit")
