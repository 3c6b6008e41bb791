"""Tests for plugin discovery and registry ordering."""

from shellcore.commands import REGISTRY
from shellcore.interface import load_commands

EXPECTED_ORDER = [
    "help", "clear", "echo", "date", "whoami", "uname", "reboot",
    "projects", "skills", "about", "contact", "resume",
    "banner", "neofetch", "history", "exit",
]


def test_registry_order_follows_load_order(registry) -> None:
    assert registry.names() == EXPECTED_ORDER
    assert registry.frozen


def test_categories_come_from_subpackages(registry) -> None:
    assert registry.get("echo").category == "system"
    assert registry.get("skills").category == "portfolio"
    assert registry.get("exit").category == "other"
    assert registry.get_category_description("system") == "Shell and system utilities."


def test_hidden_commands(registry) -> None:
    assert registry.get("help").hidden
    assert registry.get("history").hidden
    assert not registry.get("exit").hidden


def test_loading_twice_is_idempotent(registry) -> None:
    assert load_commands("plugins") == 3
    assert REGISTRY.names() == EXPECTED_ORDER
