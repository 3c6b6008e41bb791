# plugins/system/entrypoint.py
from __future__ import annotations

from datetime import datetime

from shellcore.commands import command
from shellcore.interface.handler import Session, format_help_listing, format_help_topic

OS_NAME = "Fedora Linux 41 (Workstation Edition)"
OS_NAME_FULL = f"{OS_NAME} x86_64 Python prompt_toolkit"


def format_date(moment: datetime) -> str:
    """Format like a browser's Date.toString(): 'Mon Oct 19 2026 10:00:00 GMT+0000 (UTC)'."""
    local = moment.astimezone()
    return local.strftime("%a %b %d %Y %H:%M:%S GMT%z") + f" ({local.tzname()})"


# ---------- help ----------
@command(
    name="help",
    description="Show available commands",
    example="help [command|category]",
    hidden=True,
)
def show_help(session: Session, *args: str) -> None:
    topic = next((arg for arg in args if arg), None)
    if topic is None:
        session.write_lines(format_help_listing(session.registry))
    else:
        session.write_lines(format_help_topic(session.registry, topic.lower()))
    session.prompt()


# ---------- clear ----------
@command(
    name="clear",
    description="Clear the terminal",
)
def clear(session: Session, *_: str) -> None:
    session.clear_screen()
    session.prompt()


# ---------- echo ----------
@command(
    name="echo",
    description="Display text",
    example="echo [text]",
)
def echo(session: Session, *words: str) -> None:
    session.write_line(" ".join(words))
    session.prompt()


# ---------- date ----------
@command(
    name="date",
    description="Display the current date and time",
)
def date(session: Session, *_: str) -> None:
    session.write_line(format_date(datetime.now()))
    session.prompt()


# ---------- whoami ----------
@command(
    name="whoami",
    description="Display the current user",
)
def whoami(session: Session, *_: str) -> None:
    session.write_line(session.user)
    session.prompt()


# ---------- uname ----------
@command(
    name="uname",
    description="Display system information",
    example="uname [-a]",
)
def uname(session: Session, *flags: str) -> None:
    session.write_line(OS_NAME_FULL if "-a" in flags else OS_NAME)
    session.prompt()


# ---------- reboot ----------
@command(
    name="reboot",
    description="Restart the terminal",
)
def reboot(session: Session, *_: str) -> None:
    session.write_line("Rebooting system...")
    session.schedule_restart()
