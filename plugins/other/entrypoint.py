# plugins/other/entrypoint.py
from __future__ import annotations

from shellcore.commands import command
from shellcore.interface.handler import Session
from shellcore.ui import sgr

from plugins.portfolio.content import OWNER
from plugins.system.entrypoint import OS_NAME

from .art import COMPACT_COLUMNS, banner_lines, color_block_lines, logo_lines

# Shown in compact mode; the rest only fits on wide surfaces
_COMPACT_FIELDS = ("OS", "User", "Shell", "Uptime")


def _compact(session: Session) -> bool:
    return session.columns < COMPACT_COLUMNS


def system_info(session: Session) -> dict[str, str]:
    return {
        "OS": OS_NAME,
        "Host": "terminal",
        "Kernel": "Linux 6.13.7-200.fc41.x86_64",
        "Uptime": "Always up",
        "Shell": "bash",
        "CPU": "11th Gen Intel® Core™ i3-1115G4 × 4",
        "Memory": "8.0 GiB",
        "User": session.user,
    }


# ---------- banner ----------
@command(name="banner", description="Display the welcome banner")
def banner(session: Session, *_: str) -> None:
    session.write_lines(banner_lines(_compact(session)))
    session.prompt()


# ---------- neofetch ----------
@command(name="neofetch", description="Display system information")
def neofetch(session: Session, *_: str) -> None:
    compact = _compact(session)
    reset = sgr(0)
    header = f"{sgr(1, 36)}{session.user}@{session.host}{reset}"
    rule = f"{sgr(1, 36)}---------------{reset}"
    info = [
        f"{sgr(1, 33)}{key}:{reset} {value}"
        for key, value in system_info(session).items()
        if not compact or key in _COMPACT_FIELDS
    ]
    session.write_lines([
        *logo_lines(compact),
        "",
        *color_block_lines(compact),
        "",
        header,
        rule,
        *info,
    ])
    session.prompt()


# ---------- history ----------
# Completable and runnable, but not listed by `help`
@command(name="history", description="Show command history", hidden=True)
def history(session: Session, *_: str) -> None:
    session.write_lines(
        [f"{index}  {line}" for index, line in enumerate(session.history, start=1)])
    session.prompt()


# ---------- exit ----------
@command(name="exit", description="Exit the terminal")
def exit_session(session: Session, *_: str) -> None:
    session.write_lines([
        f"Goodbye! Thanks for visiting {OWNER}'s portfolio.",
        "Session ended. Press any key to restart once prompted.",
    ])
    session.schedule_restart(on_key=True)
