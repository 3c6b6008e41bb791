# plugins/other/art.py
from __future__ import annotations

"""ASCII art for the welcome banner and neofetch, full and compact variants."""

from shellcore.ui import sgr

from plugins.portfolio.content import CONTACT, OWNER

# Below this width the compact art is used (full banner is 68 columns wide)
COMPACT_COLUMNS = 70

_RESET = sgr(0)

_LOGO_COMPACT = [
    "\x1b[36m     _         _       ",
    "    / \\   ___| |__    ",
    "   / _ \\ / __| '_ \\   ",
    "  / ___ \\\\__ \\ | | |  ",
    " /_/   \\_\\___/_| |_|  \x1b[0m",
]

_LOGO_FULL = [
    "\x1b[36m       _       _        ",
    "      / \\   ___| |__   ",
    "     / _ \\ / __| '_ \\  ",
    "    / ___ \\\\__ \\ | | | ",
    "   /_/   \\_\\___/_| |_| \x1b[0m",
]

_TITLE_FULL = [
    "\x1b[36m                 _     _         _                      _             _ ",
    "  __ _  ___| |__ ( )___   | |_ ___ _ __ _ __ ___ (_)_ __   __ _| |",
    " / _` |/ __| '_ \\|// __|  | __/ _ \\ '__| '_ ` _ \\| | '_ \\ / _` | |",
    "| (_| |\\__ \\ | | | \\__ \\  | ||  __/ |  | | | | | | | | | | (_| | |",
    " \\__,_||___/_| |_| |___/   \\__\\___|_|  |_| |_| |_|_|_| |_|\\__,_|_|\x1b[0m",
    "",
]


def _notices() -> list[str]:
    return [
        f"{sgr(1, 31)} IMPORTANT:{_RESET} {sgr(1)}Please use the commands responsibly.{_RESET}",
        f"{sgr(1, 33)} FEEDBACK:{_RESET} {sgr(1)}For suggestions or issues, contact "
        f"{sgr(4)}{CONTACT['email']}{_RESET}{sgr(1)}{_RESET}",
    ]


def banner_lines(compact: bool) -> list[str]:
    welcome = f"{sgr(1, 32)}Welcome to {OWNER}'s Terminal!{_RESET}"
    if compact:
        return [
            *_LOGO_COMPACT,
            welcome,
            f"Type {sgr(1, 34)}help{_RESET} for commands.",
            *_notices(),
        ]
    return [
        *_TITLE_FULL,
        welcome,
        f"Type {sgr(1, 34)}help{_RESET} to see available commands.",
        *_notices(),
    ]


def logo_lines(compact: bool) -> list[str]:
    return list(_LOGO_COMPACT if compact else _LOGO_FULL)


def color_block_lines(compact: bool) -> list[str]:
    """Two rows of the eight ANSI colours, normal then bold."""
    block = "■" if compact else "███"
    normal = "".join(f"{sgr(code)}{block}" for code in range(30, 38))
    bold = "".join(f"{sgr(1, code)}{block}" for code in range(30, 38))
    return [normal + _RESET, bold + _RESET]
