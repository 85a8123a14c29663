"""
Level colors for the logger tag.
Uses colorama's ANSI codes; resets only the foreground so surrounding text keeps its style.
"""
from __future__ import annotations
import re
from typing import Any, Callable

from colorama import Fore, just_fix_windows_console

from levellog.core.levels import Level

just_fix_windows_console()

LEVEL_COLORS = {
    Level.TRACE: Fore.GREEN,
    Level.INFO: Fore.LIGHTBLUE_EX,
    Level.WARN: Fore.YELLOW,
    Level.ERROR: Fore.RED,
    Level.FATAL: Fore.LIGHTRED_EX,
}
DEFAULT_COLOR = Fore.WHITE
RESET = Fore.RESET

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;]*m")

def colorize(text: str, code: str) -> str:
    return f"{code}{text}{RESET}"

def level_color(level: Any) -> Callable[[str], str]:
    """Return the color function for a level; white for anything unrecognised."""
    try:
        code = LEVEL_COLORS.get(level, DEFAULT_COLOR)
    except TypeError:  # unhashable
        code = DEFAULT_COLOR
    return lambda text: colorize(text, code)

def strip_ansi(s: str) -> str:
    return ANSI_ESCAPE_RE.sub('', s)

__all__ = [
    'LEVEL_COLORS','DEFAULT_COLOR','RESET','ANSI_ESCAPE_RE',
    'colorize','level_color','strip_ansi'
]
