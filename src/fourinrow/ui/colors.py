from __future__ import annotations
import os

from fourinrow.config import USE_COLOR

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
REVERSE = "\033[7m"  # swaps fg/bg; good generic highlight

FG_RED = "\033[31m"
FG_GREEN = "\033[32m"
FG_YELLOW = "\033[33m"
FG_BLUE = "\033[34m"
FG_MAGENTA = "\033[35m"
FG_CYAN = "\033[36m"
FG_WHITE = "\033[37m"
FG_GRAY = "\033[90m"

# Player colours are free-form strings; known names get a terminal colour
PLAYER_COLORS = {
    "red": FG_RED,
    "green": FG_GREEN,
    "yellow": FG_YELLOW,
    "blue": FG_BLUE,
    "magenta": FG_MAGENTA,
    "purple": FG_MAGENTA,
    "cyan": FG_CYAN,
    "white": FG_WHITE,
    "gray": FG_GRAY,
    "grey": FG_GRAY,
}


def enabled() -> bool:
    return USE_COLOR and os.environ.get("NO_COLOR") is None


def c(s: str, code: str) -> str:
    if not enabled():
        return s
    return f"{code}{s}{RESET}"


def player_code(color: str) -> str:
    return PLAYER_COLORS.get(color.strip().lower(), FG_WHITE)
