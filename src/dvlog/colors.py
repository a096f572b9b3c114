"""
ANSI console color palette.

Every constant is a CSI "select graphic rendition" sequence of the form
``ESC [ n m``. These are the only control sequences dvlog ever writes:

    30-37   foreground (black .. white)
    40-47   background (black .. white)
    0       reset to the terminal default
"""

import re

BLACK = "\u001B[30m"
RED = "\u001B[31m"
GREEN = "\u001B[32m"
YELLOW = "\u001B[33m"
BLUE = "\u001B[34m"
MAGENTA = "\u001B[35m"
CYAN = "\u001B[36m"
WHITE = "\u001B[37m"

BG_BLACK = "\u001B[40m"
BG_RED = "\u001B[41m"
BG_GREEN = "\u001B[42m"
BG_YELLOW = "\u001B[43m"
BG_BLUE = "\u001B[44m"
BG_MAGENTA = "\u001B[45m"
BG_CYAN = "\u001B[46m"
BG_WHITE = "\u001B[47m"

RESET = "\u001B[0m"

_ESCAPE_RE = re.compile(r"\x1b\[(?:3[0-7]|4[0-7]|0)m")


def strip_colors(text: str) -> str:
    """Remove every palette escape sequence from text."""
    return _ESCAPE_RE.sub("", text)
