"""
Severity levels and the level tag renderer.

The six levels are labels only. There is no ordering between them and
nothing is filtered by level; fatal does not terminate the program.

Tag colors (used only when the logger has color enabled):
    INFO   blue
    WARN   yellow
    ERROR  red
    FATAL  black on red
    DEBUG  green
    TRACE  terminal default
"""

from enum import Enum
from typing import Dict, TextIO, Tuple

from . import colors


class Level(Enum):
    """One of the six severity labels. The value is the plain tag."""
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"
    FATAL = "FATAL"
    DEBUG = "DEBUG"
    TRACE = "TRACE"

    @property
    def tag(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "Level":
        """Look up a level by tag, case-insensitively.

        Raises:
            ValueError: if text names no level.
        """
        try:
            return cls[text.strip().upper()]
        except KeyError:
            names = ", ".join(level.name.lower() for level in cls)
            raise ValueError(f"unknown level {text!r} (expected one of: {names})") from None


# Opening escape(s) written before each tag when color is on
LEVEL_COLORS: Dict[Level, Tuple[str, ...]] = {
    Level.INFO: (colors.BLUE,),
    Level.WARN: (colors.YELLOW,),
    Level.ERROR: (colors.RED,),
    Level.FATAL: (colors.BLACK, colors.BG_RED),
    Level.DEBUG: (colors.GREEN,),
    Level.TRACE: (colors.RESET,),
}


def render_level_tag(buf: TextIO, level: Level, color_enabled: bool) -> None:
    """Write the level's tag into buf, wrapped in color escapes if enabled."""
    if not color_enabled:
        buf.write(level.tag)
        return
    for escape in LEVEL_COLORS[level]:
        buf.write(escape)
    buf.write(level.tag)
    buf.write(colors.RESET)
