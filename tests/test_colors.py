"""Tests for dvlog.colors - the ANSI palette."""

import re

import pytest

from dvlog import colors
from dvlog.colors import strip_colors

FOREGROUND = [colors.BLACK, colors.RED, colors.GREEN, colors.YELLOW,
              colors.BLUE, colors.MAGENTA, colors.CYAN, colors.WHITE]
BACKGROUND = [colors.BG_BLACK, colors.BG_RED, colors.BG_GREEN, colors.BG_YELLOW,
              colors.BG_BLUE, colors.BG_MAGENTA, colors.BG_CYAN, colors.BG_WHITE]


class TestPalette:
    """Every constant is a CSI SGR sequence with the expected code."""

    def test_foreground_codes(self):
        """Foreground colors are ESC[30m .. ESC[37m in palette order."""
        assert FOREGROUND == [f"\x1b[{n}m" for n in range(30, 38)]

    def test_background_codes(self):
        """Background colors are ESC[40m .. ESC[47m in palette order."""
        assert BACKGROUND == [f"\x1b[{n}m" for n in range(40, 48)]

    def test_reset(self):
        assert colors.RESET == "\x1b[0m"

    @pytest.mark.parametrize("code", FOREGROUND + BACKGROUND + [colors.RESET])
    def test_only_sgr_form(self, code):
        """No other terminal control sequence is ever produced."""
        assert re.fullmatch(r"\x1b\[\d+m", code)


class TestStripColors:
    """strip_colors() removes palette escapes and nothing else."""

    def test_strips_wrapped_tag(self):
        text = f"[Main:{colors.BLACK}{colors.BG_RED}FATAL{colors.RESET}]"
        assert strip_colors(text) == "[Main:FATAL]"

    def test_plain_text_untouched(self):
        assert strip_colors("no [escapes] here: 1m") == "no [escapes] here: 1m"

    def test_unknown_sequence_kept(self):
        """Sequences outside the palette (e.g. bold) are not removed."""
        assert strip_colors("\x1b[1mbold") == "\x1b[1mbold"

    def test_empty(self):
        assert strip_colors("") == ""
