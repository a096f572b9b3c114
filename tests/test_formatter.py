"""Tests for dvlog.formatter - space-joined value rendering."""

import io

from dvlog.formatter import write_values


def _format(*values):
    out = io.StringIO()
    write_values(out, values)
    return out.getvalue()


class Point:
    """Host-defined type that renders itself."""

    def __init__(self, x, y):
        self.x, self.y = x, y

    def __str__(self):
        return f"({self.x},{self.y})"


class TestWriteValues:

    def test_single_value_no_separator(self):
        assert _format("Program started.") == "Program started."

    def test_empty_writes_nothing(self):
        assert _format() == ""

    def test_mixed_types(self):
        """Strings, ints, floats and single characters in one call."""
        token = object()
        assert _format("Various types: ", 5, 3.14, "a", "b c", token) == (
            f"Various types:  5 3.14 a b c {token}"
        )

    def test_no_quoting(self):
        """Values are rendered with str(), not repr()."""
        assert _format("quoted?", "x") == "quoted? x"

    def test_composite_is_one_value(self):
        """A tuple or list is written whole, with no separator injected."""
        assert _format((1, 2), [3, "4"]) == "(1, 2) [3, '4']"

    def test_custom_str(self):
        assert _format("at", Point(1, 2)) == "at (1,2)"

    def test_empty_strings_keep_separators(self):
        """Separators go between values even when a value renders empty."""
        assert _format("", "", "") == "  "

    def test_bool_and_none(self):
        assert _format(True, None, 0) == "True None 0"

    def test_accepts_any_iterable(self):
        out = io.StringIO()
        write_values(out, (n for n in range(3)))
        assert out.getvalue() == "0 1 2"
