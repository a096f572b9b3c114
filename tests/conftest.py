"""Shared test fixtures for the dvlog test suite."""

import io
import os
import re
import time
from pathlib import Path
from unittest.mock import patch

import pytest

from dvlog.colors import strip_colors


# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------
def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: multi-threaded stress tests (run with --all)"
    )


# ---------------------------------------------------------------------------
# Record parsing
# ---------------------------------------------------------------------------
# One record, color escapes already stripped, line terminator removed.
RECORD_RE = re.compile(
    r"^\[(?P<tz>[^\]]*?) (?P<date>\d{4}-\d{2}-\d{2}) "
    r"(?P<time>\d{2}:\d{2}:\d{2}):(?P<nanos>0|[1-9]\d{0,8})\] "
    r"\[(?P<name>.*):(?P<tag>INFO|WARN|ERROR|FATAL|DEBUG|TRACE)\]\t"
    r"(?P<body>[^\t\n]*)$"
)


def parse_record(line):
    """Parse one record line (with or without color escapes).

    Returns the regex match, or None if the line is not a well-formed
    record.
    """
    return RECORD_RE.match(strip_colors(line.rstrip("\n")))


def record_lines(text):
    """Split sink contents into record lines, checking the final newline."""
    if not text:
        return []
    assert text.endswith("\n"), f"output does not end with a newline: {text!r}"
    return text[:-1].split("\n")


# ---------------------------------------------------------------------------
# Sink fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def buf():
    """A StringIO buffer used as a sink."""
    return io.StringIO()


@pytest.fixture
def other_buf():
    """A second StringIO sink."""
    return io.StringIO()


class FailingSink:
    """Sink whose write() always fails, like a full disk or broken pipe."""

    def __init__(self, exc=OSError("No space left on device")):
        self.exc = exc
        self.flushes = 0

    def write(self, text):
        raise self.exc

    def flush(self):
        self.flushes += 1


@pytest.fixture
def failing_sink():
    return FailingSink()


# ---------------------------------------------------------------------------
# Environment fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def utc_tz(monkeypatch):
    """Run the test with the local time zone set to UTC."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset() is not available on this platform")
    monkeypatch.setenv("TZ", "UTC")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


@pytest.fixture
def tmp_config_home(tmp_path):
    """Provide a temporary home directory for ~/.dvlog/config.json."""
    home = tmp_path / "home"
    home.mkdir()
    with patch.dict(os.environ, {"HOME": str(home), "USERPROFILE": str(home)}):
        with patch("pathlib.Path.home", return_value=home):
            yield home


@pytest.fixture
def isolated_cwd(tmp_path, monkeypatch, tmp_config_home):
    """Run in an empty working directory with an empty home."""
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work
