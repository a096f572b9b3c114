"""
Sink set and standard-output detection.

A sink is any text stream with write() and flush(). Sinks are borrowed:
the host opens them, keeps them open for the logger's lifetime and
closes them afterwards. Nothing here closes a sink or checks its error
state.
"""

import os
import sys
from typing import Iterator, List, Optional, TextIO, Tuple


class SinkSet:
    """Ordered, append-only collection of borrowed sinks.

    No removal and no deduplication: appending the same stream twice
    makes every record appear twice on it. Not synchronized on its own;
    the owning Logger serializes access.
    """

    def __init__(self, initial: TextIO):
        if initial is None:
            raise ValueError("a logger needs at least one sink")
        self._sinks: List[TextIO] = [initial]

    def append(self, sink: TextIO) -> None:
        if sink is None:
            raise ValueError("cannot append None as a sink")
        self._sinks.append(sink)

    def __iter__(self) -> Iterator[TextIO]:
        return iter(self._sinks)

    def __len__(self) -> int:
        return len(self._sinks)

    def snapshot(self) -> Tuple[TextIO, ...]:
        """Return the sinks in insertion order as a tuple."""
        return tuple(self._sinks)


def _fileno(stream) -> Optional[int]:
    """Return the stream's descriptor, or None if it has none."""
    try:
        return stream.fileno()
    except (AttributeError, OSError, ValueError):
        # io.UnsupportedOperation is both; ValueError covers closed files
        return None


def is_stdout_sink(sink, stdout=None) -> bool:
    """True if sink writes to the same destination as standard output.

    Compares by object identity first, then by underlying open file so
    that a separately opened handle on the same descriptor (for example
    ``open(sys.stdout.fileno(), "w", closefd=False)``) also matches.

    Args:
        sink: The stream to test.
        stdout: Stream treated as standard output (default: sys.stdout
            at call time).
    """
    if stdout is None:
        stdout = sys.stdout
    if stdout is None:
        return False
    if sink is stdout:
        return True
    sink_fd = _fileno(sink)
    stdout_fd = _fileno(stdout)
    if sink_fd is None or stdout_fd is None:
        return False
    if sink_fd == stdout_fd:
        return True
    try:
        return os.path.sameopenfile(sink_fd, stdout_fd)
    except OSError:
        return False


def is_terminal(sink) -> bool:
    """True if sink is attached to an interactive terminal."""
    try:
        return bool(sink.isatty())
    except (AttributeError, OSError, ValueError):
        return False

