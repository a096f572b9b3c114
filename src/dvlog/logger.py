"""
Logger - the record assembly and multi-sink emission core.

One record per call, one line per sink::

    [CEST 2026-10-17 13:42:58:120034511] [Main:INFO]	Program started.

Emission protocol (all under one per-logger lock):
    1. sample the wall clock once
    2. build the header into the scratch buffer
    3. write the values, space separated
    4. write header + values + newline to every sink, in insertion
       order, as a single write() followed by flush()
    5. clear the scratch buffer

Records on one logger never interleave and appear in the same order on
every sink. Nothing is ordered across loggers, but because each record
is handed to a sink in a single write(), loggers sharing an internally
serialized stream interleave only at line boundaries.

Color escapes are written only while ``color_enabled`` is true. It
starts true when the single initial sink is the process's standard
output and is cleared for good by append_sink(), since appended sinks
(files, pipes) generally cannot render escapes.
"""

import io
import threading
import time
from typing import Any, Optional, TextIO, Tuple

from .formatter import write_values
from .header import build_header
from .levels import Level
from .sinks import SinkSet, is_stdout_sink


class Logger:
    """Synchronous, thread-safe line logger writing to borrowed sinks.

    The logger never opens, closes or inspects its sinks; the host must
    keep every sink open for as long as the logger uses it.

    Usage::

        log = Logger("Main", sys.stdout)
        log.info("Program started.")
        log.error("Var i was not > 0! i ==", i)

        with open("run.log", "w") as fh:
            log.append_sink(fh)
            log.warn("mirrored to the terminal and run.log")
            log.close()
    """

    def __init__(self, name: str, sink: TextIO, *, color: Optional[bool] = None):
        """
        Args:
            name: Display name written into every header, verbatim.
            sink: The initial output stream.
            color: Force color escapes on or off. None (default) enables
                them only when sink is standard output.
        """
        self._name = str(name)
        self._sinks = SinkSet(sink)
        self._buffer: Optional[io.StringIO] = io.StringIO()
        self._lock = threading.Lock()
        self._last_ns = 0
        if color is None:
            color = is_stdout_sink(sink)
        self._color_enabled = bool(color)

    def __copy__(self):
        raise TypeError(f"{type(self).__name__} objects cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError(f"{type(self).__name__} objects cannot be copied")

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        with self._lock:
            state = "closed" if self._buffer is None else f"sinks={len(self._sinks)}"
            return f"<Logger {self._name!r} {state} color={self._color_enabled}>"

    # -----------------------------------------------------------------
    # Properties
    # -----------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @property
    def color_enabled(self) -> bool:
        with self._lock:
            return self._color_enabled

    @property
    def sinks(self) -> Tuple[TextIO, ...]:
        """Snapshot of the sinks in insertion order (empty once closed)."""
        with self._lock:
            if self._buffer is None:
                return ()
            return self._sinks.snapshot()

    @property
    def closed(self) -> bool:
        with self._lock:
            return self._buffer is None

    # -----------------------------------------------------------------
    # Sink management
    # -----------------------------------------------------------------

    def append_sink(self, sink: TextIO) -> None:
        """Add a sink after the existing ones.

        Turns color off permanently, even if the new sink is a terminal.
        Appending to a closed logger is ignored.

        Raises:
            ValueError: if sink is None.
        """
        if sink is None:
            raise ValueError("cannot append None as a sink")
        with self._lock:
            if self._buffer is None:
                return
            self._sinks.append(sink)
            self._color_enabled = False

    def close(self) -> None:
        """Release the scratch buffer and drop all sink references.

        Sinks are not flushed or closed. Later calls on the logger are
        silent no-ops.
        """
        with self._lock:
            if self._buffer is None:
                return
            self._buffer.close()
            self._buffer = None
            self._sinks = None

    # -----------------------------------------------------------------
    # Public entry points
    # -----------------------------------------------------------------

    def info(self, *values: Any) -> None:
        self._emit(Level.INFO, values)

    def warn(self, *values: Any) -> None:
        self._emit(Level.WARN, values)

    def error(self, *values: Any) -> None:
        self._emit(Level.ERROR, values)

    def fatal(self, *values: Any) -> None:
        """Emit at FATAL. This is a label only; the program keeps running."""
        self._emit(Level.FATAL, values)

    def debug(self, *values: Any) -> None:
        self._emit(Level.DEBUG, values)

    def trace(self, *values: Any) -> None:
        self._emit(Level.TRACE, values)

    def log(self, level: Level, *values: Any) -> None:
        """Emit at an explicit level."""
        if not isinstance(level, Level):
            raise TypeError(f"level must be a Level, not {type(level).__name__}")
        self._emit(level, values)

    # -----------------------------------------------------------------
    # Emission core
    # -----------------------------------------------------------------

    def _emit(self, level: Level, values) -> None:
        with self._lock:
            buf = self._buffer
            if buf is None:
                return
            try:
                moment_ns = self._sample_clock()
                build_header(buf, moment_ns, self._name, level, self._color_enabled)
                write_values(buf, values)
                buf.write("\n")
                record = buf.getvalue()
                for sink in self._sinks:
                    self._write_record(sink, record)
            finally:
                buf.seek(0)
                buf.truncate(0)

    def _sample_clock(self) -> int:
        """Current wall clock in ns, never earlier than the last record's."""
        now = time.time_ns()
        if now < self._last_ns:
            now = self._last_ns
        self._last_ns = now
        return now

    @staticmethod
    def _write_record(sink: TextIO, record: str) -> None:
        # A broken sink loses this record; later sinks still get it
        try:
            sink.write(record)
            sink.flush()
        except Exception:
            pass
