"""
Record header builder.

Every record starts with::

    [TZ YYYY-MM-DD HH:MM:SS:NANOS] [NAME:LEVEL]<TAB>

NANOS is the count of nanoseconds since the most recent whole second,
printed as a plain integer (no zero padding). The local time fields and
the zone abbreviation come from the host's time zone settings.
"""

import time
from typing import TextIO

from .levels import Level, render_level_tag

NANOS_PER_SECOND = 1_000_000_000


def format_timestamp(moment_ns: int) -> str:
    """Format an epoch timestamp in nanoseconds for a record header."""
    seconds, nanos = divmod(moment_ns, NANOS_PER_SECOND)
    local = time.localtime(seconds)
    return "{} {}:{}".format(
        time.strftime("%Z", local),
        time.strftime("%Y-%m-%d %H:%M:%S", local),
        nanos,
    )


def build_header(buf: TextIO, moment_ns: int, name: str, level: Level,
                 color_enabled: bool) -> None:
    """Append the header for one record to buf.

    The name is written verbatim. A name containing ']' makes the header
    ambiguous to parse; that is left to the caller.
    """
    buf.write("[")
    buf.write(format_timestamp(moment_ns))
    buf.write("] [")
    buf.write(name)
    buf.write(":")
    render_level_tag(buf, level, color_enabled)
    buf.write("]\t")
