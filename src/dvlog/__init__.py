"""dvlog - synchronous, thread-safe line logger with tee'd sinks.

Public API:
    Logger          - the logger (info/warn/error/fatal/debug/trace)
    Level           - the six severity labels
    strip_colors    - remove dvlog's ANSI color escapes from text
"""

from dvlog._version import __version__, __app_name__
from dvlog.colors import strip_colors
from dvlog.levels import Level
from dvlog.logger import Logger

__all__ = ["Logger", "Level", "strip_colors", "__version__", "__app_name__"]
