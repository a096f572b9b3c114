"""Status message helpers for the dvlog CLI.

These are for the CLI's own user-facing messages (what it did, what went
wrong), not for log records. Records go through dvlog.Logger.
"""

import sys


def print_warn(msg, file=None):
    """Print a warning message."""
    print(f"  [WARN] {msg}", file=file if file is not None else sys.stderr)


def print_error(msg, file=None):
    """Print an error message (stderr by default)."""
    print(f"  ERROR: {msg}", file=file if file is not None else sys.stderr)
