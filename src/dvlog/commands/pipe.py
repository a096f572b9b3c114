"""dvlog pipe - turn every line of stdin into a record.

    some_build_step 2>&1 | dvlog --name build --tee build.log pipe

Lines are logged one record each, in input order, with their trailing
line terminator removed. Blank lines still produce a (header-only)
record so that line counts match the input. Bytes that are not valid
UTF-8 are replaced with U+FFFD rather than aborting the pipe.
"""

import argparse
import sys

from dvlog.levels import Level
from dvlog.output import print_error


def register(subparsers):
    """Register the 'pipe' subcommand."""
    p = subparsers.add_parser(
        "pipe",
        help="Log each line read from stdin",
        description=(
            "Read stdin line by line and write one record per line\n"
            "to stdout and every --tee file."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--level", "-l", default="info", metavar="LEVEL",
                   help="Severity label for every line (default: info)")
    p.set_defaults(func=run)


def run(args, log, stdin=None):
    """Execute the pipe command."""
    try:
        level = Level.parse(args.level)
    except ValueError as e:
        print_error(str(e))
        return 1

    if stdin is None:
        stdin = sys.stdin
    reconfigure = getattr(stdin, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="replace")
    for line in stdin:
        line = line.rstrip("\r\n")
        if line:
            log.log(level, line)
        else:
            log.log(level)
    return 0
