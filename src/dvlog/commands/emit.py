"""dvlog emit - write one record.

    dvlog emit LEVEL [VALUE ...]

Each VALUE becomes one space-separated token in the record body, exactly
as the library's Logger.log(level, *values) would render it. With no
values, the record is just the header.

Example::

    $ dvlog --name deploy emit warn "disk usage at" 91 "%"
    [UTC 2026-10-17 09:12:03:482113907] [deploy:WARN]	disk usage at 91 %
"""

import argparse

from dvlog.levels import Level
from dvlog.output import print_error


def register(subparsers):
    """Register the 'emit' subcommand."""
    p = subparsers.add_parser(
        "emit",
        help="Write one log record",
        description=(
            "Write one record at LEVEL to stdout and every --tee file.\n"
            "Levels: info, warn, error, fatal, debug, trace."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("level", metavar="LEVEL",
                   help="Severity label (info, warn, error, fatal, debug, trace)")
    p.add_argument("values", metavar="VALUE", nargs="*",
                   help="Values to log, joined by single spaces")
    p.set_defaults(func=run)


def run(args, log):
    """Execute the emit command."""
    try:
        level = Level.parse(args.level)
    except ValueError as e:
        print_error(str(e))
        return 1
    log.log(level, *args.values)
    return 0
