"""Main CLI entry point for dvlog.

Wraps dvlog.Logger for shell scripts. Implements a Docker-style two-pass
argument parser:
  1. First pass: extract global flags (--name, --tee, --no-color, ...)
  2. Second pass: dispatch to subcommand

Global flags can appear before OR after the subcommand:
  dvlog --name build emit info "compiling"     # works
  dvlog emit info "compiling" --name build     # also works

The CLI is the host of the logger: it opens the --tee files, hands them
to the logger as extra sinks and closes them when the command is done.

Subcommands self-register via register(subparsers) convention and expose
run(args, log).
"""

import argparse
import contextlib
import sys

from dvlog._version import BASE_VERSION, VERSION
from dvlog.config import resolve_config
from dvlog.logger import Logger
from dvlog.output import print_error, print_warn
from dvlog.sinks import is_terminal


# ---------------------------------------------------------------------------
# Global flags (Docker-style: can precede the subcommand)
# ---------------------------------------------------------------------------
# Defaults are None so that config files can fill in anything not given.
GLOBAL_FLAGS = {
    "--name": {"aliases": ["-n"], "metavar": "NAME", "default": None,
               "help": "Logger name shown in every record (default: dvlog)"},
    "--tee": {"aliases": ["-t"], "metavar": "PATH", "action": "append",
              "default": None,
              "help": "Also write records to PATH (repeatable)"},
    "--append": {"aliases": ["-a"], "action": "store_const", "const": True,
                 "default": None,
                 "help": "Append to --tee files instead of truncating them"},
    "--color": {"dest": "color", "action": "store_const", "const": True,
                "default": None,
                "help": "Always color level tags on stdout"},
    "--no-color": {"dest": "color", "action": "store_const", "const": False,
                   "default": None,
                   "help": "Never color level tags"},
    "--config": {"metavar": "PATH", "default": None,
                 "help": "Path to config file (default: ~/.dvlog/config.json)"},
}


def _add_global_flags(parser):
    for flag, kwargs in GLOBAL_FLAGS.items():
        kw = {k: v for k, v in kwargs.items() if k != "aliases"}
        parser.add_argument(flag, *kwargs.get("aliases", []), **kw)


def _extract_global_flags(argv):
    """Two-pass parse: pull global flags from anywhere in argv.

    Returns (global_namespace, remaining_argv).
    """
    global_parser = argparse.ArgumentParser(add_help=False)
    _add_global_flags(global_parser)
    global_args, remaining = global_parser.parse_known_args(argv)
    return global_args, remaining


# ---------------------------------------------------------------------------
# Subcommand discovery and registration
# ---------------------------------------------------------------------------
def _discover_commands():
    """Import and return all command modules.

    Each module in dvlog.commands must export:
      register(subparsers) - add itself to the subparser
      run(args, log) - execute the command with a ready Logger
    """
    from dvlog.commands import emit, pipe
    return [emit, pipe]


def _build_parser(commands):
    """Build the main argparse parser with subcommand dispatch."""
    parser = argparse.ArgumentParser(
        prog="dvlog",
        description="dvlog - timestamped, leveled log lines from the shell",
        epilog=(
            "Run 'dvlog <command> --help' for details on a specific command.\n"
            "\n"
            "Global flags (--name, --tee, --no-color, ...) can appear\n"
            "before or after the subcommand."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"dvlog {BASE_VERSION} ({VERSION})",
    )

    # Add global flags to main parser too (for --help display)
    _add_global_flags(parser)

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        metavar="<command>",
    )

    for cmd_module in commands:
        cmd_module.register(subparsers)

    return parser


# ---------------------------------------------------------------------------
# Logger construction (the CLI is the sink owner)
# ---------------------------------------------------------------------------
@contextlib.contextmanager
def open_logger(settings, stdout=None):
    """Build a Logger on stdout plus one sink per tee file.

    Tee files are opened here and closed on exit; the logger itself
    never closes a sink.

    Args:
        settings: Resolved config dict (see dvlog.config.resolve_config).
        stdout: Stream to use as standard output (default: sys.stdout).

    Raises:
        OSError: if a tee file cannot be opened.
    """
    if stdout is None:
        stdout = sys.stdout
    color = settings["color"]
    if color is None:
        color = is_terminal(stdout)

    mode = "a" if settings["append"] else "w"
    with contextlib.ExitStack() as stack:
        log = Logger(settings["name"], stdout, color=color)
        stack.callback(log.close)
        for path in settings["tee"]:
            log.append_sink(stack.enter_context(open(path, mode, encoding="utf-8")))
        yield log


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def main(argv=None):
    """Main entry point for dvlog CLI.

    Args:
        argv: Command-line arguments. None means sys.argv[1:].

    Returns:
        Exit code (0 = success).
    """
    if argv is None:
        argv = sys.argv[1:]

    # Pass 1: extract global flags from anywhere in the arg list
    global_args, remaining = _extract_global_flags(argv)

    # Pass 2: parse subcommand + specific args
    commands = _discover_commands()
    parser = _build_parser(commands)

    # If no args at all, print help
    if not remaining:
        parser.print_help()
        return 0

    args = parser.parse_args(remaining)

    # If subcommand selected but no handler, print help
    if not hasattr(args, "func"):
        parser.print_help()
        return 0

    # Merge global args into the namespace for convenience
    for key, value in vars(global_args).items():
        if key not in vars(args) or getattr(args, key) is None:
            setattr(args, key, value)

    settings = resolve_config(args)
    if settings["color"] and settings["tee"]:
        print_warn("color disabled: records are also written to --tee files")

    # Dispatch
    try:
        with open_logger(settings) as log:
            return args.func(args, log) or 0
    except OSError as e:
        print_error(str(e))
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 130
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1


if __name__ == "__main__":
    sys.exit(main())
