"""dvlog subcommands. Each module exposes register(subparsers) and run(args, log)."""
