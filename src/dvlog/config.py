"""Configuration management for the dvlog CLI.

Three-layer config resolution (highest priority wins):
  1. CLI flags - explicit on the command line
  2. Project config - .dvlog.json in the working directory or a parent
  3. Global config - ~/.dvlog/config.json (or the file named by --config)

The library itself reads no configuration: Logger takes everything as
constructor arguments. Only the CLI host uses this module.

Recognized keys::

    {
      "name":   "build",             # logger name in every header
      "tee":    ["build.log"],       # extra file sinks
      "append": true,                # append to tee files instead of truncating
      "color":  false                # force color on/off (absent = auto)
    }
"""

import json
import os
from pathlib import Path

CONFIG_KEYS = ("name", "tee", "append", "color")

DEFAULTS = {
    "name": "dvlog",
    "tee": [],
    "append": False,
    "color": None,
}

PROJECT_CONFIG_NAME = ".dvlog.json"


# ---------------------------------------------------------------------------
# Config file locations
# ---------------------------------------------------------------------------
def get_global_config_dir():
    """Return the global config directory (~/.dvlog/)."""
    return Path.home() / ".dvlog"


def get_global_config_path():
    """Return path to the global config file."""
    return get_global_config_dir() / "config.json"


def find_project_config(start_dir=None):
    """Walk up from start_dir looking for .dvlog.json.

    Returns the path if found, None otherwise.
    """
    current = Path(start_dir or os.getcwd()).resolve()
    for _ in range(20):  # safety limit
        candidate = current / PROJECT_CONFIG_NAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


# ---------------------------------------------------------------------------
# Config loading
# ---------------------------------------------------------------------------
def load_json(path):
    """Load a JSON object from path, returning empty dict on error."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def load_global_config(path=None):
    """Load the global config file, or an explicit one if given."""
    return load_json(path or get_global_config_path())


def load_project_config(start_dir=None):
    """Load the nearest .dvlog.json walking upward from start_dir."""
    path = find_project_config(start_dir)
    if path:
        return load_json(path), path
    return {}, None


# ---------------------------------------------------------------------------
# Config resolution
# ---------------------------------------------------------------------------
def resolve_config(args, start_dir=None):
    """Resolve CLI settings using three-layer precedence.

    For each key in CONFIG_KEYS, checks (in order):
      1. CLI args (from argparse namespace; None means "not given")
      2. Project .dvlog.json
      3. Global config (args.config if set, else ~/.dvlog/config.json)
    and falls back to DEFAULTS.

    A "tee" value is always returned as a list of strings.
    """
    project_cfg, _ = load_project_config(start_dir)
    global_cfg = load_global_config(getattr(args, "config", None))

    resolved = {}
    for key in CONFIG_KEYS:
        cli_val = getattr(args, key, None)
        if cli_val is not None:
            resolved[key] = cli_val
        elif project_cfg.get(key) is not None:
            resolved[key] = project_cfg[key]
        elif global_cfg.get(key) is not None:
            resolved[key] = global_cfg[key]
        else:
            resolved[key] = DEFAULTS[key]

    tee = resolved["tee"]
    if isinstance(tee, str):
        tee = [tee]
    resolved["tee"] = [str(p) for p in tee]
    resolved["name"] = str(resolved["name"])
    resolved["append"] = bool(resolved["append"])
    if resolved["color"] is not None:
        resolved["color"] = bool(resolved["color"])
    return resolved
