"""
Version information for dvlog.

This file is the canonical source for version numbers. Bump the
components and __version__ together by hand; the suffix after the
first "_" records branch, build number, date and commit, and
get_pip_version() maps it to a PEP 440 string.

Format: MAJOR.MINOR.PATCH[-PHASE]_BRANCH_BUILD-YYYYMMDD-COMMITHASH
Example: 0.77.3_main_12-20261017-a1b2c3d4
"""

# Version components - edit these for version bumps
MAJOR = 0
MINOR = 77
PATCH = 3
PHASE = None  # Per-MINOR feature set: None, "alpha", "beta", "rc1", etc.

# Full version string, kept in step with the components above
__version__ = "0.77.3_main_12-20261017-5e1f0c2a"
__app_name__ = "dvlog"


def get_version():
    """Return the full version string including branch and build info."""
    return __version__


def get_base_version():
    """Return the semantic version string (MAJOR.MINOR.PATCH[-PHASE])."""
    if "_" in __version__:
        return __version__.split("_")[0]
    base = f"{MAJOR}.{MINOR}.{PATCH}"
    if PHASE:
        base = f"{base}-{PHASE}"
    return base


def get_pip_version():
    """
    Return PEP 440 compliant version for pip/setuptools.

    - Main branch: 0.77.3_main_12-20261017-hash -> 0.77.3
    - Dev branch:  0.77.3_dev_12-20261017-hash  -> 0.77.3.dev12
    - Phases map to pre-release segments: alpha -> a0, beta -> b0
    """
    base = f"{MAJOR}.{MINOR}.{PATCH}"

    phase_map = {"alpha": "a0", "beta": "b0"}
    if PHASE:
        base += phase_map.get(PHASE, PHASE)

    if "_" not in __version__:
        return base

    parts = __version__.split("_")
    branch = parts[1] if len(parts) > 1 else "unknown"

    if branch == "main":
        return base
    build_info = "_".join(parts[2:]) if len(parts) > 2 else ""
    build_num = build_info.split("-")[0] if "-" in build_info else "0"
    return f"{base}.dev{build_num}"


VERSION = get_version()
BASE_VERSION = get_base_version()
PIP_VERSION = get_pip_version()
