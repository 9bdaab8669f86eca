"""
Version information for sdklog.

This file is the canonical source for version numbers.

Format: MAJOR.MINOR.PATCH[-PHASE]
Example: 1.1.0-beta
"""

# Version components - edit these for version bumps
MAJOR = 1
MINOR = 1
PATCH = 0
PHASE = None  # None, "alpha", "beta", "rc1", etc.

__app_name__ = "sdklog"


def get_base_version():
    """Return the semantic version string (MAJOR.MINOR.PATCH[-PHASE])."""
    base = f"{MAJOR}.{MINOR}.{PATCH}"
    if PHASE:
        base = f"{base}-{PHASE}"
    return base


def get_pip_version():
    """Return PEP 440 compliant version for pip/setuptools.

    - 1.1.0-alpha -> 1.1.0a0
    - 1.1.0-rc1   -> 1.1.0rc1
    """
    base = f"{MAJOR}.{MINOR}.{PATCH}"
    phase_map = {"alpha": "a0", "beta": "b0"}
    if PHASE:
        base += phase_map.get(PHASE, PHASE)
    return base


__version__ = get_base_version()
PIP_VERSION = get_pip_version()
