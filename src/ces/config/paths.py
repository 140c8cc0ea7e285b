"""Centralized path management for ces.

All state (config, key-value state, telemetry) is stored under a single base
directory. The base directory can be overridden with the CES_HOME environment
variable.

Default locations:
- Linux/macOS: ~/.ces
- Windows: %USERPROFILE%\\.ces
"""

import os
from functools import lru_cache
from pathlib import Path

ENV_VAR = "CES_HOME"


@lru_cache(maxsize=1)
def get_ces_home() -> Path:
    """Get the base directory for all ces data.

    Resolution order:
    1. CES_HOME environment variable (if set)
    2. Platform default (~/.ces)

    Returns:
        Path to the ces home directory.
    """
    if env_home := os.environ.get(ENV_VAR):
        return Path(env_home).expanduser().resolve()

    return Path.home() / ".ces"


def get_config_path() -> Path:
    """Get the default config file path."""
    return get_ces_home() / "config.toml"


def get_state_path() -> Path:
    """Get the persisted key-value state file path."""
    return get_ces_home() / "state.json"


def get_telemetry_path() -> Path:
    """Get the telemetry events directory."""
    return get_ces_home() / "telemetry"
