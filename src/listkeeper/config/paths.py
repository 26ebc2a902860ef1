"""Centralized path management for listkeeper.

Config and logs live under a single base directory, which can be overridden
with the LISTKEEPER_HOME environment variable.

Default location: ~/.listkeeper
"""

import os
from functools import lru_cache
from pathlib import Path

ENV_VAR = "LISTKEEPER_HOME"


@lru_cache(maxsize=1)
def get_listkeeper_home() -> Path:
    """Get the base directory for listkeeper data.

    Resolution order:
    1. LISTKEEPER_HOME environment variable (if set)
    2. ~/.listkeeper

    Returns:
        Path to the listkeeper home directory.
    """
    if env_home := os.environ.get(ENV_VAR):
        return Path(env_home).expanduser().resolve()

    return Path.home() / ".listkeeper"


def get_config_path() -> Path:
    """Get the default config file path."""
    return get_listkeeper_home() / "config.toml"


def get_logs_path() -> Path:
    """Get the default logs directory path."""
    return get_listkeeper_home() / "logs"


def get_all_paths() -> dict[str, Path]:
    """Get all standard paths for display."""
    return {
        "home": get_listkeeper_home(),
        "config": get_config_path(),
        "logs": get_logs_path(),
    }
