"""Configuration module."""

from listkeeper.config.loader import get_default_config, load_config
from listkeeper.config.models import (
    ConfigError,
    ListkeeperConfig,
    ServerConfig,
    SessionConfig,
)
from listkeeper.config.paths import (
    get_config_path,
    get_listkeeper_home,
    get_logs_path,
)

__all__ = [
    "ConfigError",
    "ListkeeperConfig",
    "ServerConfig",
    "SessionConfig",
    "get_config_path",
    "get_default_config",
    "get_listkeeper_home",
    "get_logs_path",
    "load_config",
]
