"""Configuration loading from TOML files and environment variables."""

import os
import tomllib
from pathlib import Path
from typing import Any

from pydantic import SecretStr

from listkeeper.config.models import ConfigError, ListkeeperConfig
from listkeeper.config.paths import get_config_path

SESSION_SECRET_ENV_VAR = "LISTKEEPER_SESSION_SECRET"


def _get_default_config_paths() -> list[Path]:
    """Config locations, most specific first."""
    return [
        Path("config.toml"),
        get_config_path(),
        Path("/etc/listkeeper/config.toml"),
    ]


def _find_config_file(path: Path | None) -> Path:
    if path is not None:
        explicit = Path(path).expanduser()
        if not explicit.exists():
            raise FileNotFoundError(f"Config file not found: {explicit}")
        return explicit

    candidates = _get_default_config_paths()
    for candidate in candidates:
        if candidate.expanduser().exists():
            return candidate.expanduser()
    searched = ", ".join(str(p) for p in candidates)
    raise FileNotFoundError(f"No config file found. Searched: {searched}")


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e


def _resolve_env_secrets(config: dict[str, Any]) -> dict[str, Any]:
    """Fill the session secret from the environment unless the file sets one."""
    session = dict(config.get("session") or {})
    if session.get("secret_key") is None and (
        value := os.environ.get(SESSION_SECRET_ENV_VAR)
    ):
        session["secret_key"] = SecretStr(value)
    if session:
        config["session"] = session
    return config


def load_config(path: Path | None = None) -> ListkeeperConfig:
    """Load and validate configuration.

    Args:
        path: Config file to read. When omitted, ./config.toml,
            $LISTKEEPER_HOME/config.toml and /etc/listkeeper/config.toml are
            tried in that order.

    Raises:
        FileNotFoundError: No config file exists.
        ConfigError: The file is not valid TOML.
        pydantic.ValidationError: A setting has an invalid value.
    """
    raw_config = _read_toml(_find_config_file(path))
    return ListkeeperConfig.model_validate(_resolve_env_secrets(raw_config))


def get_default_config() -> ListkeeperConfig:
    """Built-in defaults for development and tests.

    The session secret still honours $LISTKEEPER_SESSION_SECRET.
    """
    return ListkeeperConfig.model_validate(_resolve_env_secrets({}))
