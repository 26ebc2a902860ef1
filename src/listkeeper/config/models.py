"""Configuration models using Pydantic."""

import logging
from typing import Literal

from pydantic import BaseModel, Field, SecretStr, model_validator

logger = logging.getLogger(__name__)

DEV_SESSION_SECRET = "dev-session-secret-change-me"
DEFAULT_SESSION_MAX_AGE = 14 * 24 * 60 * 60


class ConfigError(Exception):
    """Configuration error."""

    pass


class ServerConfig(BaseModel):
    """Configuration for HTTP server."""

    host: str = "127.0.0.1"
    port: int = Field(default=4567, ge=1, le=65535)


class SessionConfig(BaseModel):
    """Configuration for the signed session cookie.

    All list state lives in this cookie, so the secret must stay stable
    across restarts or every user loses their lists.
    """

    secret_key: SecretStr = SecretStr(DEV_SESSION_SECRET)
    cookie_name: str = "listkeeper_session"
    max_age: int | None = DEFAULT_SESSION_MAX_AGE
    same_site: Literal["lax", "strict", "none"] = "lax"
    https_only: bool = False

    @property
    def uses_dev_secret(self) -> bool:
        return self.secret_key.get_secret_value() == DEV_SESSION_SECRET

    @model_validator(mode="after")
    def _check_secret(self) -> "SessionConfig":
        if not self.secret_key.get_secret_value():
            raise ValueError("session.secret_key cannot be empty")
        return self


class ListkeeperConfig(BaseModel):
    """Root configuration model."""

    server: ServerConfig = Field(default_factory=ServerConfig)
    session: SessionConfig = Field(default_factory=SessionConfig)
    debug: bool = False

    @model_validator(mode="after")
    def _warn_dev_secret(self) -> "ListkeeperConfig":
        if self.session.uses_dev_secret:
            logger.warning(
                "Using the development session secret. "
                "Set [session].secret_key or LISTKEEPER_SESSION_SECRET."
            )
        return self
