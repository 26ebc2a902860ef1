"""Shared test fixtures and factories."""

from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import SecretStr

from listkeeper.config.models import ListkeeperConfig, SessionConfig
from listkeeper.config.paths import ENV_VAR, get_listkeeper_home
from listkeeper.lists import ListStore, SessionState, Todo, TodoList
from listkeeper.server.app import create_app

TEST_SECRET = "test-session-secret-0123456789abcdef"

# =============================================================================
# Environment
# =============================================================================


@pytest.fixture(autouse=True)
def listkeeper_home(tmp_path: Path, monkeypatch) -> Path:
    """Point LISTKEEPER_HOME at a temp dir so tests never touch ~/.listkeeper."""
    home = tmp_path / "listkeeper-home"
    monkeypatch.setenv(ENV_VAR, str(home))
    monkeypatch.delenv("LISTKEEPER_SESSION_SECRET", raising=False)
    get_listkeeper_home.cache_clear()
    yield home
    get_listkeeper_home.cache_clear()


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture
def config() -> ListkeeperConfig:
    """Configuration with a non-default session secret."""
    return ListkeeperConfig(session=SessionConfig(secret_key=SecretStr(TEST_SECRET)))


@pytest.fixture
def config_toml_content() -> str:
    """Valid TOML config content."""
    return """
debug = true

[server]
host = "0.0.0.0"
port = 9292

[session]
secret_key = "file-secret-value-0123456789"
cookie_name = "lists"
"""


@pytest.fixture
def config_file(tmp_path: Path, config_toml_content: str) -> Path:
    """Create a temporary config file."""
    config_path = tmp_path / "config.toml"
    config_path.write_text(config_toml_content)
    return config_path


# =============================================================================
# List Store Fixtures
# =============================================================================


@pytest.fixture
def state() -> SessionState:
    return SessionState()


@pytest.fixture
def store(state: SessionState) -> ListStore:
    return ListStore(state)


@pytest.fixture
def make_list():
    """Factory for lists whose todos have the given completion flags."""

    def _make(
        list_id: int, name: str, completed: list[bool] | None = None
    ) -> TodoList:
        todos = [
            Todo(id=i, name=f"Todo {i}", completed=flag)
            for i, flag in enumerate(completed or [])
        ]
        return TodoList(id=list_id, name=name, todos=todos, next_todo_id=len(todos))

    return _make


# =============================================================================
# HTTP Fixtures
# =============================================================================


@pytest.fixture
def app(config: ListkeeperConfig) -> FastAPI:
    return create_app(config)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


@pytest.fixture
def xhr_headers() -> dict[str, str]:
    return {"X-Requested-With": "XMLHttpRequest"}


@pytest.fixture
def cli_runner():
    """Create a Typer CLI test runner with colors disabled."""
    from typer.testing import CliRunner

    return CliRunner(env={"NO_COLOR": "1"})
