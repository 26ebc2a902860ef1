"""Tests for CLI commands."""

import pytest

from listkeeper.cli.app import app
from listkeeper.cli.commands.serve import _load_server_config


class TestConfigCommand:
    """Tests for 'listkeeper config' command."""

    def test_config_without_action_shows_help(self, cli_runner):
        result = cli_runner.invoke(app, ["config"])
        assert result.exit_code == 0
        assert "Manage configuration" in result.stdout

    def test_config_show_displays_content(self, cli_runner, config_file):
        result = cli_runner.invoke(app, ["config", "show", "--path", str(config_file)])
        assert result.exit_code == 0
        assert "[server]" in result.stdout

    def test_config_show_missing_file(self, cli_runner, tmp_path):
        result = cli_runner.invoke(
            app, ["config", "show", "--path", str(tmp_path / "missing.toml")]
        )
        assert result.exit_code == 1
        assert "not found" in result.stdout

    def test_config_show_defaults_to_home(self, cli_runner, listkeeper_home):
        listkeeper_home.mkdir(parents=True)
        (listkeeper_home / "config.toml").write_text("debug = true\n")

        result = cli_runner.invoke(app, ["config", "show"])
        assert result.exit_code == 0
        assert "debug = true" in result.stdout

    def test_config_validate_success(self, cli_runner, config_file):
        result = cli_runner.invoke(
            app, ["config", "validate", "--path", str(config_file)]
        )
        assert result.exit_code == 0
        assert "Configuration is valid!" in result.stdout
        assert "0.0.0.0:9292" in result.stdout
        assert "file-secret-value" not in result.stdout

    def test_config_validate_flags_dev_secret(self, cli_runner, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("[server]\nport = 8000\n")

        result = cli_runner.invoke(app, ["config", "validate", "--path", str(path)])
        assert result.exit_code == 0
        assert "development default" in result.stdout

    def test_config_validate_invalid_toml(self, cli_runner, tmp_path):
        invalid_file = tmp_path / "invalid.toml"
        invalid_file.write_text("not valid toml [[[")

        result = cli_runner.invoke(
            app, ["config", "validate", "--path", str(invalid_file)]
        )
        assert result.exit_code == 1
        assert "Invalid TOML" in result.stdout

    def test_config_validate_invalid_config(self, cli_runner, tmp_path):
        invalid_config = tmp_path / "bad_config.toml"
        invalid_config.write_text("""
[server]
port = 99999
""")
        result = cli_runner.invoke(
            app, ["config", "validate", "--path", str(invalid_config)]
        )
        assert result.exit_code == 1
        assert "validation failed" in result.stdout.lower()
        assert "server.port" in result.stdout

    def test_config_validate_missing_file(self, cli_runner, tmp_path):
        result = cli_runner.invoke(
            app, ["config", "validate", "--path", str(tmp_path / "missing.toml")]
        )
        assert result.exit_code == 1
        assert "not found" in result.stdout

    def test_config_unknown_action(self, cli_runner):
        result = cli_runner.invoke(app, ["config", "unknown"])
        assert result.exit_code == 1
        assert "Unknown action" in result.stdout


class TestPathsCommand:
    def test_lists_paths(self, cli_runner, listkeeper_home):
        result = cli_runner.invoke(app, ["paths"])
        assert result.exit_code == 0
        for name in ("home", "config", "logs"):
            assert name in result.stdout
        assert "missing" in result.stdout


class TestServeCommand:
    def test_passes_options_through(self, cli_runner, monkeypatch, config_file):
        seen: list[tuple] = []

        async def _fake_run_server(config_path, host, port, log_to_file):
            seen.append((config_path, host, port, log_to_file))

        monkeypatch.setattr(
            "listkeeper.cli.commands.serve._run_server", _fake_run_server
        )

        result = cli_runner.invoke(
            app,
            [
                "serve",
                "--config",
                str(config_file),
                "--port",
                "8080",
                "--no-log-to-file",
            ],
        )
        assert result.exit_code == 0
        assert seen == [(config_file, None, 8080, False)]

    def test_missing_default_config_uses_defaults(self, monkeypatch, tmp_path):
        monkeypatch.setattr(
            "listkeeper.config.loader._get_default_config_paths",
            lambda: [tmp_path / "nope.toml"],
        )
        config = _load_server_config(None)
        assert config.session.uses_dev_secret

    def test_missing_explicit_config_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            _load_server_config(tmp_path / "missing.toml")
