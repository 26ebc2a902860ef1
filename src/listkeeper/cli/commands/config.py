"""Configuration management commands."""

from pathlib import Path
from typing import Annotated

import click
import typer

from listkeeper.cli.console import (
    console,
    create_table,
    error,
    field_errors,
    success,
)


def register(app: typer.Typer) -> None:
    """Register the config command."""

    @app.command()
    def config(
        action: Annotated[
            str | None,
            typer.Argument(help="Action: show, validate"),
        ] = None,
        path: Annotated[
            Path | None,
            typer.Option(
                "--path",
                "-p",
                help="Path to config file (default: $LISTKEEPER_HOME/config.toml)",
            ),
        ] = None,
    ) -> None:
        """Manage configuration."""
        if action is None:
            ctx = click.get_current_context()
            click.echo(ctx.get_help())
            raise typer.Exit(0)

        from pydantic import ValidationError
        from rich.syntax import Syntax

        from listkeeper.config import ConfigError, load_config
        from listkeeper.config.paths import get_config_path

        expanded_path = path.expanduser() if path else get_config_path()

        if action == "show":
            if not expanded_path.exists():
                error(f"Config file not found: {expanded_path}")
                raise typer.Exit(1)

            content = expanded_path.read_text()
            syntax = Syntax(content, "toml", theme="monokai", line_numbers=True)
            console.print(f"[bold]Config file: {expanded_path}[/bold]\n")
            console.print(syntax)

        elif action == "validate":
            if not expanded_path.exists():
                error(f"Config file not found: {expanded_path}")
                raise typer.Exit(1)

            try:
                config_obj = load_config(expanded_path)
            except ValidationError as e:
                error("Configuration validation failed:")
                console.print()
                field_errors(e.errors())
                raise typer.Exit(1) from None
            except ConfigError as e:
                error(str(e))
                raise typer.Exit(1) from None

            table = create_table(
                "Configuration Summary", [("Setting", "cyan"), ("Value", "green")]
            )
            table.add_row(
                "Server", f"{config_obj.server.host}:{config_obj.server.port}"
            )
            table.add_row("Session cookie", config_obj.session.cookie_name)
            table.add_row(
                "Session secret",
                "[yellow]development default[/yellow]"
                if config_obj.session.uses_dev_secret
                else "configured",
            )
            table.add_row("Debug", str(config_obj.debug))

            success("Configuration is valid!")
            console.print()
            console.print(table)

        else:
            error(f"Unknown action: {action}")
            console.print("Valid actions: show, validate")
            raise typer.Exit(1)
