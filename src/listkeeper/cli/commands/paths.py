"""Show where listkeeper keeps its files."""

import typer

from listkeeper.cli.console import console, create_table


def register(app: typer.Typer) -> None:
    """Register the paths command."""

    @app.command()
    def paths() -> None:
        """Show resolved home, config, and log paths."""
        from listkeeper.config.paths import get_all_paths

        table = create_table("Paths", [("Name", "cyan"), ("Path", "green")])
        for name, path in get_all_paths().items():
            marker = "" if path.exists() else " [dim](missing)[/dim]"
            table.add_row(name, f"{path}{marker}")
        console.print(table)
