"""Main CLI application."""

import typer

from listkeeper.cli.commands import config, paths, serve

app = typer.Typer(
    name="listkeeper",
    help="listkeeper - Session-backed todo lists",
    no_args_is_help=True,
)

serve.register(app)
config.register(app)
paths.register(app)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
