"""Server command for running the listkeeper web app."""

import asyncio
import logging
from pathlib import Path
from typing import Annotated

import typer

logger = logging.getLogger(__name__)


def register(app: typer.Typer) -> None:
    """Register the serve command."""

    @app.command()
    def serve(
        config: Annotated[
            Path | None,
            typer.Option(
                "--config",
                "-c",
                help="Path to configuration file",
            ),
        ] = None,
        host: Annotated[
            str | None,
            typer.Option(
                "--host",
                "-h",
                help="Host to bind to (default: from config)",
            ),
        ] = None,
        port: Annotated[
            int | None,
            typer.Option(
                "--port",
                "-p",
                help="Port to bind to (default: from config)",
            ),
        ] = None,
        log_to_file: Annotated[
            bool,
            typer.Option(
                "--log-to-file/--no-log-to-file",
                help="Also write JSONL logs under $LISTKEEPER_HOME/logs",
            ),
        ] = True,
    ) -> None:
        """Start the listkeeper web server."""
        try:
            asyncio.run(_run_server(config, host, port, log_to_file))
        except KeyboardInterrupt:
            # Use print here since logging may not be configured yet
            print("\nServer stopped")


def _load_server_config(config_path: Path | None):
    """Load config, falling back to defaults when no file was asked for."""
    from listkeeper.config import get_default_config, load_config

    try:
        return load_config(config_path)
    except FileNotFoundError:
        if config_path is not None:
            raise
        logger.info("No config file found, using defaults")
        return get_default_config()


async def _run_server(
    config_path: Path | None = None,
    host: str | None = None,
    port: int | None = None,
    log_to_file: bool = True,
) -> None:
    """Run the server asynchronously."""
    from listkeeper.logging import configure_logging

    configure_logging(use_rich=True, log_to_file=log_to_file)

    from listkeeper.server.app import create_app
    from listkeeper.server.runner import ServerRunner

    logger.info("Loading configuration")
    listkeeper_config = _load_server_config(config_path)

    bind_host = host or listkeeper_config.server.host
    bind_port = port or listkeeper_config.server.port

    logger.info("Creating server")
    fastapi_app = create_app(listkeeper_config)

    logger.info(f"Server starting on http://{bind_host}:{bind_port}")
    runner = ServerRunner(fastapi_app, host=bind_host, port=bind_port)
    await runner.run()
