"""Run the listkeeper app under uvicorn."""

from __future__ import annotations

import asyncio
import logging
import os
import signal as signal_module
from typing import TYPE_CHECKING

import uvicorn

if TYPE_CHECKING:
    from fastapi import FastAPI


logger = logging.getLogger(__name__)

SHUTDOWN_SIGNALS = (signal_module.SIGTERM, signal_module.SIGINT)


class ServerRunner:
    """Serve an app with uvicorn until SIGINT/SIGTERM.

    The first signal asks uvicorn to finish in-flight requests and stop; a
    second one exits the process immediately.
    """

    def __init__(
        self,
        app: FastAPI,
        *,
        host: str,
        port: int,
    ) -> None:
        self._app = app
        self._host = host
        self._port = port
        self._signals_received = 0

    def _build_server(self) -> uvicorn.Server:
        config = uvicorn.Config(
            self._app,
            host=self._host,
            port=self._port,
            log_level="info",
            log_config=None,  # configure_logging() owns uvicorn's loggers
        )
        return uvicorn.Server(config)

    def _on_signal(self, server: uvicorn.Server) -> None:
        self._signals_received += 1
        if self._signals_received > 1:
            logger.warning("server_force_shutdown")
            os._exit(1)
        logger.info("server_shutting_down")
        server.should_exit = True

    async def run(self) -> None:
        server = self._build_server()

        loop = asyncio.get_running_loop()
        for sig in SHUTDOWN_SIGNALS:
            loop.add_signal_handler(sig, self._on_signal, server)

        logger.info(
            "server_starting",
            extra={"server.host": self._host, "server.port": self._port},
        )
        await server.serve()
        logger.info("server_stopped")
