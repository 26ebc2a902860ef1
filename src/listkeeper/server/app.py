"""FastAPI application for the listkeeper server."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from starlette.middleware.sessions import SessionMiddleware

from listkeeper import __version__
from listkeeper.server.dispatch import build_router, install_template_helpers
from listkeeper.server.routes import health
from listkeeper.server.routes.lists import ROUTES

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from listkeeper.config import ListkeeperConfig

logger = logging.getLogger(__name__)

PACKAGE_DIR = Path(__file__).parent
TEMPLATES_DIR = PACKAGE_DIR / "templates"
STATIC_DIR = PACKAGE_DIR / "static"


class ListkeeperServer:
    """Main server application.

    Owns the FastAPI app, its session middleware, and the template
    environment shared by all list routes.
    """

    def __init__(self, config: "ListkeeperConfig"):
        self._config = config
        self._templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
        install_template_helpers(self._templates)
        self._app = self._create_app()

    @property
    def app(self) -> FastAPI:
        """Get the FastAPI application."""
        return self._app

    def _create_app(self) -> FastAPI:
        """Create and configure the FastAPI app."""

        @asynccontextmanager
        async def lifespan(app: FastAPI) -> "AsyncIterator[None]":
            logger.info("Starting listkeeper server")
            yield
            logger.info("Shutting down listkeeper server")

        app = FastAPI(
            title="listkeeper",
            description="Session-backed todo lists",
            version=__version__,
            debug=self._config.debug,
            lifespan=lifespan,
        )

        session = self._config.session
        app.add_middleware(
            SessionMiddleware,
            secret_key=session.secret_key.get_secret_value(),
            session_cookie=session.cookie_name,
            max_age=session.max_age,
            same_site=session.same_site,
            https_only=session.https_only,
        )

        app.state.server = self
        app.state.config = self._config

        app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
        app.include_router(health.router, tags=["health"])
        app.include_router(build_router(ROUTES, self._templates))

        return app


def create_app(config: "ListkeeperConfig | None" = None) -> FastAPI:
    """Create the FastAPI application."""
    if config is None:
        from listkeeper.config import get_default_config

        config = get_default_config()
    return ListkeeperServer(config).app
