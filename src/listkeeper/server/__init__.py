"""HTTP server for listkeeper."""

from listkeeper.server.app import ListkeeperServer, create_app

__all__ = ["ListkeeperServer", "create_app"]
