"""CLI command modules."""

from listkeeper.cli.commands import config, paths, serve

__all__ = [
    "config",
    "paths",
    "serve",
]
