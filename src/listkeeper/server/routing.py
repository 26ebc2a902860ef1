"""Framework-neutral request handling types.

Handlers are plain functions from a RequestContext to an Outcome. The route
table pairs them with an HTTP method and path; dispatch.py binds the table to
FastAPI.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from listkeeper.lists import ListStore, SessionState


@dataclass
class RequestContext:
    """Everything a handler may read or mutate for one request."""

    state: SessionState
    params: Mapping[str, str] = field(default_factory=dict)
    form: Mapping[str, str] = field(default_factory=dict)
    is_xhr: bool = False

    @property
    def store(self) -> ListStore:
        return ListStore(self.state)

    def int_param(self, name: str) -> int | None:
        """Parse a path parameter as an id; None when absent or not an integer."""
        raw = self.params.get(name)
        if raw is None or not raw.isascii():
            return None
        if not raw.removeprefix("-").isdigit():
            return None
        return int(raw)


@dataclass
class Redirect:
    location: str
    status_code: int = 303


@dataclass
class Render:
    template: str
    context: dict[str, Any] = field(default_factory=dict)
    status_code: int = 200


@dataclass
class Text:
    body: str
    status_code: int = 200


@dataclass
class Empty:
    status_code: int = 204


Outcome = Redirect | Render | Text | Empty
Handler = Callable[[RequestContext], Outcome]


@dataclass(frozen=True)
class Route:
    method: str
    path: str
    handler: Handler
    name: str
