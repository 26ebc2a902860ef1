"""Per-session list state.

The session cookie holds a JSON-safe dict. SessionState hydrates it into
typed lists at the start of a request and writes it back at the end, so the
store never touches the raw session mapping.
"""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from dataclasses import dataclass, field
from typing import Any

from listkeeper.lists.types import TodoList, next_item_id, parse_counter

logger = logging.getLogger(__name__)

LISTS_KEY = "lists"
NEXT_LIST_ID_KEY = "next_list_id"
ERROR_KEY = "error"
SUCCESS_KEY = "success"


@dataclass
class SessionState:
    """Lists and flash messages owned by one session."""

    lists: list[TodoList] = field(default_factory=list)
    next_list_id: int = 0
    error: str | None = None
    success: str | None = None

    def get_list(self, list_id: int) -> TodoList | None:
        for lst in self.lists:
            if lst.id == list_id:
                return lst
        return None

    def flash_error(self, message: str) -> None:
        self.error = message

    def flash_success(self, message: str) -> None:
        self.success = message

    def pop_flash(self) -> dict[str, str | None]:
        """Return pending flash messages and clear them."""
        flash = {"error": self.error, "success": self.success}
        self.error = None
        self.success = None
        return flash

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            LISTS_KEY: [lst.to_dict() for lst in self.lists],
            NEXT_LIST_ID_KEY: self.next_list_id,
        }
        if self.error is not None:
            data[ERROR_KEY] = self.error
        if self.success is not None:
            data[SUCCESS_KEY] = self.success
        return data

    @classmethod
    def from_dict(cls, data: MutableMapping[str, Any]) -> SessionState:
        lists: list[TodoList] = []
        payloads = data.get(LISTS_KEY)
        for payload in payloads if isinstance(payloads, list) else []:
            try:
                lists.append(TodoList.from_dict(payload))
            except (AttributeError, KeyError, TypeError, ValueError):
                logger.warning("list_parse_failed", exc_info=True)
        return cls(
            lists=lists,
            next_list_id=max(
                parse_counter(data.get(NEXT_LIST_ID_KEY)), next_item_id(lists)
            ),
            error=data.get(ERROR_KEY),
            success=data.get(SUCCESS_KEY),
        )

    def save(self, session: MutableMapping[str, Any]) -> None:
        """Replace the contents of ``session`` with this state."""
        for key in (LISTS_KEY, NEXT_LIST_ID_KEY, ERROR_KEY, SUCCESS_KEY):
            session.pop(key, None)
        session.update(self.to_dict())
