"""List store public types.

Lists and todos are plain dataclasses that round-trip through the JSON-safe
dicts stored in the session cookie.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)


class ListError(Exception):
    """Base error for list store operations."""


class ListValidationError(ListError, ValueError):
    """A list or todo name failed validation."""


class ListNotFoundError(ListError, LookupError):
    """No list with the requested id exists in the session."""

    def __init__(self, list_id: int | None) -> None:
        super().__init__(f"list {list_id} not found")
        self.list_id = list_id


class TodoNotFoundError(ListError, LookupError):
    """No todo with the requested id exists in the list."""

    def __init__(self, list_id: int, todo_id: int | None) -> None:
        super().__init__(f"todo {todo_id} not found in list {list_id}")
        self.list_id = list_id
        self.todo_id = todo_id


@dataclass
class Todo:
    """A single task inside a list."""

    id: int
    name: str
    completed: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "completed": self.completed}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Todo:
        return cls(
            id=int(data["id"]),
            name=str(data.get("name", "")),
            completed=bool(data.get("completed", False)),
        )


@dataclass
class TodoList:
    """A named, ordered collection of todos."""

    id: int
    name: str
    todos: list[Todo] = field(default_factory=list)
    next_todo_id: int = 0

    def get_todo(self, todo_id: int) -> Todo | None:
        for todo in self.todos:
            if todo.id == todo_id:
                return todo
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "todos": [todo.to_dict() for todo in self.todos],
            "next_todo_id": self.next_todo_id,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TodoList:
        todos: list[Todo] = []
        payloads = data.get("todos")
        for payload in payloads if isinstance(payloads, list) else []:
            try:
                todos.append(Todo.from_dict(payload))
            except (AttributeError, KeyError, TypeError, ValueError):
                logger.warning("todo_parse_failed", extra={"list.id": data.get("id")})
        # Never hand out an id that is already taken.
        next_todo_id = max(
            parse_counter(data.get("next_todo_id")), next_item_id(todos)
        )
        return cls(
            id=int(data["id"]),
            name=str(data.get("name", "")),
            todos=todos,
            next_todo_id=next_todo_id,
        )


def next_item_id(items: list[Todo] | list[TodoList]) -> int:
    """Return one past the highest id in ``items``, or 0 when empty."""
    ids = [item.id for item in items]
    return max(ids) + 1 if ids else 0


def parse_counter(value: Any) -> int:
    """Read a stored id counter; anything that is not a whole number counts as 0."""
    if isinstance(value, bool):
        return 0
    try:
        return max(int(value), 0)
    except (TypeError, ValueError):
        return 0
