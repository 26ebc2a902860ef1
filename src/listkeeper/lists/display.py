"""Pure helpers used when rendering lists and todos."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from listkeeper.lists.types import Todo, TodoList

Item = TypeVar("Item", Todo, TodoList)


def is_list_complete(lst: TodoList) -> bool:
    """A list is complete when it has todos and every one is completed.

    An empty list is never complete.
    """
    return bool(lst.todos) and all(todo.completed for todo in lst.todos)


def is_item_completed(item: Todo | TodoList) -> bool:
    if isinstance(item, TodoList):
        return is_list_complete(item)
    return item.completed


def remaining_count(lst: TodoList) -> tuple[int, int]:
    """Return ``(incomplete, total)`` todo counts."""
    incomplete = sum(1 for todo in lst.todos if not todo.completed)
    return incomplete, len(lst.todos)


def todos_remaining(lst: TodoList) -> str:
    incomplete, total = remaining_count(lst)
    return f"{incomplete}/{total}"


def list_class(lst: TodoList) -> str | None:
    return "complete" if is_list_complete(lst) else None


def sort_for_display(items: Sequence[Item]) -> list[Item]:
    """Order incomplete items before completed ones, keeping relative order."""
    incomplete = [item for item in items if not is_item_completed(item)]
    completed = [item for item in items if is_item_completed(item)]
    return incomplete + completed
