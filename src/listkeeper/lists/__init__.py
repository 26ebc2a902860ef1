"""List store public API.

Public API:
- ListStore: Mutation facade over a session's lists
- SessionState: Typed view of the session payload

Types:
- TodoList, Todo
- ListError, ListValidationError, ListNotFoundError, TodoNotFoundError
"""

from listkeeper.lists.display import (
    is_item_completed,
    is_list_complete,
    list_class,
    remaining_count,
    sort_for_display,
    todos_remaining,
)
from listkeeper.lists.state import SessionState
from listkeeper.lists.store import ListStore
from listkeeper.lists.types import (
    ListError,
    ListNotFoundError,
    ListValidationError,
    Todo,
    TodoList,
    TodoNotFoundError,
)
from listkeeper.lists.validation import (
    error_for_list_name,
    error_for_todo,
    strip_name,
)

__all__ = [
    "ListError",
    "ListNotFoundError",
    "ListStore",
    "ListValidationError",
    "SessionState",
    "Todo",
    "TodoList",
    "TodoNotFoundError",
    "error_for_list_name",
    "error_for_todo",
    "is_item_completed",
    "is_list_complete",
    "list_class",
    "remaining_count",
    "sort_for_display",
    "strip_name",
    "todos_remaining",
]
