"""List store facade.

All mutations go through ListStore, which wraps the SessionState of the
current request. Failures raise ListError subclasses; the HTTP layer turns
them into flash messages.
"""

from __future__ import annotations

import logging

from listkeeper.lists.state import SessionState
from listkeeper.lists.types import (
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

logger = logging.getLogger(__name__)


class ListStore:
    """Create, rename, and delete lists and their todos within one session."""

    def __init__(self, state: SessionState) -> None:
        self._state = state

    @property
    def lists(self) -> list[TodoList]:
        return self._state.lists

    def find_list(self, list_id: int | None) -> TodoList:
        lst = self._state.get_list(list_id) if list_id is not None else None
        if lst is None:
            raise ListNotFoundError(list_id)
        return lst

    def create_list(self, name: str) -> TodoList:
        name = strip_name(name)
        if error := error_for_list_name(name, self._state.lists):
            raise ListValidationError(error)

        lst = TodoList(id=self._state.next_list_id, name=name)
        self._state.next_list_id += 1
        self._state.lists.append(lst)
        logger.info("list_created", extra={"list.id": lst.id})
        return lst

    def rename_list(self, list_id: int | None, name: str) -> TodoList:
        lst = self.find_list(list_id)
        name = strip_name(name)
        if error := error_for_list_name(name, self._state.lists, exclude_id=lst.id):
            raise ListValidationError(error)

        lst.name = name
        logger.info("list_renamed", extra={"list.id": lst.id})
        return lst

    def delete_list(self, list_id: int | None) -> TodoList:
        lst = self.find_list(list_id)
        self._state.lists.remove(lst)
        logger.info("list_deleted", extra={"list.id": lst.id})
        return lst

    def add_todo(self, list_id: int | None, text: str) -> Todo:
        lst = self.find_list(list_id)
        text = strip_name(text)
        if error := error_for_todo(text):
            raise ListValidationError(error)

        todo = Todo(id=lst.next_todo_id, name=text)
        lst.next_todo_id += 1
        lst.todos.append(todo)
        logger.info("todo_created", extra={"list.id": lst.id, "todo.id": todo.id})
        return todo

    def set_todo_completed(
        self, list_id: int | None, todo_id: int | None, completed: bool
    ) -> Todo:
        lst = self.find_list(list_id)
        todo = _require_todo(lst, todo_id)
        todo.completed = completed
        logger.info(
            "todo_updated",
            extra={"list.id": lst.id, "todo.id": todo.id, "todo.completed": completed},
        )
        return todo

    def set_all_completed(self, list_id: int | None) -> TodoList:
        lst = self.find_list(list_id)
        for todo in lst.todos:
            todo.completed = True
        logger.info("todos_all_completed", extra={"list.id": lst.id})
        return lst

    def delete_todo(self, list_id: int | None, todo_id: int | None) -> Todo:
        lst = self.find_list(list_id)
        todo = _require_todo(lst, todo_id)
        lst.todos.remove(todo)
        logger.info("todo_deleted", extra={"list.id": lst.id, "todo.id": todo.id})
        return todo


def _require_todo(lst: TodoList, todo_id: int | None) -> Todo:
    todo = lst.get_todo(todo_id) if todo_id is not None else None
    if todo is None:
        raise TodoNotFoundError(lst.id, todo_id)
    return todo
