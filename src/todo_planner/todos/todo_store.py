# src/todo_planner/todos/todo_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable

from .todo_models import TodoItem

logger = logging.getLogger(__name__)


class TodoStore:
    """
    In-memory holder of the current todo list.

    One instance per host session (owned by AppState). The list starts empty
    and is only ever replaced as a whole:
    - replace() builds the new tuple first, then swaps it in with one assignment
    - current() hands out a fresh list, so readers cannot mutate the store

    Thread-safety:
    - none; callers serialize replace() calls themselves
    """

    def __init__(self) -> None:
        self._todos: tuple[TodoItem, ...] = ()

    def replace(self, todos: Iterable[TodoItem]) -> None:
        new_todos = tuple(todos)
        previous = len(self._todos)
        self._todos = new_todos
        logger.debug("TodoStore replaced list old=%s new=%s", previous, len(new_todos))

    def current(self) -> list[TodoItem]:
        return list(self._todos)

    def count(self) -> int:
        return len(self._todos)
