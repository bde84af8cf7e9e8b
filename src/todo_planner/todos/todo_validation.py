# src/todo_planner/todos/todo_validation.py

"""
Validation of a candidate todo list.

The candidate is checked as a whole before anything is stored. Checks run in a
fixed order and stop at the first violation, scanning records front to back,
so the reported reason always names the earliest problem.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .todo_models import TodoItem, TodoPriority, TodoStatus

MSG_NOT_ARRAY = "Todos must be an array"
MSG_NOT_OBJECT = "Each todo must be an object"
MSG_BAD_ID = "Each todo must have a string id"
MSG_DUPLICATE_ID = "Duplicate todo id: {id}"
MSG_BAD_CONTENT = "Each todo must have content"
MSG_BAD_STATUS = "Each todo status must be pending, in_progress, or completed"
MSG_BAD_PRIORITY = "Each todo priority must be high, medium, or low"

_STATUS_VALUES = frozenset(s.value for s in TodoStatus)
_PRIORITY_VALUES = frozenset(p.value for p in TodoPriority)


class TodoValidationError(ValueError):
    """A candidate todo list was rejected; `reason` is the user-facing message."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


def _is_non_empty_str(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def check_todos(candidate: Any) -> str | None:
    """Return the rejection reason for `candidate`, or None if it is acceptable."""
    if not isinstance(candidate, (list, tuple)):
        return MSG_NOT_ARRAY

    seen: set[str] = set()

    for todo in candidate:
        if not isinstance(todo, Mapping):
            return MSG_NOT_OBJECT

        todo_id = todo.get("id")
        if not _is_non_empty_str(todo_id):
            return MSG_BAD_ID

        if todo_id in seen:
            return MSG_DUPLICATE_ID.format(id=todo_id)
        seen.add(todo_id)

        if not _is_non_empty_str(todo.get("content")):
            return MSG_BAD_CONTENT

        status = todo.get("status")
        if not isinstance(status, str) or status not in _STATUS_VALUES:
            return MSG_BAD_STATUS

        priority = todo.get("priority")
        if not isinstance(priority, str) or priority not in _PRIORITY_VALUES:
            return MSG_BAD_PRIORITY

    return None


def validate_todos(candidate: Any) -> None:
    """Raise TodoValidationError if `candidate` is not an acceptable todo list."""
    reason = check_todos(candidate)
    if reason is not None:
        raise TodoValidationError(reason)


def parse_todos(candidate: Any) -> list[TodoItem]:
    """Validate `candidate` and convert it into records (field-for-field copies)."""
    validate_todos(candidate)
    return [TodoItem.from_mapping(todo) for todo in candidate]
