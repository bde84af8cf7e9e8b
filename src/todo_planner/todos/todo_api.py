# src/todo_planner/todos/todo_api.py

from __future__ import annotations

from typing import Any

from ..core.state import AppState
from .todo_summary import DEFAULT_COMPLETED_LIMIT, render_todo_summary
from .todo_tool import ToolResult


def create_todo_list(state: AppState, todos: Any) -> ToolResult:
    """
    Convenience helper: run the create_todo_list tool against state.todo_store.

    Raises TodoValidationError if the list is rejected.
    """
    return state.todo_tool.run(todos)


def describe_todos(state: AppState) -> str:
    """Render the current list without changing it."""
    limit = int(getattr(state.settings, "summary_completed_limit", DEFAULT_COMPLETED_LIMIT))
    return render_todo_summary(state.todo_store.current(), completed_limit=limit)
