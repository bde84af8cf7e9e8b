# src/todo_planner/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..todos.todo_store import TodoStore
from ..todos.todo_tool import CreateTodoListTool


@dataclass
class AppState:
    # Settings object (real Settings or a test SimpleNamespace).
    settings: Any

    # One store per host session; the tool writes into it.
    todo_store: TodoStore
    todo_tool: CreateTodoListTool
