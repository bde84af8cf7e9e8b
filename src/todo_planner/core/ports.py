# src/todo_planner/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The tool depends on Protocols instead of concrete implementations.
This keeps the store and the host's logger swappable and makes testing easier.
"""

from collections.abc import Iterable
from typing import Protocol

from ..todos.todo_models import TodoItem


class TodoRepo(Protocol):
    """Holder of the current todo list (replaced as a whole, never patched)."""

    def replace(self, todos: Iterable[TodoItem]) -> None: ...
    def current(self) -> list[TodoItem]: ...
    def count(self) -> int: ...


class ToolLogger(Protocol):
    """
    Host-side diagnostic sink handed to a tool call.

    Optional: tools must behave the same when the host passes none.
    Messages arrive fully formatted. A stdlib logging.Logger fits.
    """

    def debug(self, msg: str) -> None: ...
    def info(self, msg: str) -> None: ...
