# src/todo_planner/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires the todo store and the tool into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..todos.todo_store import TodoStore
from ..todos.todo_summary import DEFAULT_COMPLETED_LIMIT
from ..todos.todo_tool import CreateTodoListTool

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    data_dir = getattr(settings, "data_dir", None)
    if data_dir is not None:
        data_dir.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    completed_limit = int(getattr(settings, "summary_completed_limit", DEFAULT_COMPLETED_LIMIT))

    store = TodoStore()
    state = AppState(
        settings=settings,
        todo_store=store,
        todo_tool=CreateTodoListTool(store, completed_limit=completed_limit),
    )
    logger.debug("AppState ready (completed_limit=%s)", completed_limit)
    return state
