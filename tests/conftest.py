# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_planner.cli.bootstrap import create_initial_state
from todo_planner.core.state import AppState
from todo_planner.todos.todo_store import TodoStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="todo-planner-test",
        log_level="DEBUG",
        console_enabled=False,
        data_dir=tmp_path / "data",
        summary_completed_limit=5,
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    return create_initial_state(settings=settings)


@pytest.fixture()
def store() -> TodoStore:
    return TodoStore()
