# tests/test_bootstrap.py

from __future__ import annotations

import logging
from pathlib import Path
from types import SimpleNamespace

from todo_planner.cli.bootstrap import create_initial_state
from todo_planner.logging_setup import setup_logging
from todo_planner.todos.todo_api import create_todo_list, describe_todos

from .fakes import make_todo


def test_create_initial_state_wires_tool_to_store(settings: SimpleNamespace) -> None:
    state = create_initial_state(settings=settings)

    assert settings.data_dir.is_dir()
    create_todo_list(state, [make_todo("1")])
    assert [t.id for t in state.todo_store.current()] == ["1"]


def test_states_do_not_share_todos(settings: SimpleNamespace) -> None:
    first = create_initial_state(settings=settings)
    second = create_initial_state(settings=settings)

    create_todo_list(first, [make_todo("1")])

    assert describe_todos(second) == "No todos"


def test_describe_todos_uses_configured_completed_limit(settings: SimpleNamespace) -> None:
    settings.summary_completed_limit = 1
    state = create_initial_state(settings=settings)

    create_todo_list(state, [make_todo("a", status="completed"), make_todo("b", status="completed")])

    assert "  ... and 1 more" in describe_todos(state)


def test_setup_logging_writes_file(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    try:
        log_file = setup_logging(log_dir=tmp_path / "logs", console_level=logging.WARNING)
        logging.getLogger("todo_planner.test").debug("hello file")
        for h in root.handlers:
            h.flush()

        assert log_file == tmp_path / "logs" / "todo_planner.log"
        assert "hello file" in log_file.read_text("utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)
        logging.captureWarnings(False)
