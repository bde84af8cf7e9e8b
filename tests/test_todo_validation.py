# tests/test_todo_validation.py

from __future__ import annotations

import pytest

from todo_planner.todos.todo_models import TodoItem, TodoPriority, TodoStatus
from todo_planner.todos.todo_validation import (
    TodoValidationError,
    check_todos,
    parse_todos,
    validate_todos,
)

from .fakes import make_todo


@pytest.mark.parametrize("candidate", [None, {"todos": []}, "todos", 3, {"id": "1"}])
def test_rejects_non_array(candidate) -> None:
    assert check_todos(candidate) == "Todos must be an array"


@pytest.mark.parametrize("item", [None, "1", 7, ["1", "x"]])
def test_rejects_non_object_item(item) -> None:
    assert check_todos([make_todo("1"), item]) == "Each todo must be an object"


@pytest.mark.parametrize("todo_id", [None, "", 1, ["1"]])
def test_rejects_missing_or_invalid_id(todo_id) -> None:
    todo = make_todo("x")
    todo["id"] = todo_id
    assert check_todos([todo]) == "Each todo must have a string id"


def test_rejects_item_without_id_key() -> None:
    todo = make_todo("x")
    del todo["id"]
    assert check_todos([todo]) == "Each todo must have a string id"


def test_rejects_duplicate_id_naming_it() -> None:
    candidate = [make_todo("1"), make_todo("2"), make_todo("1")]
    assert check_todos(candidate) == "Duplicate todo id: 1"


@pytest.mark.parametrize("content", [None, "", 42])
def test_rejects_missing_content(content) -> None:
    todo = make_todo("1")
    todo["content"] = content
    assert check_todos([todo]) == "Each todo must have content"


@pytest.mark.parametrize("status", [None, "", "done", "PENDING", ["pending"]])
def test_rejects_invalid_status(status) -> None:
    todo = make_todo("1")
    todo["status"] = status
    assert check_todos([todo]) == "Each todo status must be pending, in_progress, or completed"


@pytest.mark.parametrize("priority", [None, "", "urgent", "High"])
def test_rejects_invalid_priority(priority) -> None:
    todo = make_todo("1")
    todo["priority"] = priority
    assert check_todos([todo]) == "Each todo priority must be high, medium, or low"


def test_first_violation_in_scan_order_wins() -> None:
    # Item 1 has a bad priority, item 2 a bad id: item 1 is reported.
    first = make_todo("1", priority="critical")
    second = make_todo("")
    assert check_todos([first, second]) == "Each todo priority must be high, medium, or low"

    # Within one item, the id check runs before the content check.
    broken = {"id": "", "content": ""}
    assert check_todos([broken]) == "Each todo must have a string id"


def test_duplicate_reported_before_later_field_errors() -> None:
    dup = make_todo("1", status="bogus")
    assert check_todos([make_todo("1"), dup]) == "Duplicate todo id: 1"


def test_empty_list_is_valid() -> None:
    assert check_todos([]) is None
    validate_todos([])
    assert parse_todos([]) == []


def test_validate_raises_with_reason() -> None:
    with pytest.raises(TodoValidationError) as exc_info:
        validate_todos([make_todo("a"), make_todo("a")])
    assert exc_info.value.reason == "Duplicate todo id: a"
    assert str(exc_info.value) == "Duplicate todo id: a"


def test_parse_copies_known_fields_only() -> None:
    raw = make_todo("1", content="Write docs", status="in_progress", priority="high")
    raw["assignee"] = "someone"

    (item,) = parse_todos([raw])

    assert item == TodoItem(
        id="1",
        content="Write docs",
        status=TodoStatus.IN_PROGRESS,
        priority=TodoPriority.HIGH,
    )
    assert item.to_dict() == {
        "id": "1",
        "content": "Write docs",
        "status": "in_progress",
        "priority": "high",
    }


def test_tuple_candidate_is_accepted() -> None:
    items = parse_todos((make_todo("1"), make_todo("2")))
    assert [t.id for t in items] == ["1", "2"]
