# src/todo_planner/todos/todo_summary.py

"""
Text summary of a todo list.

Layout (each block only when non-empty, blocks separated by one blank line):
- high priority open items (in_progress first)
- other open items (medium before low, in_progress first within a priority)
- completed items (first N, then "... and K more")
- totals line (always)

Sorting is stable: items that compare equal keep the order the caller sent.
"""

from __future__ import annotations

from collections.abc import Sequence

from .todo_models import TodoItem, TodoPriority, TodoStatus

EMPTY_SUMMARY = "No todos"

DEFAULT_COMPLETED_LIMIT = 5

# Icons for open items only; completed items render with a check mark.
STATUS_ICONS: dict[TodoStatus, str] = {
    TodoStatus.IN_PROGRESS: "🔄",
    TodoStatus.PENDING: "⏳",
}

PRIORITY_ICONS: dict[TodoPriority, str] = {
    TodoPriority.MEDIUM: "🟡",
    TodoPriority.LOW: "🟢",
}

# Lower rank sorts first.
STATUS_RANK: dict[TodoStatus, int] = {
    TodoStatus.IN_PROGRESS: 0,
    TodoStatus.PENDING: 1,
}

PRIORITY_RANK: dict[TodoPriority, int] = {
    TodoPriority.MEDIUM: 0,
    TodoPriority.LOW: 1,
}


def _group_by_status(todos: Sequence[TodoItem]) -> dict[TodoStatus, list[TodoItem]]:
    groups: dict[TodoStatus, list[TodoItem]] = {status: [] for status in TodoStatus}
    for todo in todos:
        groups[todo.status].append(todo)
    return groups


def _urgent_block(open_todos: list[TodoItem]) -> list[str]:
    urgent = [t for t in open_todos if t.priority is TodoPriority.HIGH]
    if not urgent:
        return []

    urgent.sort(key=lambda t: STATUS_RANK[t.status])

    lines = ["🔴 High Priority:"]
    for todo in urgent:
        lines.append(f"  {STATUS_ICONS[todo.status]} [{todo.id}] {todo.content}")
    return lines


def _other_block(open_todos: list[TodoItem]) -> list[str]:
    other = [t for t in open_todos if t.priority is not TodoPriority.HIGH]
    if not other:
        return []

    other.sort(key=lambda t: (PRIORITY_RANK[t.priority], STATUS_RANK[t.status]))

    lines = ["📋 Other Tasks:"]
    for todo in other:
        status_icon = STATUS_ICONS[todo.status]
        priority_icon = PRIORITY_ICONS[todo.priority]
        lines.append(f"  {status_icon} {priority_icon} [{todo.id}] {todo.content}")
    return lines


def _completed_block(completed: list[TodoItem], limit: int) -> list[str]:
    if not completed:
        return []

    lines = [f"✅ Completed ({len(completed)}):"]
    for todo in completed[:limit]:
        lines.append(f"  ✓ [{todo.id}] {todo.content}")
    if len(completed) > limit:
        lines.append(f"  ... and {len(completed) - limit} more")
    return lines


def render_todo_summary(
    todos: Sequence[TodoItem],
    *,
    completed_limit: int = DEFAULT_COMPLETED_LIMIT,
) -> str:
    """Render `todos` as a multi-line report. Does not reorder `todos` itself."""
    if not todos:
        return EMPTY_SUMMARY

    by_status = _group_by_status(todos)
    pending = by_status[TodoStatus.PENDING]
    in_progress = by_status[TodoStatus.IN_PROGRESS]
    completed = by_status[TodoStatus.COMPLETED]

    open_todos = [*pending, *in_progress]

    blocks = [
        _urgent_block(open_todos),
        _other_block(open_todos),
        _completed_block(completed, completed_limit),
        [
            f"Total: {len(todos)} | Pending: {len(pending)} | "
            f"In Progress: {len(in_progress)} | Completed: {len(completed)}"
        ],
    ]

    return "\n\n".join("\n".join(block) for block in blocks if block)
