# src/todo_planner/todos/todo_tool.py

"""
The `create_todo_list` tool.

The host runtime sees two things here:
- CREATE_TODO_LIST: declarative metadata (id, description, argument schema, examples)
- CreateTodoListTool.execute(args, context): the call itself

A call validates the whole candidate list first, then replaces the stored list
and renders a summary of it. A rejected call never touches the store.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ..core.ports import TodoRepo, ToolLogger
from .todo_models import TodoItem, TodoPriority, TodoStatus
from .todo_summary import DEFAULT_COMPLETED_LIMIT, render_todo_summary
from .todo_validation import TodoValidationError, parse_todos

logger = logging.getLogger(__name__)

TOOL_ID = "create_todo_list"

MSG_MISSING_TODOS = "Todos is required"


@dataclass(frozen=True, slots=True)
class ToolExample:
    description: str
    arguments: dict[str, Any]
    result: str


@dataclass(frozen=True, slots=True)
class ToolDefinition:
    id: str
    name: str
    description: str
    category: str
    tags: tuple[str, ...]
    parameters: dict[str, Any]
    examples: tuple[ToolExample, ...] = ()


@dataclass(slots=True)
class ToolContext:
    """What the host hands to a call besides its arguments."""

    logger: ToolLogger | None = None


@dataclass(slots=True)
class ToolResult:
    success: bool
    output: str = ""
    data: dict[str, Any] = field(default_factory=dict)
    error: str | None = None


def _todo_item_schema() -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "id": {"type": "string", "description": "Unique id within the list."},
            "content": {"type": "string", "description": "What needs to be done."},
            "status": {"type": "string", "enum": [s.value for s in TodoStatus]},
            "priority": {"type": "string", "enum": [p.value for p in TodoPriority]},
        },
        "required": ["id", "content", "status", "priority"],
    }


CREATE_TODO_LIST = ToolDefinition(
    id=TOOL_ID,
    name="Create Todo List",
    description="Create a new todo list for planning and tracking tasks",
    category="task",
    tags=("todo", "task", "planning", "tracking"),
    parameters={
        "type": "object",
        "properties": {
            "todos": {
                "type": "array",
                "description": "Array of todo items",
                "items": _todo_item_schema(),
            },
        },
        "required": ["todos"],
    },
    examples=(
        ToolExample(
            description="Create a todo list with two tasks",
            arguments={
                "todos": [
                    {
                        "id": "1",
                        "content": "Read all the files in the project",
                        "status": "pending",
                        "priority": "high",
                    },
                    {
                        "id": "2",
                        "content": "Synthesize the important files",
                        "status": "pending",
                        "priority": "medium",
                    },
                ]
            },
            result="Created todo list with 2 items",
        ),
        ToolExample(
            description="Create an empty todo list",
            arguments={"todos": []},
            result="Created todo list with 0 items",
        ),
    ),
)


class CreateTodoListTool:
    """Replaces the whole todo list held by `store` and reports on it."""

    definition = CREATE_TODO_LIST

    def __init__(self, store: TodoRepo, *, completed_limit: int = DEFAULT_COMPLETED_LIMIT) -> None:
        self._store = store
        self._completed_limit = completed_limit

    def run(self, todos: Any, *, tool_logger: ToolLogger | None = None) -> ToolResult:
        """
        Validate `todos`, store them and return the success result.

        Raises TodoValidationError (store untouched) if `todos` is rejected.
        """
        items: list[TodoItem] = parse_todos(todos)

        logger.debug("Creating todo list with %d items", len(items))
        if tool_logger is not None:
            tool_logger.debug(f"Creating todo list with {len(items)} items")

        self._store.replace(items)
        stored = self._store.current()

        summary = render_todo_summary(stored, completed_limit=self._completed_limit)

        logger.info("Created todo list with %d items", len(stored))
        if tool_logger is not None:
            tool_logger.info(f"Created todo list with {len(stored)} items")

        return ToolResult(
            success=True,
            output=f"Created todo list with {len(stored)} items:\n\n{summary}",
            data={"todos": [t.to_dict() for t in stored]},
        )

    async def execute(
        self, args: Mapping[str, Any], context: ToolContext | None = None
    ) -> ToolResult:
        """
        Host calling convention: rejections come back as a failed ToolResult
        carrying the validation reason instead of an exception.
        """
        tool_logger = context.logger if context is not None else None

        try:
            if "todos" not in args:
                raise TodoValidationError(MSG_MISSING_TODOS)
            return self.run(args["todos"], tool_logger=tool_logger)
        except TodoValidationError as e:
            logger.info("Rejected %s call: %s", TOOL_ID, e.reason)
            return ToolResult(success=False, error=e.reason)
