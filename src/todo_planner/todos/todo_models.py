# src/todo_planner/todos/todo_models.py

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class TodoStatus(StrEnum):
    """Todo lifecycle status, as set by the caller."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class TodoPriority(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True, slots=True)
class TodoItem:
    id: str
    content: str
    status: TodoStatus
    priority: TodoPriority

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> TodoItem:
        """
        Copy the four known fields out of an already validated mapping.

        Any other keys the caller sent are dropped.
        """
        return cls(
            id=raw["id"],
            content=raw["content"],
            status=TodoStatus(raw["status"]),
            priority=TodoPriority(raw["priority"]),
        )

    def to_dict(self) -> dict[str, str]:
        return {
            "id": self.id,
            "content": self.content,
            "status": self.status.value,
            "priority": self.priority.value,
        }
