# src/todo_planner/cli/commands.py

from __future__ import annotations

import inspect
import json
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..todos.todo_api import create_todo_list, describe_todos
from ..todos.todo_validation import TodoValidationError

CommandEmitter = Callable[[str], None]
CommandHandler3 = Callable[[AppState, list[str], str], str]
CommandHandler4 = Callable[[AppState, list[str], str, CommandEmitter | None], str]
CommandHandler = CommandHandler3 | CommandHandler4

logger = logging.getLogger(__name__)

PLAN_USAGE = 'Usage: /plan [{"id": "1", "content": "...", "status": "pending", "priority": "high"}, ...]'


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /todos, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Handlers get both the split args and the raw text after the command name.
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split(maxsplit=1)
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        raw_args = parts[1].strip() if len(parts) > 1 else ""
        args = raw_args.split()

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 4

        if nparams >= 4:
            h4 = cast(CommandHandler4, handler)
            return h4(state, args, raw_args, emit)

        h3 = cast(CommandHandler3, handler)
        return h3(state, args, raw_args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_help(state: AppState, args: list[str], raw_args: str) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str], raw_args: str) -> str:
    app_name = getattr(state.settings, "app_name", "todo-planner")
    limit = getattr(state.settings, "summary_completed_limit", "?")
    return (
        "Status:\n"
        f"  App: {app_name}\n"
        f"  Todos held: {state.todo_store.count()}\n"
        f"  Completed shown in summary: {limit}"
    )


def cmd_todos(state: AppState, args: list[str], raw_args: str) -> str:
    """
    /todos -> show the summary of the current list
    """
    return describe_todos(state)


def cmd_plan(
    state: AppState,
    args: list[str],
    raw_args: str,
    emit: CommandEmitter | None = None,
) -> str:
    """
    /plan <json array> -> replace the whole list (same as the create_todo_list tool)
    /plan []           -> clear it
    """
    if not raw_args:
        return PLAN_USAGE

    try:
        todos = json.loads(raw_args)
    except json.JSONDecodeError as e:
        logger.debug("/plan got invalid JSON: %s", e)
        return f"Invalid JSON ({e.msg} at position {e.pos}).\n{PLAN_USAGE}"

    if emit is not None and isinstance(todos, list):
        emit(f"[PLAN] Replacing todo list with {len(todos)} items...")

    try:
        result = create_todo_list(state, todos)
    except TodoValidationError as e:
        return f"Rejected: {e.reason}"

    return result.output


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show current settings and list size.")
registry.register("todos", cmd_todos, help_text="Show the current todo list summary.", aliases=["ls"])
registry.register("plan", cmd_plan, help_text="Replace the todo list: /plan <json array>.")
