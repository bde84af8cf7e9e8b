"""
Todo subsystem.

Components:
- todo_models.py: data structures (TodoItem, TodoStatus, TodoPriority)
- todo_validation.py: whole-list validation (TodoValidationError)
- todo_store.py: in-memory holder of the current list
- todo_summary.py: text summary grouped by priority and status
- todo_tool.py: the create_todo_list tool (definition + execute)
- todo_api.py: small high-level helpers used by the rest of the app
"""
