"""todo-planner: a create_todo_list tool for agent runtimes, plus a small console host."""

__version__ = "0.1.0"
