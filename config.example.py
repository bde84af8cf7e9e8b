# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TODO_PLANNER_APP_NAME": "App display name (default: todo-planner).",
    "TODO_PLANNER_LOG_LEVEL": "Console logging level (default: INFO).",
    # Connectors
    "TODO_PLANNER_CONSOLE_ENABLED": "Run the console REPL (true/false, default: true).",
    # Paths (gitignored)
    "TODO_PLANNER_DATA_DIR": "Local data directory, holds todo_planner.log (default: .local/todo_planner).",
    # Summary
    "TODO_PLANNER_SUMMARY_COMPLETED_LIMIT": (
        "How many completed todos the summary lists before '... and K more' (default: 5)."
    ),
}
