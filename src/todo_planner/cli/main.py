# src/todo_planner/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console REPL
in the main thread (when enabled).
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    # choose console log level from settings.log_level
    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    log_dir = getattr(settings, "data_dir", ".local/todo_planner")
    setup_logging(log_dir=log_dir, console_level=console_level)

    logger.info("Starting %s...", getattr(settings, "app_name", "todo-planner"))

    # IMPORTANT: reuse same settings object
    state = create_initial_state(settings=settings)

    if settings.console_enabled:
        run_console_loop(state)
    else:
        logger.info("Console disabled; nothing to run.")

    logger.info("Bye.")


if __name__ == "__main__":
    main()
