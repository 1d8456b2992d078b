# src/todo_list/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (loading tasks.txt), then runs
the console menu in the main thread until "Save and Exit".
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    # choose console log level from settings.log_level
    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    if not isinstance(console_level, int):
        console_level = logging.WARNING

    setup_logging(log_dir=settings.data_dir, console_level=console_level)
    logger.info("Starting %s...", settings.app_name)

    try:
        state = create_initial_state(settings=settings)
    except OSError as e:
        logger.exception("Failed to load tasks from %s", settings.tasks_path)
        print(f"Error loading tasks: {e}", file=sys.stderr)
        return 1

    saved = run_console_loop(state)
    logger.info("Bye.")
    return 0 if saved else 1


if __name__ == "__main__":
    sys.exit(main())
