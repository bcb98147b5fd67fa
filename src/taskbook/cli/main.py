# src/taskbook/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState from the task file, runs the console
menu, then saves the store on the way out.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state, save_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging
from ..tasks.task_errors import StorageIOError

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(log_dir=settings.log_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    try:
        state = create_initial_state(settings=settings)
    except StorageIOError as e:
        logger.error("Cannot start: %s", e)
        print(f"✗ {e}", file=sys.stderr)
        return 1

    if len(state.task_store):
        print(f"✓ Loaded {len(state.task_store)} tasks from file.")
    else:
        print("No existing tasks found. Starting fresh.")

    try:
        run_console_loop(state)
    finally:
        if save_state(state):
            print("\n✓ Tasks saved. Goodbye!")
        else:
            print(f"\n✗ Could not save tasks to {state.tasks_path}.", file=sys.stderr)
        logger.info("Bye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
