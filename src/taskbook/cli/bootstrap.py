# src/taskbook/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- restores the task store from the task file into AppState,
- writes the store back on shutdown.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_errors import CorruptDataError, StorageIOError
from ..tasks.task_file import load_store, quarantine_corrupt_file, save_store
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    Path(settings.data_dir).mkdir(parents=True, exist_ok=True)
    Path(settings.tasks_path).parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().

    A corrupt task file is moved aside (<name>.corrupt) and the session starts
    empty, so the next save cannot destroy the old data. An unreadable file
    is not recoverable here and StorageIOError propagates.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    tasks_path = Path(settings.tasks_path)
    max_tasks = int(getattr(settings, "max_tasks", 100))
    try:
        store = load_store(tasks_path, max_tasks=max_tasks)
    except CorruptDataError as e:
        logger.error("Task file %s is corrupt: %s", tasks_path, e)
        quarantine_corrupt_file(tasks_path)
        store = TaskStore(max_tasks=max_tasks)

    return AppState(settings=settings, task_store=store, tasks_path=tasks_path)


def save_state(state: AppState) -> bool:
    """Save the store; returns False (and logs) if the file could not be written."""
    try:
        save_store(state.task_store, state.tasks_path)
    except StorageIOError:
        logger.exception("Failed to save tasks to %s", state.tasks_path)
        return False
    return True
