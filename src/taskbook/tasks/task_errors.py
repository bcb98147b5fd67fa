# src/taskbook/tasks/task_errors.py

"""
Errors raised by the task store and the task file.

All of them derive from TaskError so the console can report them and keep the
session going. Each one also derives from the closest builtin, so callers that
only know about LookupError / OSError / ValueError still catch it.
"""

from __future__ import annotations


class TaskError(Exception):
    """Base class for recoverable task errors."""


class TaskNotFoundError(TaskError, LookupError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task #{task_id} not found.")
        self.task_id = task_id


class CapacityExceededError(TaskError):
    def __init__(self, max_tasks: int) -> None:
        super().__init__(f"Task limit reached ({max_tasks} tasks).")
        self.max_tasks = max_tasks


class StorageIOError(TaskError, OSError):
    """The task file could not be read or written."""


class CorruptDataError(TaskError, ValueError):
    """The task file exists but its content is not a valid task document."""
