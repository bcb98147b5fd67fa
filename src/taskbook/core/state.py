# src/taskbook/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..tasks.task_store import TaskStore


@dataclass(slots=True)
class AppState:
    """
    Everything one session owns.

    Built once by the bootstrap code and passed explicitly to the console loop
    and every menu handler; nothing here is module-global.
    """

    settings: Any
    task_store: TaskStore
    tasks_path: Path
