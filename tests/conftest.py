# tests/conftest.py

from __future__ import annotations

from datetime import date
from pathlib import Path
from types import SimpleNamespace

import pytest

from taskbook.core.state import AppState
from taskbook.tasks.task_models import Priority, TaskStatus, end_of_day
from taskbook.tasks.task_store import TaskStore


class FakeClock:
    """Deterministic clock: every call returns a value one second later."""

    def __init__(self, start: float = 1_700_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        self.now += 1.0
        return self.now


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="Task Manager",
        log_level="WARNING",
        data_dir=tmp_path,
        tasks_path=tmp_path / "tasks.json",
        log_dir=tmp_path,
        max_tasks=100,
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(clock: FakeClock) -> TaskStore:
    return TaskStore(clock=clock)


@pytest.fixture()
def populated_store(store: TaskStore) -> TaskStore:
    """Three tasks: ids 1..3, created in that order."""
    store.create_task(
        title="Write report",
        description="Quarterly numbers",
        category="Work",
        priority=Priority.LOW,
        status=TaskStatus.TODO,
        deadline=end_of_day(date(2026, 11, 20)),
    )
    store.create_task(
        title="Buy milk",
        description="Semi-skimmed",
        category="Home",
        priority=Priority.URGENT,
        status=TaskStatus.IN_PROGRESS,
        deadline=end_of_day(date(2026, 10, 20)),
    )
    store.create_task(
        title="Apply patch",
        description="Work laptop update",
        category="Workshop",
        priority=Priority.MEDIUM,
        status=TaskStatus.COMPLETED,
        deadline=end_of_day(date(2026, 11, 1)),
    )
    return store


@pytest.fixture()
def state(settings: SimpleNamespace, populated_store: TaskStore) -> AppState:
    return AppState(
        settings=settings,
        task_store=populated_store,
        tasks_path=settings.tasks_path,
    )
