# tests/test_menu.py

from __future__ import annotations

from datetime import date

import pytest

from taskbook.cli.menu import MenuRegistry, build_registry, registry
from taskbook.core.state import AppState
from taskbook.tasks.task_errors import CapacityExceededError, TaskNotFoundError
from taskbook.tasks.task_file import load_store
from taskbook.tasks.task_models import Priority, TaskStatus, end_of_day
from taskbook.tasks.task_store import TaskStore

from .fakes import FakePrompter


def test_registry_covers_choices_1_to_13() -> None:
    reg = build_registry()
    assert reg.max_choice == 13
    menu = reg.build_menu()
    assert "13. Save Tasks" in menu
    assert "0.  Exit" in menu


def test_registry_rejects_exit_choice_and_unknown_choices(state: AppState) -> None:
    reg = MenuRegistry()
    with pytest.raises(ValueError):
        reg.register(0, "Exit", lambda s, p: "")
    assert reg.handle(state, 5, FakePrompter()) == "Invalid choice!"


def test_add_task(state: AppState) -> None:
    prompter = FakePrompter(
        ["Plan trip", "Book hotel", "Travel", 3, 1, date(2026, 12, 24)]
    )

    reply = registry.handle(state, 1, prompter)

    assert reply == "Task #4 added successfully!"
    task = state.task_store.get_task(4)
    assert task.title == "Plan trip"
    assert task.priority is Priority.HIGH
    assert task.status is TaskStatus.TODO
    assert task.deadline == end_of_day(date(2026, 12, 24))
    assert task.completed is False


def test_add_task_when_full_fails_before_prompting(settings) -> None:
    store = TaskStore(max_tasks=1)
    store.create_task(
        title="only",
        description="",
        category="",
        priority=Priority.LOW,
        status=TaskStatus.TODO,
        deadline=0.0,
    )
    state = AppState(settings=settings, task_store=store, tasks_path=settings.tasks_path)
    prompter = FakePrompter()

    with pytest.raises(CapacityExceededError):
        registry.handle(state, 1, prompter)
    assert prompter.prompts == []


def test_view_all_and_by_id(state: AppState) -> None:
    table = registry.handle(state, 2, FakePrompter())
    assert "ALL TASKS (3 total)" in table
    assert "Buy milk" in table

    detail = registry.handle(state, 3, FakePrompter([2]))
    assert "TASK #2" in detail
    assert "Urgent" in detail
    assert "In Progress" in detail


def test_view_on_empty_store(settings) -> None:
    state = AppState(settings=settings, task_store=TaskStore(), tasks_path=settings.tasks_path)
    assert registry.handle(state, 2, FakePrompter()) == "No tasks found!"
    assert registry.handle(state, 3, FakePrompter()) == "No tasks found!"


def test_view_deleted_id_raises_not_found(state: AppState) -> None:
    state.task_store.delete_task(2)
    with pytest.raises(TaskNotFoundError):
        registry.handle(state, 3, FakePrompter([2]))


def test_update_skips_empty_fields(state: AppState) -> None:
    # id, title, description, category, priority, status
    prompter = FakePrompter([1, "", "New description", "", 0, 3])

    reply = registry.handle(state, 4, prompter)

    assert reply == "Task updated successfully!"
    task = state.task_store.get_task(1)
    assert task.title == "Write report"
    assert task.description == "New description"
    assert task.category == "Work"
    assert task.priority is Priority.LOW
    assert task.status is TaskStatus.COMPLETED
    assert task.completed is True


def test_delete_requires_confirmation(state: AppState) -> None:
    assert registry.handle(state, 5, FakePrompter([1, False])) == "Deletion cancelled."
    assert len(state.task_store) == 3

    assert registry.handle(state, 5, FakePrompter([1, True])) == "Task deleted successfully!"
    assert [t.id for t in state.task_store] == [2, 3]


def test_mark_complete(state: AppState) -> None:
    assert registry.handle(state, 6, FakePrompter([2])) == "Task marked as complete!"
    task = state.task_store.get_task(2)
    assert task.status is TaskStatus.COMPLETED
    assert task.completed is True


def test_search_and_filters(state: AppState) -> None:
    found = registry.handle(state, 7, FakePrompter(["Work"]))
    assert "[#1] Write report" in found
    assert "[#3] Apply patch" in found
    assert "Found 2 task(s)" in found

    assert registry.handle(state, 7, FakePrompter(["zzz"])) == "No tasks found matching 'zzz'"

    by_status = registry.handle(state, 8, FakePrompter([2]))
    assert "[#2] Buy milk" in by_status

    by_priority = registry.handle(state, 9, FakePrompter([4]))
    assert "[#2] Buy milk" in by_priority
    assert "Found 1 task(s)" in by_priority

    by_category = registry.handle(state, 10, FakePrompter(["Wor"]))
    assert by_category == "No tasks found in category 'Wor'"


def test_sort(state: AppState) -> None:
    assert registry.handle(state, 11, FakePrompter([1])) == "Tasks sorted successfully!"
    assert [t.priority for t in state.task_store] == [
        Priority.URGENT,
        Priority.MEDIUM,
        Priority.LOW,
    ]


def test_statistics_report(state: AppState) -> None:
    report = registry.handle(state, 12, FakePrompter())
    assert "Total Tasks: 3" in report
    assert "Completed:   1 (33.3%)" in report
    assert "Completion Rate: 33.3%" in report


def test_statistics_on_empty_store(settings) -> None:
    state = AppState(settings=settings, task_store=TaskStore(), tasks_path=settings.tasks_path)
    report = registry.handle(state, 12, FakePrompter())
    assert "Total Tasks: 0" in report
    assert "To Do:       0 (0.0%)" in report
    assert "Completion Rate" not in report


def test_save_writes_task_file(state: AppState) -> None:
    assert registry.handle(state, 13, FakePrompter()) == "Tasks saved successfully!"
    loaded = load_store(state.tasks_path)
    assert loaded.tasks == state.task_store.tasks
