# src/taskbook/cli/menu.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.ports import Prompter
from ..core.state import AppState
from ..tasks.task_errors import CapacityExceededError
from ..tasks.task_file import save_store
from ..tasks.task_models import (
    MAX_CATEGORY,
    MAX_DESCRIPTION,
    MAX_TITLE,
    Priority,
    SortKey,
    TaskStatus,
    end_of_day,
)
from .views import format_stats, format_summaries, format_table, format_task

MenuHandler = Callable[[AppState, Prompter], str]

EXIT_CHOICE = 0
NO_TASKS = "No tasks found!"

PRIORITY_CHOICES = "  1. Low\n  2. Medium\n  3. High\n  4. Urgent"
STATUS_CHOICES = "  1. To Do\n  2. In Progress\n  3. Completed\n  4. Cancelled"

logger = logging.getLogger(__name__)


class MenuRegistry:
    """Numbered menu: maps a choice to a handler and renders the menu text."""

    def __init__(self) -> None:
        self._handlers: dict[int, MenuHandler] = {}
        self._labels: dict[int, str] = {}

    def register(self, choice: int, label: str, handler: MenuHandler) -> None:
        if choice == EXIT_CHOICE:
            raise ValueError("choice 0 is reserved for exit")
        self._handlers[choice] = handler
        self._labels[choice] = label

    @property
    def max_choice(self) -> int:
        return max(self._handlers, default=0)

    def handle(self, state: AppState, choice: int, prompter: Prompter) -> str:
        """
        Run the handler for `choice` and return the text to show.

        TaskError raised by a handler propagates; the console reports it.
        """
        handler = self._handlers.get(choice)
        if handler is None:
            return "Invalid choice!"
        logger.debug("Menu choice %s (%s)", choice, self._labels[choice])
        return handler(state, prompter)

    def build_menu(self, title: str = "TASK MANAGEMENT MENU") -> str:
        lines = ["=" * 42, f"  {title}", "=" * 42]
        for choice in sorted(self._labels):
            lines.append(f"  {str(choice) + '.':<4}{self._labels[choice]}")
        lines.append(f"  {str(EXIT_CHOICE) + '.':<4}Exit")
        lines.append("=" * 42)
        return "\n".join(lines)


def _ask_task_id(state: AppState, prompter: Prompter, prompt: str) -> int:
    return prompter.ask_int(prompt, 1, max(1, state.task_store.next_id - 1))


def _ask_priority(prompter: Prompter, prompt: str) -> Priority:
    prompter.say(PRIORITY_CHOICES)
    return Priority(prompter.ask_int(prompt, 1, 4))


def _ask_status(prompter: Prompter, prompt: str) -> TaskStatus:
    prompter.say(STATUS_CHOICES)
    return TaskStatus.from_choice(prompter.ask_int(prompt, 1, 4))


# ---- handlers ----


def menu_add(state: AppState, prompter: Prompter) -> str:
    store = state.task_store
    if store.is_full:
        raise CapacityExceededError(store.max_tasks or 0)

    title = prompter.ask_text("Task Title", MAX_TITLE)
    description = prompter.ask_text("Description", MAX_DESCRIPTION)
    category = prompter.ask_text("Category", MAX_CATEGORY)
    priority = _ask_priority(prompter, "Select Priority")
    status = _ask_status(prompter, "Select Status")
    deadline = end_of_day(prompter.ask_date("Deadline (YYYY-MM-DD)"))

    task = store.create_task(
        title=title,
        description=description,
        category=category,
        priority=priority,
        status=status,
        deadline=deadline,
    )
    return f"Task #{task.id} added successfully!"


def menu_view_all(state: AppState, prompter: Prompter) -> str:
    if not len(state.task_store):
        return NO_TASKS
    return format_table(state.task_store.tasks)


def menu_view_by_id(state: AppState, prompter: Prompter) -> str:
    if not len(state.task_store):
        return NO_TASKS
    task_id = _ask_task_id(state, prompter, "Enter Task ID")
    return format_task(state.task_store.get_task(task_id))


def menu_update(state: AppState, prompter: Prompter) -> str:
    """
    Ask for every field; empty text or 0 keeps the current value.
    Status changes are not validated (Completed -> To Do is allowed).
    """
    store = state.task_store
    if not len(store):
        return NO_TASKS
    task_id = _ask_task_id(state, prompter, "Enter Task ID to update")
    task = store.get_task(task_id)

    prompter.say(f"UPDATE TASK #{task.id}\nLeave empty to keep current value\n")
    prompter.say(f"Current Title: {task.title}")
    title = prompter.ask_text("New Title", MAX_TITLE)
    prompter.say(f"Current Description: {task.description}")
    description = prompter.ask_text("New Description", MAX_DESCRIPTION)
    prompter.say(f"Current Category: {task.category}")
    category = prompter.ask_text("New Category", MAX_CATEGORY)

    prompter.say(f"Current Priority: {task.priority.label}")
    prompter.say("Priority: 1=Low, 2=Medium, 3=High, 4=Urgent, 0=Skip")
    p = prompter.ask_int("New Priority", 0, 4)

    prompter.say(f"Current Status: {task.status.label}")
    prompter.say("Status: 1=ToDo, 2=InProgress, 3=Completed, 4=Cancelled, 0=Skip")
    s = prompter.ask_int("New Status", 0, 4)

    store.update_task(
        task_id,
        title=title,
        description=description,
        category=category,
        priority=Priority(p) if p else None,
        status=TaskStatus.from_choice(s) if s else None,
    )
    return "Task updated successfully!"


def menu_delete(state: AppState, prompter: Prompter) -> str:
    store = state.task_store
    if not len(store):
        return NO_TASKS
    task_id = _ask_task_id(state, prompter, "Enter Task ID to delete")
    task = store.get_task(task_id)

    prompter.say(f"Task: {task.title}")
    if not prompter.confirm("Are you sure you want to delete?"):
        return "Deletion cancelled."
    store.delete_task(task_id)
    return "Task deleted successfully!"


def menu_mark_complete(state: AppState, prompter: Prompter) -> str:
    if not len(state.task_store):
        return NO_TASKS
    task_id = _ask_task_id(state, prompter, "Enter Task ID to mark complete")
    state.task_store.mark_complete(task_id)
    return "Task marked as complete!"


def menu_search(state: AppState, prompter: Prompter) -> str:
    if not len(state.task_store):
        return NO_TASKS
    keyword = prompter.ask_text("Enter search keyword", MAX_TITLE)
    return format_summaries(
        state.task_store.search(keyword),
        f"No tasks found matching '{keyword}'",
    )


def menu_filter_status(state: AppState, prompter: Prompter) -> str:
    if not len(state.task_store):
        return NO_TASKS
    status = _ask_status(prompter, "Select Status")
    return format_summaries(
        state.task_store.filter_by_status(status),
        "No tasks found with this status",
    )


def menu_filter_priority(state: AppState, prompter: Prompter) -> str:
    if not len(state.task_store):
        return NO_TASKS
    priority = _ask_priority(prompter, "Select Priority")
    return format_summaries(
        state.task_store.filter_by_priority(priority),
        "No tasks found with this priority",
    )


def menu_filter_category(state: AppState, prompter: Prompter) -> str:
    if not len(state.task_store):
        return NO_TASKS
    category = prompter.ask_text("Enter category name", MAX_CATEGORY)
    return format_summaries(
        state.task_store.filter_by_category(category),
        f"No tasks found in category '{category}'",
    )


def menu_sort(state: AppState, prompter: Prompter) -> str:
    if not len(state.task_store):
        return NO_TASKS
    prompter.say(
        "Sort by:\n"
        "  1. Priority (High to Low)\n"
        "  2. Deadline (Nearest first)\n"
        "  3. Created Date (Newest first)\n"
        "  4. Title (A-Z)"
    )
    key = SortKey(prompter.ask_int("Select sort option", 1, 4))
    state.task_store.sort(key)
    return "Tasks sorted successfully!"


def menu_statistics(state: AppState, prompter: Prompter) -> str:
    return "TASK STATISTICS\n\n" + format_stats(state.task_store.statistics())


def menu_save(state: AppState, prompter: Prompter) -> str:
    save_store(state.task_store, state.tasks_path)
    return "Tasks saved successfully!"


def build_registry() -> MenuRegistry:
    reg = MenuRegistry()
    reg.register(1, "Add New Task", menu_add)
    reg.register(2, "View All Tasks", menu_view_all)
    reg.register(3, "View Task by ID", menu_view_by_id)
    reg.register(4, "Update Task", menu_update)
    reg.register(5, "Delete Task", menu_delete)
    reg.register(6, "Mark Task as Complete", menu_mark_complete)
    reg.register(7, "Search Tasks", menu_search)
    reg.register(8, "Filter by Status", menu_filter_status)
    reg.register(9, "Filter by Priority", menu_filter_priority)
    reg.register(10, "Filter by Category", menu_filter_category)
    reg.register(11, "Sort Tasks", menu_sort)
    reg.register(12, "View Statistics", menu_statistics)
    reg.register(13, "Save Tasks", menu_save)
    return reg


registry = build_registry()
