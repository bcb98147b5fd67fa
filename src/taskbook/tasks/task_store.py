# src/taskbook/tasks/task_store.py

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable, Iterator

from .task_errors import CapacityExceededError, TaskNotFoundError
from .task_models import Priority, SortKey, Task, TaskStats, TaskStatus

logger = logging.getLogger(__name__)

DEFAULT_MAX_TASKS = 100

Clock = Callable[[], float]


class TaskQuery:
    """
    Read-only, restartable view over the store.

    Nothing is computed up front: every iteration scans the store again, in
    store order, and yields the tasks matching the predicate.
    """

    def __init__(self, store: TaskStore, predicate: Callable[[Task], bool]) -> None:
        self._store = store
        self._predicate = predicate

    def __iter__(self) -> Iterator[Task]:
        return (t for t in self._store if self._predicate(t))

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return any(True for _ in self)


class TaskStore:
    """
    In-memory ordered task list.

    - ids are issued from `next_id` and never reused (deleting the newest task
      does not roll the counter back)
    - order is insertion order until `sort()` or `delete_task()` changes it
    - `max_tasks` caps creation; 0 or None disables the cap
    """

    def __init__(
        self,
        tasks: Iterable[Task] = (),
        *,
        next_id: int = 1,
        max_tasks: int | None = DEFAULT_MAX_TASKS,
        clock: Clock = time.time,
    ) -> None:
        self._tasks: list[Task] = list(tasks)
        self._by_id: dict[int, Task] = {t.id: t for t in self._tasks}
        if len(self._by_id) != len(self._tasks):
            raise ValueError("task ids must be unique")
        highest = max(self._by_id, default=0)
        if next_id <= highest:
            raise ValueError(f"next_id={next_id} must be greater than every id (max={highest})")
        self._next_id = next_id
        self._max_tasks = max_tasks or None
        self._clock = clock
        logger.debug(
            "TaskStore ready total=%s next_id=%s max_tasks=%s",
            len(self._tasks),
            self._next_id,
            self._max_tasks,
        )

    # ---- container protocol ----

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    @property
    def tasks(self) -> list[Task]:
        """Snapshot of the tasks in store order."""
        return list(self._tasks)

    @property
    def next_id(self) -> int:
        return self._next_id

    @property
    def max_tasks(self) -> int | None:
        return self._max_tasks

    @property
    def is_full(self) -> bool:
        return self._max_tasks is not None and len(self._tasks) >= self._max_tasks

    # ---- mutations ----

    def create_task(
        self,
        *,
        title: str,
        description: str,
        category: str,
        priority: Priority,
        status: TaskStatus,
        deadline: float,
    ) -> Task:
        if self.is_full:
            raise CapacityExceededError(self._max_tasks or 0)

        task = Task(
            id=self._next_id,
            title=title,
            description=description,
            category=category,
            priority=priority,
            status=status,
            created=self._clock(),
            deadline=deadline,
            completed=status == TaskStatus.COMPLETED,
        )
        self._next_id += 1
        self._tasks.append(task)
        self._by_id[task.id] = task
        logger.debug("Task added id=%s priority=%s status=%s", task.id, priority.name, status.value)
        return task

    def get_task(self, task_id: int) -> Task:
        task = self._by_id.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def update_task(
        self,
        task_id: int,
        *,
        title: str | None = None,
        description: str | None = None,
        category: str | None = None,
        priority: Priority | None = None,
        status: TaskStatus | None = None,
        deadline: float | None = None,
    ) -> Task:
        """
        Overwrite the given fields of a task.

        Empty text ("") and None both mean "keep the current value"; a text
        field cannot be cleared through this method.

        Any status can be set regardless of the current one. Setting COMPLETED
        also sets `completed`; moving away from COMPLETED leaves it set.
        """
        task = self.get_task(task_id)

        if title:
            task.title = title
        if description:
            task.description = description
        if category:
            task.category = category
        if priority is not None:
            task.priority = priority
        if deadline is not None:
            task.deadline = deadline
        if status is not None:
            task.status = status
            if status == TaskStatus.COMPLETED:
                task.completed = True

        logger.debug("Task updated id=%s status=%s", task.id, task.status.value)
        return task

    def mark_complete(self, task_id: int) -> Task:
        task = self.get_task(task_id)
        task.status = TaskStatus.COMPLETED
        task.completed = True
        logger.debug("Task marked complete id=%s", task_id)
        return task

    def delete_task(self, task_id: int) -> Task:
        task = self.get_task(task_id)
        index = next(i for i, t in enumerate(self._tasks) if t.id == task_id)
        del self._tasks[index]
        del self._by_id[task_id]
        logger.debug("Task deleted id=%s", task_id)
        return task

    def sort(self, key: SortKey) -> None:
        if key is SortKey.PRIORITY:
            self._tasks.sort(key=lambda t: t.priority, reverse=True)
        elif key is SortKey.DEADLINE:
            self._tasks.sort(key=lambda t: t.deadline)
        elif key is SortKey.CREATED:
            self._tasks.sort(key=lambda t: t.created, reverse=True)
        elif key is SortKey.TITLE:
            self._tasks.sort(key=lambda t: t.title)
        else:
            raise ValueError(f"unknown sort key: {key!r}")

    # ---- queries ----

    def search(self, keyword: str) -> TaskQuery:
        """Case-sensitive substring match on title, description or category."""
        return TaskQuery(
            self,
            lambda t: keyword in t.title or keyword in t.description or keyword in t.category,
        )

    def filter_by_status(self, status: TaskStatus) -> TaskQuery:
        return TaskQuery(self, lambda t: t.status == status)

    def filter_by_priority(self, priority: Priority) -> TaskQuery:
        return TaskQuery(self, lambda t: t.priority == priority)

    def filter_by_category(self, category: str) -> TaskQuery:
        return TaskQuery(self, lambda t: t.category == category)

    def statistics(self) -> TaskStats:
        return TaskStats.collect(self._tasks)
