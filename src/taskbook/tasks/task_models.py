# src/taskbook/tasks/task_models.py

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date, datetime, time
from enum import Enum, IntEnum, StrEnum

MAX_TITLE = 100
MAX_DESCRIPTION = 500
MAX_CATEGORY = 50


class Priority(IntEnum):
    """Task priority. Ordered: a larger value is more urgent."""

    LOW = 1
    MEDIUM = 2
    HIGH = 3
    URGENT = 4

    @property
    def label(self) -> str:
        return self.name.capitalize()


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    Intended flow is TODO -> IN_PROGRESS -> COMPLETED, or CANCELLED from any
    open state. Transitions are NOT enforced: any status can be set from any
    other one.
    """

    TODO = "todo"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]

    @property
    def choice(self) -> int:
        """1-based menu number."""
        return list(TaskStatus).index(self) + 1

    @classmethod
    def from_choice(cls, n: int) -> TaskStatus:
        members = list(cls)
        if not 1 <= n <= len(members):
            raise ValueError(f"status choice must be 1..{len(members)}, got {n}")
        return members[n - 1]


_STATUS_LABELS = {
    TaskStatus.TODO: "To Do",
    TaskStatus.IN_PROGRESS: "In Progress",
    TaskStatus.COMPLETED: "Completed",
    TaskStatus.CANCELLED: "Cancelled",
}


class SortKey(Enum):
    PRIORITY = 1  # Urgent -> Low
    DEADLINE = 2  # nearest first
    CREATED = 3  # newest first
    TITLE = 4  # A -> Z


@dataclass(slots=True)
class Task:
    id: int
    title: str
    description: str
    category: str
    priority: Priority
    status: TaskStatus
    created: float
    deadline: float
    completed: bool = False

    def __setattr__(self, name: str, value: object) -> None:
        # id is set once by __init__; the store indexes tasks by it.
        if name == "id" and hasattr(self, "id"):
            raise AttributeError("Task.id is read-only")
        object.__setattr__(self, name, value)


def end_of_day(day: date) -> float:
    """Return the local timestamp of 23:59:59 on `day`."""
    return datetime.combine(day, time(23, 59, 59)).timestamp()


@dataclass(slots=True)
class TaskStats:
    """Per-status and per-priority counts over a set of tasks."""

    total: int = 0
    by_status: dict[TaskStatus, int] = field(
        default_factory=lambda: {s: 0 for s in TaskStatus}
    )
    by_priority: dict[Priority, int] = field(
        default_factory=lambda: {p: 0 for p in Priority}
    )

    @classmethod
    def collect(cls, tasks: Iterable[Task]) -> TaskStats:
        stats = cls()
        for t in tasks:
            stats.total += 1
            stats.by_status[t.status] += 1
            stats.by_priority[t.priority] += 1
        return stats

    def percent(self, count: int) -> float:
        if self.total == 0:
            return 0.0
        return count * 100.0 / self.total

    @property
    def status_percentages(self) -> dict[TaskStatus, float]:
        return {s: self.percent(n) for s, n in self.by_status.items()}

    @property
    def priority_percentages(self) -> dict[Priority, float]:
        return {p: self.percent(n) for p, n in self.by_priority.items()}

    @property
    def completion_rate(self) -> float:
        return self.percent(self.by_status[TaskStatus.COMPLETED])
