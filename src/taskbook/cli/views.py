# src/taskbook/cli/views.py

"""Plain-text rendering of tasks and statistics (no I/O)."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from ..tasks.task_models import Priority, Task, TaskStats, TaskStatus

RULE = "-" * 72


def _fmt_ts(ts: float, fmt: str) -> str:
    return datetime.fromtimestamp(ts).strftime(fmt)


def _clip(text: str, width: int) -> str:
    return text[:width]


def format_task(task: Task) -> str:
    lines = [
        "=" * 42,
        f"  TASK #{task.id}",
        "=" * 42,
        f"  Title:       {task.title}",
        f"  Category:    {task.category}",
        f"  Priority:    {task.priority.label}",
        f"  Status:      {task.status.label}",
        f"  Created:     {_fmt_ts(task.created, '%Y-%m-%d %H:%M:%S')}",
        f"  Deadline:    {_fmt_ts(task.deadline, '%Y-%m-%d')}",
        "  Description:",
        f"  {task.description}",
        "=" * 42,
    ]
    return "\n".join(lines)


def format_summary(task: Task, index: int) -> str:
    return (
        f"{index}. [#{task.id}] {task.title}\n"
        f"   Category: {task.category} | Priority: {task.priority.label}"
        f" | Status: {task.status.label}\n"
    )


def format_summaries(tasks: Iterable[Task], empty_message: str) -> str:
    parts = [format_summary(t, i) for i, t in enumerate(tasks, start=1)]
    if not parts:
        return empty_message
    parts.append(f"Found {len(parts)} task(s)")
    return "\n".join(parts)


def format_table(tasks: list[Task]) -> str:
    lines = [
        f"ALL TASKS ({len(tasks)} total)",
        "",
        f"{'ID':<4} {'Title':<30} {'Category':<15} {'Priority':<10} {'Status':<12}",
        RULE,
    ]
    for t in tasks:
        lines.append(
            f"{t.id:<4} {_clip(t.title, 30):<30} {_clip(t.category, 15):<15} "
            f"{t.priority.label:<10} {t.status.label:<12}"
        )
    return "\n".join(lines)


def format_stats(stats: TaskStats) -> str:
    lines = [f"Total Tasks: {stats.total}", "", "Status Breakdown:"]
    for status in TaskStatus:
        n = stats.by_status[status]
        lines.append(f"  {status.label + ':':<13}{n} ({stats.percent(n):.1f}%)")

    lines += ["", "Priority Breakdown:"]
    for priority in sorted(Priority):
        n = stats.by_priority[priority]
        lines.append(f"  {priority.label + ':':<13}{n} ({stats.percent(n):.1f}%)")

    if stats.total:
        lines += ["", f"Completion Rate: {stats.completion_rate:.1f}%"]
    return "\n".join(lines)
