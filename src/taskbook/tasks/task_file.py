# src/taskbook/tasks/task_file.py

"""
Whole-store persistence.

The file is a single JSON document:

    {"format": "taskbook", "version": 1, "count": N, "next_id": M, "tasks": [...]}

Every save rewrites the full document (temp file + os.replace). Loading
validates everything it reads and raises CorruptDataError instead of
guessing; a missing file is just an empty store.
"""

from __future__ import annotations

import contextlib
import json
import logging
import math
import os
from datetime import datetime
from pathlib import Path
from typing import Any

from .task_errors import CorruptDataError, StorageIOError
from .task_models import Priority, Task, TaskStatus
from .task_store import DEFAULT_MAX_TASKS, TaskStore

logger = logging.getLogger(__name__)

FILE_FORMAT = "taskbook"
FILE_VERSION = 1


# ---- encoding ----


def _task_to_dict(task: Task) -> dict[str, Any]:
    return {
        "id": task.id,
        "title": task.title,
        "description": task.description,
        "category": task.category,
        "priority": int(task.priority),
        "status": task.status.value,
        "created": task.created,
        "deadline": task.deadline,
        "completed": task.completed,
    }


def dump_store(store: TaskStore) -> dict[str, Any]:
    tasks = [_task_to_dict(t) for t in store]
    return {
        "format": FILE_FORMAT,
        "version": FILE_VERSION,
        "count": len(tasks),
        "next_id": store.next_id,
        "tasks": tasks,
    }


# ---- decoding ----


def _require(raw: dict[str, Any], key: str, kind: type | tuple[type, ...], where: str) -> Any:
    if key not in raw:
        raise CorruptDataError(f"{where}: missing field {key!r}")
    value = raw[key]
    # bool is an int subclass; only accept it where bool is asked for.
    if isinstance(value, bool) and kind is not bool:
        raise CorruptDataError(f"{where}: field {key!r} has wrong type")
    if not isinstance(value, kind):
        raise CorruptDataError(f"{where}: field {key!r} has wrong type")
    return value


def _require_timestamp(raw: dict[str, Any], key: str, where: str) -> float:
    try:
        value = float(_require(raw, key, (int, float), where))
    except OverflowError as e:
        raise CorruptDataError(f"{where}: field {key!r} is out of range") from e
    if not math.isfinite(value):
        raise CorruptDataError(f"{where}: field {key!r} is not a finite timestamp")
    try:
        datetime.fromtimestamp(value)
    except (OverflowError, OSError, ValueError) as e:
        raise CorruptDataError(f"{where}: field {key!r} is out of range ({e})") from e
    return value


def _task_from_dict(raw: Any, index: int) -> Task:
    where = f"task[{index}]"
    if not isinstance(raw, dict):
        raise CorruptDataError(f"{where}: expected an object")

    raw_priority = _require(raw, "priority", int, where)
    raw_status = _require(raw, "status", str, where)
    try:
        priority = Priority(raw_priority)
        status = TaskStatus(raw_status)
    except ValueError as e:
        raise CorruptDataError(f"{where}: {e}") from e

    task_id = _require(raw, "id", int, where)
    if task_id < 1:
        raise CorruptDataError(f"{where}: id must be positive (got {task_id})")

    return Task(
        id=task_id,
        title=_require(raw, "title", str, where),
        description=_require(raw, "description", str, where),
        category=_require(raw, "category", str, where),
        priority=priority,
        status=status,
        created=_require_timestamp(raw, "created", where),
        deadline=_require_timestamp(raw, "deadline", where),
        completed=_require(raw, "completed", bool, where),
    )


def parse_store(
    data: Any,
    *,
    max_tasks: int | None = DEFAULT_MAX_TASKS,
) -> TaskStore:
    if not isinstance(data, dict):
        raise CorruptDataError("expected a JSON object at top level")
    if data.get("format") != FILE_FORMAT:
        raise CorruptDataError(f"not a {FILE_FORMAT} file (format={data.get('format')!r})")

    version = _require(data, "version", int, "header")
    if version != FILE_VERSION:
        raise CorruptDataError(f"unsupported file version {version} (expected {FILE_VERSION})")

    count = _require(data, "count", int, "header")
    next_id = _require(data, "next_id", int, "header")
    raw_tasks = _require(data, "tasks", list, "header")
    if count != len(raw_tasks):
        raise CorruptDataError(f"header count={count} but file holds {len(raw_tasks)} tasks")

    tasks = [_task_from_dict(raw, i) for i, raw in enumerate(raw_tasks)]
    try:
        return TaskStore(tasks, next_id=next_id, max_tasks=max_tasks)
    except ValueError as e:
        raise CorruptDataError(str(e)) from e


# ---- file I/O ----


def load_store(path: str | Path, *, max_tasks: int | None = DEFAULT_MAX_TASKS) -> TaskStore:
    """
    Read the task file at `path`.

    Missing file -> empty store (next_id=1).
    Unreadable file -> StorageIOError.
    Anything that is not a valid task document -> CorruptDataError.
    """
    path = Path(path)
    if not path.exists():
        logger.info("No task file at %s, starting with an empty store.", path)
        return TaskStore(max_tasks=max_tasks)

    try:
        raw = path.read_text("utf-8")
    except UnicodeDecodeError as e:
        raise CorruptDataError(f"{path}: not UTF-8 text") from e
    except OSError as e:
        raise StorageIOError(f"Cannot read {path}: {e}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise CorruptDataError(f"{path}: invalid JSON ({e})") from e

    store = parse_store(data, max_tasks=max_tasks)
    logger.info("Loaded %d tasks from %s (next_id=%d)", len(store), path, store.next_id)
    if store.is_full:
        logger.warning("Task file holds %d tasks; the store is full (max=%s).", len(store), max_tasks)
    return store


def save_store(store: TaskStore, path: str | Path) -> None:
    """Write the whole store to `path`, replacing any previous content."""
    path = Path(path)
    payload = json.dumps(dump_store(store), ensure_ascii=False, indent=2, allow_nan=False)
    tmp = path.with_suffix(path.suffix + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp.write_text(payload, "utf-8")
        os.replace(tmp, path)
    except OSError as e:
        with contextlib.suppress(OSError):
            tmp.unlink(missing_ok=True)
        raise StorageIOError(f"Cannot write {path}: {e}") from e
    logger.info("Saved %d tasks to %s", len(store), path)


def quarantine_corrupt_file(path: str | Path) -> Path:
    """Move a corrupt task file aside so the next save does not overwrite it."""
    path = Path(path)
    target = path.with_suffix(path.suffix + ".corrupt")
    try:
        os.replace(path, target)
    except OSError as e:
        raise StorageIOError(f"Cannot move {path} aside: {e}") from e
    logger.warning("Moved corrupt task file %s -> %s", path, target)
    return target
