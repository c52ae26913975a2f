# src/taskboard/storage/repository.py

"""
Persistence adapter for the board.

Tasks are stored as one JSON array under a single key, theme as a bare string under
another key. Loading never raises: missing, corrupt or non-array data degrades to an
empty board. Saving reports failure with a False return and a warning log.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from datetime import date
from typing import Any

from ..core.ports import BlobStore
from ..errors import PersistenceError
from ..tasks.task_models import Priority, Task, TaskStatus, Theme

logger = logging.getLogger(__name__)

DEFAULT_TASKS_KEY = "tasks"
DEFAULT_THEME_KEY = "theme"
DEFAULT_THEME = Theme.DARK


def task_to_record(task: Task) -> dict[str, Any]:
    return {
        "id": task.id,
        "title": task.title,
        "description": task.description,
        "priority": task.priority.value,
        "assignee": task.assignee,
        "dueDate": task.due_date.isoformat() if task.due_date else None,
        "status": task.status.value,
        "completed": task.completed,
        "hasBeenInReview": task.has_been_in_review,
    }


def _parse_id(raw: Any) -> int | None:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float) and raw.is_integer():
        return int(raw)
    return None


def _parse_date(raw: Any) -> date | None:
    if not isinstance(raw, str) or not raw.strip():
        return None
    try:
        return date.fromisoformat(raw.strip()[:10])
    except ValueError:
        return None


def task_from_record(raw: Any) -> Task | None:
    """Decode one stored record; None if it cannot become a valid Task."""
    if not isinstance(raw, dict):
        return None

    task_id = _parse_id(raw.get("id"))
    title = raw.get("title")
    if task_id is None or not isinstance(title, str) or not title.strip():
        return None

    prio_raw = raw.get("priority")
    priority = Priority.parse(prio_raw) if isinstance(prio_raw, str) else None
    status_raw = raw.get("status")
    status = TaskStatus.parse(status_raw) if isinstance(status_raw, str) else None
    status = status or TaskStatus.BACKLOG

    # Older records carry "reviewed" instead of "hasBeenInReview".
    reviewed = raw.get("hasBeenInReview", raw.get("reviewed", False))
    reviewed = bool(reviewed) or status in (TaskStatus.REVIEW, TaskStatus.DONE)

    description = raw.get("description")
    assignee = raw.get("assignee")

    return Task(
        id=task_id,
        title=title.strip(),
        priority=priority or Priority.MEDIUM,
        description=description if isinstance(description, str) else "",
        assignee=(assignee.strip() or None) if isinstance(assignee, str) else None,
        due_date=_parse_date(raw.get("dueDate")),
        status=status,
        completed=bool(raw.get("completed", False)),
        has_been_in_review=reviewed,
    )


class BoardRepository:
    def __init__(
        self,
        blobs: BlobStore,
        *,
        tasks_key: str = DEFAULT_TASKS_KEY,
        theme_key: str = DEFAULT_THEME_KEY,
    ) -> None:
        self.blobs = blobs
        self.tasks_key = tasks_key
        self.theme_key = theme_key

    def load_tasks(self) -> list[Task]:
        try:
            raw = self.blobs.get(self.tasks_key)
        except PersistenceError:
            logger.warning("Could not read stored tasks; starting empty.", exc_info=True)
            return []
        if raw is None:
            return []

        try:
            data = json.loads(raw)
        except ValueError:
            logger.warning("Stored tasks are not valid JSON; starting empty.")
            return []
        if not isinstance(data, list):
            logger.warning("Stored tasks are not a list (%s); starting empty.", type(data).__name__)
            return []

        out: list[Task] = []
        for i, rec in enumerate(data):
            task = task_from_record(rec)
            if task is None:
                logger.warning("Skipping malformed task record #%d", i)
                continue
            out.append(task)
        logger.info("Loaded %d tasks from key=%s", len(out), self.tasks_key)
        return out

    def save_tasks(self, tasks: Iterable[Task]) -> bool:
        try:
            payload = json.dumps([task_to_record(t) for t in tasks], ensure_ascii=False)
            self.blobs.put(self.tasks_key, payload)
        except (PersistenceError, TypeError, ValueError):
            logger.warning("Failed to save tasks to key=%s", self.tasks_key, exc_info=True)
            return False
        return True

    def load_theme(self) -> Theme:
        try:
            raw = self.blobs.get(self.theme_key)
        except PersistenceError:
            logger.warning("Could not read stored theme; using %s.", DEFAULT_THEME, exc_info=True)
            return DEFAULT_THEME
        try:
            return Theme((raw or "").strip().lower())
        except ValueError:
            return DEFAULT_THEME

    def save_theme(self, theme: Theme) -> bool:
        try:
            self.blobs.put(self.theme_key, Theme(theme).value)
        except (PersistenceError, ValueError):
            logger.warning("Failed to save theme to key=%s", self.theme_key, exc_info=True)
            return False
        return True
