# src/taskboard/tasks/task_store.py

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable, Iterator
from datetime import date
from typing import Any

from ..errors import DuplicateError, NotFoundError, ValidationError
from .task_models import Priority, Task, TaskStatus
from .workflow import TransitionCheck, apply_transition

logger = logging.getLogger(__name__)

IdFactory = Callable[[], int]


def _clock_ms() -> int:
    return time.time_ns() // 1_000_000


class TaskStore:
    """
    In-memory, ordered task collection.

    Invariants held after every call:
    - titles are unique case-insensitively
    - ids are never reused (ids only grow, even across deletes)
    - status only changes through the workflow engine

    Not-found conditions on remove/toggle/move are silent no-ops;
    rename reports them with NotFoundError.
    """

    def __init__(self, tasks: Iterable[Task] = (), *, id_factory: IdFactory | None = None) -> None:
        self._tasks: list[Task] = []
        self._id_factory: IdFactory = id_factory or _clock_ms
        self._last_id = 0
        if tasks:
            self.replace_all(tasks)

    # ---- read side ----

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    def all(self) -> list[Task]:
        return list(self._tasks)

    def get(self, task_id: int) -> Task | None:
        for t in self._tasks:
            if t.id == task_id:
                return t
        return None

    def find_by_title(self, title: str, *, exclude_id: int | None = None) -> Task | None:
        key = title.strip().lower()
        for t in self._tasks:
            if t.id != exclude_id and t.title_key() == key:
                return t
        return None

    # ---- helpers ----

    def _allocate_id(self) -> int:
        candidate = int(self._id_factory())
        nid = candidate if candidate > self._last_id else self._last_id + 1
        self._last_id = nid
        return nid

    @staticmethod
    def _coerce_priority(priority: Priority | str | None) -> Priority:
        if isinstance(priority, Priority):
            return priority
        if priority is None or (isinstance(priority, str) and not priority.strip()):
            raise ValidationError("Title and priority are required")
        parsed = Priority.parse(priority) if isinstance(priority, str) else None
        if parsed is None:
            raise ValidationError(f"Unknown priority: {priority!r}. Use High, Medium or Low.")
        return parsed

    # ---- mutations ----

    def create(
        self,
        title: str,
        priority: Priority | str | None,
        description: str | None = None,
        assignee: str | None = None,
        due_date: date | None = None,
    ) -> Task:
        clean_title = (title or "").strip()
        if not clean_title:
            raise ValidationError("Title and priority are required")
        prio = self._coerce_priority(priority)

        if self.find_by_title(clean_title) is not None:
            raise DuplicateError(clean_title)

        task = Task(
            id=self._allocate_id(),
            title=clean_title,
            priority=prio,
            description=(description or "").strip(),
            assignee=(assignee or "").strip() or None,
            due_date=due_date,
        )
        self._tasks.append(task)
        logger.debug("Created task id=%s title=%r priority=%s", task.id, task.title, task.priority)
        return task

    def rename(self, task_id: int, new_title: str) -> Task:
        task = self.get(task_id)
        if task is None:
            raise NotFoundError(task_id)

        clean_title = (new_title or "").strip()
        if not clean_title:
            # Empty edit reverts to the previous title.
            return task

        if self.find_by_title(clean_title, exclude_id=task_id) is not None:
            raise DuplicateError(clean_title)

        task.title = clean_title
        logger.debug("Renamed task id=%s -> %r", task_id, clean_title)
        return task

    def remove(self, task_id: int) -> bool:
        for idx, t in enumerate(self._tasks):
            if t.id == task_id:
                del self._tasks[idx]
                logger.debug("Removed task id=%s", task_id)
                return True
        return False

    def toggle_completed(self, task_id: int) -> Task | None:
        task = self.get(task_id)
        if task is None:
            return None
        task.completed = not task.completed
        return task

    def move(self, task_id: int, target: TaskStatus) -> TransitionCheck | None:
        task = self.get(task_id)
        if task is None:
            return None
        return apply_transition(task, target)

    def sort(self, key: Callable[[Task], Any]) -> None:
        """Stable in-place reorder."""
        self._tasks.sort(key=key)

    def replace_all(self, tasks: Iterable[Task]) -> None:
        """
        Swap the whole collection (used when loading persisted state).

        Later records that collide on id or title with an earlier one are dropped,
        so a hand-edited blob cannot break the store invariants.
        """
        kept: list[Task] = []
        seen_ids: set[int] = set()
        seen_titles: set[str] = set()
        for t in tasks:
            if t.id in seen_ids or t.title_key() in seen_titles:
                logger.warning("Dropping duplicate task on load id=%s title=%r", t.id, t.title)
                continue
            seen_ids.add(t.id)
            seen_titles.add(t.title_key())
            kept.append(t)

        self._tasks = kept
        self._last_id = max([self._last_id, *seen_ids])
