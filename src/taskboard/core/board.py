# src/taskboard/core/board.py

"""
Board service: the command interface front-ends call into.

Each effective mutation is followed by a save through the repository and a single
"state changed" notification. A failed save never touches in-memory state; it is
logged and exposed through `last_save_ok`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date

from ..tasks import query
from ..tasks.sorting import sort_key, sort_tasks
from ..tasks.task_models import Priority, Task, TaskGroup, TaskStatus, Theme, ViewFilter
from ..tasks.task_store import TaskStore
from ..tasks.workflow import TransitionCheck
from .ports import ChangeListener, TaskRepository

logger = logging.getLogger(__name__)

NO_DESCRIPTION = "No description added for this task."


class Board:
    def __init__(
        self,
        store: TaskStore,
        repository: TaskRepository,
        *,
        theme: Theme = Theme.DARK,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self.store = store
        self.repository = repository
        self.theme = theme
        self.clock = clock
        self.tasks_saved = True
        self.theme_saved = True
        self._listeners: list[ChangeListener] = []

    @classmethod
    def load(
        cls,
        repository: TaskRepository,
        *,
        clock: Callable[[], date] = date.today,
        store: TaskStore | None = None,
    ) -> Board:
        """Build a board from persisted state (never raises on bad stored data)."""
        if store is None:
            store = TaskStore()
        store.replace_all(repository.load_tasks())
        return cls(store, repository, theme=repository.load_theme(), clock=clock)

    @property
    def last_save_ok(self) -> bool:
        """False while either the task list or the theme has unsaved changes."""
        return self.tasks_saved and self.theme_saved

    # ---- notification ----

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener()
            except Exception:
                logger.exception("Board change listener failed.")

    def _commit(self, *, resort: bool = False) -> None:
        if resort:
            self.sort_store()
        self.tasks_saved = self.repository.save_tasks(self.store.all())
        if not self.tasks_saved:
            logger.warning("Board changes are kept in memory but were not saved.")
        self._notify()

    # ---- commands ----

    def add_task(
        self,
        title: str,
        priority: Priority | str | None,
        description: str | None = None,
        assignee: str | None = None,
        due_date: date | None = None,
    ) -> Task:
        task = self.store.create(title, priority, description, assignee, due_date)
        logger.info("Task added id=%s title=%r", task.id, task.title)
        self._commit()
        return task

    def move_task(self, task_id: int, next_status: TaskStatus) -> TransitionCheck | None:
        check = self.store.move(task_id, next_status)
        if check:
            self._commit()
        return check

    def delete_task(self, task_id: int) -> bool:
        removed = self.store.remove(task_id)
        if removed:
            logger.info("Task deleted id=%s", task_id)
            self._commit()
        return removed

    def toggle_complete(self, task_id: int) -> Task | None:
        task = self.store.toggle_completed(task_id)
        if task is not None:
            self._commit(resort=True)
        return task

    def rename_task(self, task_id: int, new_title: str) -> Task:
        before = self.store.get(task_id)
        old_title = before.title if before is not None else None
        task = self.store.rename(task_id, new_title)
        if task.title != old_title:
            self._commit(resort=True)
        return task

    def set_theme(self, theme: Theme) -> Theme:
        self.theme = Theme(theme)
        self.theme_saved = self.repository.save_theme(self.theme)
        if not self.theme_saved:
            logger.warning("Theme change is kept in memory but was not saved.")
        self._notify()
        return self.theme

    def toggle_theme(self) -> Theme:
        return self.set_theme(self.theme.other)

    # ---- views ----

    def today(self) -> date:
        return self.clock()

    def sort_store(self) -> None:
        today = self.today()
        self.store.sort(lambda t: sort_key(t, today))

    def get_view(self, view: ViewFilter | str = ViewFilter.ALL) -> list[Task]:
        today = self.today()
        return sort_tasks(query.filter_tasks(self.store.all(), view, today), today)

    def get_groups(self, view: ViewFilter | str = ViewFilter.ALL) -> dict[TaskGroup, list[Task]]:
        today = self.today()
        visible = sort_tasks(query.filter_tasks(self.store.all(), view, today), today)
        return query.group_tasks(visible, today)

    def get_columns(self) -> dict[TaskStatus, list[Task]]:
        return query.columns(self.store.all())

    def group_of(self, task: Task) -> TaskGroup:
        return query.group(task, self.today())

    def describe(self, task_id: int) -> str | None:
        task = self.store.get(task_id)
        if task is None:
            return None
        return task.description or NO_DESCRIPTION

    def stats(self) -> dict[str, int]:
        today = self.today()
        tasks = self.store.all()
        out = {
            "total": len(tasks),
            "completed": len(query.filter_tasks(tasks, ViewFilter.COMPLETED, today)),
            "pending": len(query.filter_tasks(tasks, ViewFilter.PENDING, today)),
            "upcoming": len(query.filter_tasks(tasks, ViewFilter.UPCOMING, today)),
        }
        for status, items in query.columns(tasks).items():
            out[status.value.lower()] = len(items)
        return out
