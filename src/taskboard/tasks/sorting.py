# src/taskboard/tasks/sorting.py

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from .query import group
from .task_models import Priority, Task, TaskGroup

GROUP_RANK: dict[TaskGroup, int] = {
    TaskGroup.OVERDUE: 1,
    TaskGroup.TODAY: 2,
    TaskGroup.UPCOMING: 3,
    TaskGroup.COMPLETED: 4,
}

PRIORITY_RANK: dict[Priority, int] = {
    Priority.HIGH: 1,
    Priority.MEDIUM: 2,
    Priority.LOW: 3,
}


def priority_rank(priority: object) -> int:
    # Unknown or missing priorities rank like Medium.
    return PRIORITY_RANK.get(Priority.parse(priority) if isinstance(priority, str) else None, 2)


def sort_key(task: Task, today: date) -> tuple[int, int, int]:
    """
    (completed, group rank, priority rank).

    No further tiebreak: equal keys keep their input order (sorted() is stable).
    """
    return (int(task.completed), GROUP_RANK[group(task, today)], priority_rank(task.priority))


def sort_tasks(tasks: Iterable[Task], today: date) -> list[Task]:
    return sorted(tasks, key=lambda t: sort_key(t, today))
