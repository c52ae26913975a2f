# src/taskboard/tasks/query.py

"""
Query engine: derived views over a task sequence.

"today" is always passed in by the caller so results are deterministic;
the Board supplies it from its clock.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from .task_models import Task, TaskGroup, TaskStatus, ViewFilter
from .workflow import WORKFLOW


def group(task: Task, today: date) -> TaskGroup:
    # A task without a date is "Upcoming" even when completed.
    if task.due_date is None:
        return TaskGroup.UPCOMING
    if task.completed:
        return TaskGroup.COMPLETED
    if task.due_date < today:
        return TaskGroup.OVERDUE
    if task.due_date == today:
        return TaskGroup.TODAY
    return TaskGroup.UPCOMING


def matches(task: Task, view: ViewFilter, today: date) -> bool:
    if view is ViewFilter.COMPLETED:
        return task.completed
    if view is ViewFilter.PENDING:
        return task.due_date is not None and task.due_date < today and not task.completed
    if view is ViewFilter.UPCOMING:
        return task.due_date is not None and task.due_date >= today and not task.completed
    return True


def filter_tasks(tasks: Iterable[Task], view: ViewFilter | str, today: date) -> list[Task]:
    """Snapshot of the tasks visible under `view`, in input order."""
    view = ViewFilter(view)
    return [t for t in tasks if matches(t, view, today)]


def group_tasks(tasks: Iterable[Task], today: date) -> dict[TaskGroup, list[Task]]:
    out: dict[TaskGroup, list[Task]] = {g: [] for g in TaskGroup}
    for t in tasks:
        out[group(t, today)].append(t)
    return out


def columns(tasks: Iterable[Task]) -> dict[TaskStatus, list[Task]]:
    """Board columns in workflow order."""
    out: dict[TaskStatus, list[Task]] = {s: [] for s in WORKFLOW}
    for t in tasks:
        out[t.status].append(t)
    return out
