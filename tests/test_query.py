# tests/test_query.py

from __future__ import annotations

from datetime import date, timedelta

import pytest

from taskboard.tasks.query import columns, filter_tasks, group, group_tasks
from taskboard.tasks.task_models import Priority, Task, TaskGroup, TaskStatus, ViewFilter

from .fakes import TODAY

YESTERDAY = TODAY - timedelta(days=1)
TOMORROW = TODAY + timedelta(days=1)


def _t(id: int, due: date | None, completed: bool = False, status: TaskStatus = TaskStatus.BACKLOG) -> Task:
    return Task(id=id, title=f"t{id}", priority=Priority.MEDIUM, due_date=due, completed=completed, status=status)


@pytest.mark.parametrize(
    "due, completed, expected",
    [
        (None, False, TaskGroup.UPCOMING),
        (None, True, TaskGroup.UPCOMING),
        (YESTERDAY, True, TaskGroup.COMPLETED),
        (TOMORROW, True, TaskGroup.COMPLETED),
        (YESTERDAY, False, TaskGroup.OVERDUE),
        (TODAY, False, TaskGroup.TODAY),
        (TOMORROW, False, TaskGroup.UPCOMING),
    ],
)
def test_group(due, completed, expected) -> None:
    assert group(_t(1, due, completed), TODAY) is expected


def test_today_is_injected() -> None:
    task = _t(1, TODAY)
    assert group(task, TODAY) is TaskGroup.TODAY
    assert group(task, TOMORROW) is TaskGroup.OVERDUE
    assert group(task, YESTERDAY) is TaskGroup.UPCOMING


def _sample() -> list[Task]:
    return [
        _t(1, YESTERDAY),
        _t(2, TODAY),
        _t(3, TOMORROW),
        _t(4, None),
        _t(5, YESTERDAY, completed=True),
        _t(6, None, completed=True),
    ]


def test_filter_views() -> None:
    tasks = _sample()
    ids = lambda view: [t.id for t in filter_tasks(tasks, view, TODAY)]  # noqa: E731

    assert ids(ViewFilter.ALL) == [1, 2, 3, 4, 5, 6]
    assert ids(ViewFilter.COMPLETED) == [5, 6]
    assert ids(ViewFilter.PENDING) == [1]
    assert ids(ViewFilter.UPCOMING) == [2, 3]
    assert ids("upcoming") == [2, 3]


def test_pending_and_upcoming_partition_dated_open_tasks() -> None:
    tasks = _sample()
    pending = {t.id for t in filter_tasks(tasks, ViewFilter.PENDING, TODAY)}
    upcoming = {t.id for t in filter_tasks(tasks, ViewFilter.UPCOMING, TODAY)}
    dated_open = {t.id for t in tasks if t.due_date is not None and not t.completed}

    assert pending.isdisjoint(upcoming)
    assert pending | upcoming == dated_open


def test_filter_returns_a_fresh_list() -> None:
    tasks = _sample()
    view = filter_tasks(tasks, ViewFilter.ALL, TODAY)
    view.pop()
    assert len(tasks) == 6


def test_unknown_view_is_rejected() -> None:
    with pytest.raises(ValueError):
        filter_tasks(_sample(), "someday", TODAY)


def test_group_tasks_has_every_group() -> None:
    groups = group_tasks(_sample(), TODAY)
    assert list(groups) == [TaskGroup.OVERDUE, TaskGroup.TODAY, TaskGroup.UPCOMING, TaskGroup.COMPLETED]
    assert [t.id for t in groups[TaskGroup.UPCOMING]] == [3, 4, 6]
    assert [t.id for t in groups[TaskGroup.COMPLETED]] == [5]


def test_columns_follow_workflow_order() -> None:
    tasks = [_t(1, None, status=TaskStatus.REVIEW), _t(2, None), _t(3, None, status=TaskStatus.REVIEW)]
    cols = columns(tasks)
    assert list(cols) == [TaskStatus.BACKLOG, TaskStatus.IN_PROGRESS, TaskStatus.REVIEW, TaskStatus.DONE]
    assert [t.id for t in cols[TaskStatus.REVIEW]] == [1, 3]
    assert cols[TaskStatus.DONE] == []
