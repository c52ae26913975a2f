# src/taskboard/tasks/workflow.py

from __future__ import annotations

"""
Workflow engine.

Statuses advance along a fixed directed graph:

    BACKLOG -> IN_PROGRESS -> REVIEW -> DONE

DONE is terminal, and a task can only reach DONE after it has been in REVIEW.
A rejected transition is reported as a reason string on TransitionCheck rather
than raised, so the presentation layer can render a disabled action with a tooltip.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from ..errors import WorkflowError
from .task_models import Task, TaskStatus

logger = logging.getLogger(__name__)

WORKFLOW: Mapping[TaskStatus, tuple[TaskStatus, ...]] = MappingProxyType(
    {
        TaskStatus.BACKLOG: (TaskStatus.IN_PROGRESS,),
        TaskStatus.IN_PROGRESS: (TaskStatus.REVIEW,),
        TaskStatus.REVIEW: (TaskStatus.DONE,),
        TaskStatus.DONE: (),
    }
)

REASON_INVALID = "invalid transition"
REASON_NOT_REVIEWED = "must be reviewed first"


@dataclass(slots=True, frozen=True)
class TransitionCheck:
    allowed: bool
    reason: str | None = None

    def __bool__(self) -> bool:
        return self.allowed

    def raise_for_status(self) -> None:
        if not self.allowed:
            raise WorkflowError(self.reason or REASON_INVALID)


ALLOWED = TransitionCheck(True)


def can_transition(task: Task, target: TaskStatus) -> TransitionCheck:
    if target not in WORKFLOW.get(task.status, ()):
        return TransitionCheck(False, REASON_INVALID)
    if target is TaskStatus.DONE and not task.has_been_in_review:
        return TransitionCheck(False, REASON_NOT_REVIEWED)
    return ALLOWED


def apply_transition(task: Task, target: TaskStatus) -> TransitionCheck:
    """Move `task` to `target` if the graph allows it; otherwise leave it untouched."""
    check = can_transition(task, target)
    if not check:
        logger.debug(
            "Rejected transition task_id=%s %s -> %s: %s", task.id, task.status, target, check.reason
        )
        return check

    task.status = target
    if target is TaskStatus.REVIEW:
        task.has_been_in_review = True
    logger.debug("Task %s moved to %s", task.id, target)
    return check


def next_status(status: TaskStatus) -> TaskStatus | None:
    successors = WORKFLOW.get(status, ())
    return successors[0] if successors else None


def next_action(task: Task) -> tuple[TaskStatus, TransitionCheck] | None:
    """The forward move offered on a task card, and whether it is currently enabled."""
    target = next_status(task.status)
    if target is None:
        return None
    return target, can_transition(task, target)
