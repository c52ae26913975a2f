# src/taskboard/errors.py

from __future__ import annotations


class TaskboardError(Exception):
    """Base class for errors surfaced to the presentation layer."""


class ValidationError(TaskboardError, ValueError):
    """A required field is missing or has an unsupported value."""


class DuplicateError(TaskboardError):
    """Another task already uses this title (case-insensitive)."""

    def __init__(self, title: str) -> None:
        super().__init__(f"Duplicate task title: {title!r}")
        self.title = title


class NotFoundError(TaskboardError, LookupError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id


class WorkflowError(TaskboardError):
    """Illegal status transition. Usually reported as a reason string instead."""


class PersistenceError(TaskboardError):
    """Storage or serialization failure. Non-fatal for the in-memory board."""
