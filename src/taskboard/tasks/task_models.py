# src/taskboard/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import StrEnum


class TaskStatus(StrEnum):
    """Workflow column of a task. Transitions are governed by workflow.WORKFLOW."""

    BACKLOG = "BACKLOG"
    IN_PROGRESS = "IN_PROGRESS"
    REVIEW = "REVIEW"
    DONE = "DONE"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ")

    @classmethod
    def parse(cls, raw: str | None) -> TaskStatus | None:
        """Accept "in progress", "in-progress", "IN_PROGRESS"...; None if unknown."""
        if not raw:
            return None
        key = raw.strip().upper().replace("-", "_").replace(" ", "_")
        try:
            return cls(key)
        except ValueError:
            return None


class Priority(StrEnum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @classmethod
    def parse(cls, raw: str | None) -> Priority | None:
        if not raw:
            return None
        text = raw.strip().lower()
        for p in cls:
            if p.value.lower() == text or p.value[0].lower() == text:
                return p
        return None


class TaskGroup(StrEnum):
    """Temporal/completion bucket used for display grouping and sorting."""

    OVERDUE = "Overdue"
    TODAY = "Today"
    UPCOMING = "Upcoming"
    COMPLETED = "Completed"


class ViewFilter(StrEnum):
    ALL = "all"
    COMPLETED = "completed"
    PENDING = "pending"
    UPCOMING = "upcoming"


class Theme(StrEnum):
    LIGHT = "light"
    DARK = "dark"

    @property
    def other(self) -> Theme:
        return Theme.DARK if self is Theme.LIGHT else Theme.LIGHT


@dataclass(slots=True)
class Task:
    id: int
    title: str
    priority: Priority
    description: str = ""
    assignee: str | None = None
    due_date: date | None = None

    status: TaskStatus = TaskStatus.BACKLOG
    completed: bool = False
    has_been_in_review: bool = False

    def title_key(self) -> str:
        return self.title.lower()
