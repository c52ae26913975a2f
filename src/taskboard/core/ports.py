# src/taskboard/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The board depends on Protocols instead of concrete implementations.
This keeps storage and front-ends swappable and makes headless testing easy.
"""

from collections.abc import Callable, Iterable
from typing import Protocol

from ..tasks.task_models import Task, Theme

ChangeListener = Callable[[], None]
# "State changed, please re-render." The only call from the core into a front-end.


class BlobStore(Protocol):
    """Opaque key -> text storage. Implementations raise PersistenceError on failure."""

    def get(self, key: str) -> str | None: ...
    def put(self, key: str, value: str) -> None: ...
    def delete(self, key: str) -> None: ...


class TaskRepository(Protocol):
    """Load never raises; save reports failure with False."""

    def load_tasks(self) -> list[Task]: ...
    def save_tasks(self, tasks: Iterable[Task]) -> bool: ...
    def load_theme(self) -> Theme: ...
    def save_theme(self, theme: Theme) -> bool: ...
