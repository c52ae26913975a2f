# src/taskboard/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_models import ViewFilter
from .board import Board
from .ports import BlobStore


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: object

    board: Board
    blobs: BlobStore

    current_view: ViewFilter = ViewFilter.ALL
    # Set by the board's change notification, cleared by the front-end after redraw.
    needs_render: bool = True

    def mark_changed(self) -> None:
        self.needs_render = True
