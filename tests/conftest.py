# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskboard.core.board import Board
from taskboard.core.state import AppState
from taskboard.storage.blob_store import MemoryBlobStore
from taskboard.tasks.task_store import TaskStore

from .fakes import FakeRepository, FixedClock, counter_ids


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="taskboard-test",
        log_level="DEBUG",
        data_dir=tmp_path,
        db_path=tmp_path / "board.sqlite3",
        tasks_key="tasks",
        theme_key="theme",
        default_view="all",
        color=False,
    )


@pytest.fixture()
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore(id_factory=counter_ids())


@pytest.fixture()
def repo() -> FakeRepository:
    return FakeRepository()


@pytest.fixture()
def board(store: TaskStore, repo: FakeRepository, clock: FixedClock) -> Board:
    return Board(store, repo, clock=clock)


@pytest.fixture()
def state(settings: SimpleNamespace, board: Board) -> AppState:
    return AppState(settings=settings, board=board, blobs=MemoryBlobStore())
