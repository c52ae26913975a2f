# src/taskboard/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires the blob store, repository and board into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.board import Board
from ..core.ports import BlobStore
from ..core.state import AppState
from ..errors import PersistenceError
from ..storage.blob_store import MemoryBlobStore, SqliteBlobStore
from ..storage.repository import BoardRepository
from ..tasks.task_models import ViewFilter

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.db_path.parent.mkdir(parents=True, exist_ok=True)


def _open_blob_store(settings) -> BlobStore:
    try:
        return SqliteBlobStore(settings.db_path)
    except PersistenceError:
        # The board still works; nothing will survive the session.
        logger.warning("Cannot open %s; running without persistence.", settings.db_path, exc_info=True)
        return MemoryBlobStore()


def create_initial_state(*, settings=None, blobs: BlobStore | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    if blobs is None:
        _ensure_local_dirs(settings)
        blobs = _open_blob_store(settings)

    repository = BoardRepository(
        blobs,
        tasks_key=getattr(settings, "tasks_key", "tasks"),
        theme_key=getattr(settings, "theme_key", "theme"),
    )
    board = Board.load(repository)

    try:
        view = ViewFilter(str(getattr(settings, "default_view", "all")).lower())
    except ValueError:
        logger.warning("Unknown default view %r; using 'all'.", getattr(settings, "default_view", None))
        view = ViewFilter.ALL

    return AppState(settings=settings, board=board, blobs=blobs, current_view=view)
