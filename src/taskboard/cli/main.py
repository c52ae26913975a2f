# src/taskboard/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState from persisted state, then runs the console REPL.
"""

from __future__ import annotations

import contextlib
import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _shutdown(state) -> None:
    """Final save + close (no exceptions should escape)."""
    board = state.board
    if not board.repository.save_tasks(board.store.all()):
        logger.error("Final save failed; recent changes may be lost.")

    blobs = getattr(state, "blobs", None)
    if blobs is not None and hasattr(blobs, "close"):
        with contextlib.suppress(Exception):
            blobs.close()


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)
    try:
        run_console_loop(state)
    finally:
        _shutdown(state)
        logger.info("Bye.")


if __name__ == "__main__":
    main()
