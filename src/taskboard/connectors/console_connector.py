# src/taskboard/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from .render import render_view

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def _redraw(state: AppState, out: OutputFn) -> None:
    use_color = bool(getattr(state.settings, "color", False))
    out(render_view(state.board, state.current_view, use_color=use_color))
    if not state.board.last_save_ok:
        out("[WARN] Last change could not be saved; it is kept in memory only.")
    state.needs_render = False


def run_console_loop(
    state: AppState,
    *,
    read: InputFn = input,
    write: OutputFn = print,
) -> None:
    """
    Interactive REPL. Commands mutate the board; the board's change
    notification marks the view dirty and it is redrawn after the command.
    """
    logger.info("Console connector started (view=%s).", state.current_view)
    unsubscribe = state.board.subscribe(state.mark_changed)
    write("[CONSOLE] Use /help for commands, /exit to quit.\n")
    _redraw(state, write)

    try:
        while True:
            try:
                line = read("> ").strip()
            except EOFError:
                logger.info("Console EOF received, exiting.")
                break
            except KeyboardInterrupt:
                logger.info("Console KeyboardInterrupt, exiting.")
                write("")
                break

            if not line:
                continue

            if line.lower() in ("/exit", "/quit"):
                logger.info("Console exit command received.")
                break

            if not line.startswith("/"):
                # Bare text is shorthand for /add.
                line = "/add " + line

            try:
                reply = command_registry.handle(state, line)
            except Exception:
                logger.exception("Command handler crashed.")
                reply = "Internal error while handling a command."

            if reply:
                write(reply)
            if state.needs_render:
                _redraw(state, write)
    finally:
        unsubscribe()

    logger.info("Console connector finished.")
