# tests/test_console.py

from __future__ import annotations

from collections.abc import Iterable

from taskboard.connectors.console_connector import run_console_loop
from taskboard.connectors.render import EMPTY_BOARD


def _scripted(lines: Iterable[str]):
    it = iter(lines)

    def read(prompt: str) -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read


def test_console_adds_and_rerenders(state) -> None:
    out: list[str] = []
    run_console_loop(state, read=_scripted(["/add Write tests !high", "", "/exit"]), write=out.append)

    assert len(state.board.store) == 1
    assert EMPTY_BOARD in out[1]
    # Reply, then the redraw triggered by the change notification.
    assert out[2].startswith("Added #")
    assert "Write tests" in out[3]


def test_bare_text_is_shorthand_for_add(state) -> None:
    run_console_loop(state, read=_scripted(["Buy milk !low"]), write=lambda _: None)
    assert [t.title for t in state.board.store.all()] == ["Buy milk"]


def test_console_stops_listening_after_exit(state) -> None:
    run_console_loop(state, read=_scripted([]), write=lambda _: None)
    state.needs_render = False
    state.board.add_task("after", "Low")
    assert state.needs_render is False


def test_save_failure_is_reported(state) -> None:
    state.board.repository.ok = False
    out: list[str] = []
    run_console_loop(state, read=_scripted(["/add x !low"]), write=out.append)
    assert any(line.startswith("[WARN]") for line in out)
    assert len(state.board.store) == 1
