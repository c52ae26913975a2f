# tests/test_commands.py

from __future__ import annotations

from datetime import date

import pytest

from taskboard.cli.commands import CommandRegistry, parse_add_args, registry
from taskboard.errors import ValidationError
from taskboard.tasks.task_models import Priority, TaskStatus, Theme, ViewFilter


def test_command_registry_routes_and_aliases(state) -> None:
    reg = CommandRegistry()
    called = {"a": 0}

    def handler(state, args):
        called["a"] += 1
        return " ".join(args)

    reg.register("a", handler, "a", aliases=["alpha"])

    assert reg.handle(state, "/a x y") == "x y"
    assert reg.handle(state, "/ALPHA z") == "z"
    assert called["a"] == 2


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_parse_add_args() -> None:
    fields = parse_add_args("Fix login bug !high @sam due:2026-10-20 -- needs a repro first".split())
    assert fields == {
        "title": "Fix login bug",
        "priority": Priority.HIGH,
        "description": "needs a repro first",
        "assignee": "sam",
        "due_date": date(2026, 10, 20),
    }


def test_parse_add_args_bad_date() -> None:
    with pytest.raises(ValidationError):
        parse_add_args(["x", "due:tomorrow"])


def test_add_and_duplicate(state) -> None:
    assert registry.handle(state, "/add Fix bug !h").startswith("Added #")
    reply = registry.handle(state, "/add fix BUG !low")
    assert "Duplicate task title" in reply
    assert len(state.board.store) == 1


def test_add_requires_priority(state) -> None:
    assert registry.handle(state, "/add no priority") == "Title and priority are required"
    assert len(state.board.store) == 0


def test_add_with_unknown_priority(state) -> None:
    reply = registry.handle(state, "/add x !urgent")
    assert reply.startswith("Unknown priority: 'urgent'")
    assert len(state.board.store) == 0


def test_move_next_and_gating(state) -> None:
    task = state.board.add_task("Ship", Priority.MEDIUM)

    reply = registry.handle(state, f"/mv {task.id} d")
    assert reply == "Cannot move #%d: invalid transition." % task.id

    registry.handle(state, f"/next {task.id}")
    registry.handle(state, f"/mv {task.id} review")
    assert task.status is TaskStatus.REVIEW

    registry.handle(state, f"/next {task.id}")
    assert task.status is TaskStatus.DONE
    assert "already DONE" in registry.handle(state, f"/next {task.id}")


def test_invalid_arguments(state) -> None:
    assert registry.handle(state, "/mv x d").startswith("Invalid id")
    assert registry.handle(state, "/mv 1 sideways").startswith("Invalid status")
    assert registry.handle(state, "/rm").startswith("Usage")
    assert registry.handle(state, "/view someday").startswith("Unknown view")


@pytest.mark.parametrize("raw", ["²", "٣", "1²"])
def test_non_ascii_digits_are_invalid_ids(state, raw: str) -> None:
    assert registry.handle(state, f"/rm {raw}") == f"Invalid id: {raw}"


def test_unknown_ids_reply_nothing(state) -> None:
    assert registry.handle(state, "/rm 404") == ""
    assert registry.handle(state, "/done 404") == ""
    assert registry.handle(state, "/mv 404 ip") == ""
    assert registry.handle(state, "/rename 404 new") == "Task 404 not found"


def test_rename_done_desc_rm(state) -> None:
    task = state.board.add_task("Old", Priority.LOW, description="why")

    registry.handle(state, f"/rename {task.id} New name")
    assert task.title == "New name"

    registry.handle(state, f"/done {task.id}")
    assert task.completed is True

    assert registry.handle(state, f"/desc {task.id}") == "why"

    registry.handle(state, f"/rm #{task.id}")
    assert len(state.board.store) == 0


def test_view_switches_current_view(state) -> None:
    state.board.add_task("a", Priority.LOW)
    out = registry.handle(state, "/view completed")
    assert state.current_view is ViewFilter.COMPLETED
    assert "No tasks match this filter." in out
    assert state.needs_render is False


def test_board_and_groups_render(state) -> None:
    task = state.board.add_task("Card", Priority.HIGH, assignee="kim")
    out = registry.handle(state, "/board")
    assert "== BACKLOG (1) ==" in out
    assert f"#{task.id} Card (High • kim)" in out
    assert "IN PROGRESS" in out

    groups = registry.handle(state, "/groups")
    assert groups.splitlines()[0] == "Upcoming (1)"


def test_theme_and_status(state) -> None:
    assert registry.handle(state, "/theme") == "Theme: light."
    assert state.board.theme is Theme.LIGHT
    assert registry.handle(state, "/theme dark") == "Theme: dark."
    assert registry.handle(state, "/theme blue").startswith("Usage")

    status = registry.handle(state, "/status")
    assert "Tasks: 0" in status
    assert "Last save: OK" in status


def test_help_lists_commands(state) -> None:
    text = registry.handle(state, "/help")
    for name in ("add", "mv", "next", "rm", "done", "rename", "desc", "view", "board", "theme"):
        assert f"/{name} -" in text
