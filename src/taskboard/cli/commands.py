# src/taskboard/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date

from ..connectors.render import render_columns, render_groups, render_view
from ..core.state import AppState
from ..errors import TaskboardError, ValidationError
from ..tasks.task_models import Priority, TaskStatus, Theme, ViewFilter
from ..tasks.workflow import next_status

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)

STATUS_ALIASES = {
    "b": TaskStatus.BACKLOG,
    "ip": TaskStatus.IN_PROGRESS,
    "r": TaskStatus.REVIEW,
    "d": TaskStatus.DONE,
}


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        Board errors (validation, duplicate title, unknown id on rename) become the reply.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            return handler(state, args)
        except TaskboardError as e:
            return str(e)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- argument helpers ----


def _task_id(args: list[str], usage: str) -> int:
    if not args:
        raise ValidationError(f"Usage: {usage}")
    raw = args[0].lstrip("#").rstrip(".")
    if not raw.isascii() or not raw.isdecimal():
        raise ValidationError(f"Invalid id: {args[0]}")
    return int(raw)


def _status(raw: str) -> TaskStatus:
    status = STATUS_ALIASES.get(raw.lower()) or TaskStatus.parse(raw)
    if status is None:
        raise ValidationError(f"Invalid status: {raw}. Use backlog/in_progress/review/done (b/ip/r/d).")
    return status


def _view(raw: str) -> ViewFilter:
    try:
        return ViewFilter(raw.lower())
    except ValueError:
        raise ValidationError(
            f"Unknown view: {raw}. Use one of: {', '.join(v.value for v in ViewFilter)}."
        ) from None


def parse_add_args(args: list[str]) -> dict:
    """
    Split `/add` arguments into task fields.

    /add Fix login bug !high @sam due:2026-10-20 -- longer description here
    """
    title_parts: list[str] = []
    description = ""
    priority: Priority | str | None = None
    assignee: str | None = None
    due_date: date | None = None

    for i, tok in enumerate(args):
        if tok == "--":
            description = " ".join(args[i + 1 :])
            break
        if tok.startswith("!") and len(tok) > 1:
            priority = Priority.parse(tok[1:]) or tok[1:]
        elif tok.startswith("@") and len(tok) > 1:
            assignee = tok[1:]
        elif tok.lower().startswith("due:"):
            try:
                due_date = date.fromisoformat(tok[4:])
            except ValueError:
                raise ValidationError(f"Invalid due date: {tok[4:]} (expected YYYY-MM-DD)") from None
        else:
            title_parts.append(tok)

    return {
        "title": " ".join(title_parts),
        "priority": priority,
        "description": description,
        "assignee": assignee,
        "due_date": due_date,
    }


# ---- commands ----


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str]) -> str:
    fields = parse_add_args(args)
    task = state.board.add_task(**fields)
    return f"Added #{task.id} {task.title}."


def cmd_mv(state: AppState, args: list[str]) -> str:
    task_id = _task_id(args, "/mv <id> <status>")
    if len(args) < 2:
        raise ValidationError("Usage: /mv <id> <status>")
    check = state.board.move_task(task_id, _status(args[1]))
    if check is None:
        return ""
    if not check.allowed:
        return f"Cannot move #{task_id}: {check.reason}."
    return ""


def cmd_next(state: AppState, args: list[str]) -> str:
    task_id = _task_id(args, "/next <id>")
    task = state.board.store.get(task_id)
    if task is None:
        return ""
    target = next_status(task.status)
    if target is None:
        return f"#{task_id} is already {task.status.label}."
    check = state.board.move_task(task_id, target)
    if check is not None and not check.allowed:
        return f"Cannot move #{task_id}: {check.reason}."
    return ""


def cmd_rm(state: AppState, args: list[str]) -> str:
    state.board.delete_task(_task_id(args, "/rm <id>"))
    return ""


def cmd_done(state: AppState, args: list[str]) -> str:
    state.board.toggle_complete(_task_id(args, "/done <id>"))
    return ""


def cmd_rename(state: AppState, args: list[str]) -> str:
    task_id = _task_id(args, "/rename <id> <new title>")
    state.board.rename_task(task_id, " ".join(args[1:]))
    return ""


def cmd_desc(state: AppState, args: list[str]) -> str:
    return state.board.describe(_task_id(args, "/desc <id>")) or ""


def cmd_view(state: AppState, args: list[str]) -> str:
    if args:
        state.current_view = _view(args[0])
    use_color = bool(getattr(state.settings, "color", False))
    state.needs_render = False
    return render_view(state.board, state.current_view, use_color=use_color)


def cmd_groups(state: AppState, args: list[str]) -> str:
    view = _view(args[0]) if args else state.current_view
    use_color = bool(getattr(state.settings, "color", False))
    return render_groups(state.board, view, use_color=use_color)


def cmd_board(state: AppState, args: list[str]) -> str:
    use_color = bool(getattr(state.settings, "color", False))
    return render_columns(state.board, use_color=use_color)


def cmd_theme(state: AppState, args: list[str]) -> str:
    """
    /theme        -> toggle light/dark
    /theme light  -> set light
    /theme dark   -> set dark
    """
    if not args:
        theme = state.board.toggle_theme()
    else:
        try:
            theme = state.board.set_theme(Theme(args[0].lower()))
        except ValueError:
            return "Usage: /theme [light|dark]"
    return f"Theme: {theme.value}."


def cmd_status(state: AppState, args: list[str]) -> str:
    board = state.board
    s = board.stats()
    saved = "OK" if board.last_save_ok else "FAILED (changes kept in memory)"
    return (
        "Status:\n"
        f"  Tasks: {s['total']} (completed {s['completed']}, pending {s['pending']}, upcoming {s['upcoming']})\n"
        f"  Columns: backlog {s['backlog']}, in progress {s['in_progress']}, "
        f"review {s['review']}, done {s['done']}\n"
        f"  View: {state.current_view.value}\n"
        f"  Theme: {board.theme.value}\n"
        f"  Last save: {saved}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register(
    "add",
    cmd_add,
    help_text="Add a task: /add <title> !high|!medium|!low [@assignee] [due:YYYY-MM-DD] [-- description].",
)
registry.register("mv", cmd_mv, help_text="Move a task: /mv <id> <status> (b/ip/r/d).", aliases=["move"])
registry.register("next", cmd_next, help_text="Move a task one step forward: /next <id>.")
registry.register("rm", cmd_rm, help_text="Delete a task: /rm <id>.", aliases=["delete"])
registry.register("done", cmd_done, help_text="Toggle completed: /done <id>.", aliases=["toggle"])
registry.register("rename", cmd_rename, help_text="Rename a task: /rename <id> <new title>.")
registry.register("desc", cmd_desc, help_text="Show a task description: /desc <id>.")
registry.register("view", cmd_view, help_text="List tasks: /view [all|completed|pending|upcoming].")
registry.register("groups", cmd_groups, help_text="List tasks by group: /groups [view].")
registry.register("board", cmd_board, help_text="Show workflow columns with next moves.")
registry.register("theme", cmd_theme, help_text="Theme preference: /theme [light|dark].")
registry.register("status", cmd_status, help_text="Show counts, theme and save state.")
