# src/taskboard/connectors/render.py

"""Plain-text rendering of board views for the console connector."""

from __future__ import annotations

from ..core.board import Board
from ..tasks.task_models import Priority, Task, TaskGroup, TaskStatus, ViewFilter
from ..tasks.workflow import next_action

EMPTY_BOARD = "No tasks yet. Add one with /add."
NO_MATCH = "No tasks match this filter."

_PRIORITY_MARK = {Priority.HIGH: "▲", Priority.MEDIUM: "·", Priority.LOW: "▼"}

_BOLD = "1"
_DIM = "2"
_STRIKE = "9"
_GROUP_COLOR = {
    TaskGroup.OVERDUE: "31",
    TaskGroup.TODAY: "33",
    TaskGroup.UPCOMING: "36",
    TaskGroup.COMPLETED: "32",
}


def color(text: str, *codes: str, enabled: bool = True) -> str:
    if not enabled or not codes:
        return text
    return f"\033[{';'.join(codes)}m{text}\033[0m"


def task_line(task: Task, group: TaskGroup, *, use_color: bool = False) -> str:
    box = "[x]" if task.completed else "[ ]"
    title = color(task.title, _STRIKE, _DIM, enabled=use_color) if task.completed else task.title
    mark = _PRIORITY_MARK.get(task.priority, "·")
    due = task.due_date.isoformat() if task.due_date else "No date"
    badge = color(group.value, _GROUP_COLOR[group], enabled=use_color)
    return f"{box} {task.id}  {title}  {mark} {task.priority}  due {due}  [{badge}]  {task.status.label}"


def render_view(board: Board, view: ViewFilter, *, use_color: bool = False) -> str:
    tasks = board.get_view(view)
    header = color(f"Tasks ({view.value})", _BOLD, enabled=use_color)
    if not len(board.store):
        return f"{header}\n  {EMPTY_BOARD}"
    if not tasks:
        return f"{header}\n  {NO_MATCH}"
    lines = [header]
    lines.extend("  " + task_line(t, board.group_of(t), use_color=use_color) for t in tasks)
    return "\n".join(lines)


def render_groups(board: Board, view: ViewFilter, *, use_color: bool = False) -> str:
    if not len(board.store):
        return EMPTY_BOARD
    lines: list[str] = []
    for grp, tasks in board.get_groups(view).items():
        if not tasks:
            continue
        lines.append(color(f"{grp.value} ({len(tasks)})", _BOLD, _GROUP_COLOR[grp], enabled=use_color))
        lines.extend("  " + task_line(t, grp, use_color=use_color) for t in tasks)
    return "\n".join(lines) if lines else NO_MATCH


def task_card(task: Task) -> str:
    who = task.assignee or "Unassigned"
    card = f"#{task.id} {task.title} ({task.priority} • {who})"
    action = next_action(task)
    if action is None:
        return card
    target, check = action
    if check.allowed:
        return f"{card}  [/next {task.id} → {target.label}]"
    return f"{card}  [move disabled: {check.reason}]"


def render_columns(board: Board, *, use_color: bool = False) -> str:
    lines: list[str] = []
    cols = board.get_columns()
    for status in TaskStatus:
        tasks = cols[status]
        lines.append(color(f"== {status.label} ({len(tasks)}) ==", _BOLD, enabled=use_color))
        if not tasks:
            lines.append("  No tasks")
            continue
        lines.extend("  " + task_card(t) for t in tasks)
    return "\n".join(lines)
