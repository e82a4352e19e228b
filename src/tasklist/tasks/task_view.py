# src/tasklist/tasks/task_view.py

"""
Text views over a ProjectRegistry.

Views only read state. Output is deterministic: projects sorted by name,
tasks in insertion order. Every task line has the shape

    [X] 3:2024-01-01 description

with a blank checkbox for open tasks and nothing between ':' and the space
when the task has no deadline.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import date

from .task_models import Deadline, Task
from .task_store import ProjectRegistry

TaskFilter = Callable[[Task], bool]

INDENT = "    "
NO_DEADLINE_HEADER = "No deadline"


def format_deadline(deadline: Deadline | None) -> str:
    return "" if deadline is None else str(deadline)


def format_task_line(task: Task) -> str:
    mark = "X" if task.done else " "
    return f"{INDENT}[{mark}] {task.id}:{format_deadline(task.deadline)} {task.description}"


def _render_group(header: str, tasks: Iterable[Task]) -> list[str]:
    lines = [header]
    lines.extend(format_task_line(t) for t in tasks)
    lines.append("")
    return lines


def render_projects(registry: ProjectRegistry, keep: TaskFilter | None = None) -> str:
    """Every project (sorted by name) with its tasks, optionally filtered."""
    lines: list[str] = []
    for name, tasks in registry.projects_sorted_by_name():
        shown = tasks if keep is None else [t for t in tasks if keep(t)]
        lines.extend(_render_group(name, shown))
    return "".join(f"{line}\n" for line in lines)


def render_due(registry: ProjectRegistry, today: date) -> str:
    """Same shape as render_projects, keeping only tasks due on or before `today`."""
    return render_projects(registry, keep=lambda t: t.is_due_by(today))


def render_by_deadline(registry: ProjectRegistry) -> str:
    """
    Tasks grouped by deadline, earliest first, then the tasks without one.

    Within a group tasks follow project name order, then insertion order.
    """
    dated: dict[Deadline, list[Task]] = {}
    undated: list[Task] = []
    for _name, tasks in registry.projects_sorted_by_name():
        for task in tasks:
            if task.deadline is None:
                undated.append(task)
            else:
                dated.setdefault(task.deadline, []).append(task)

    lines: list[str] = []
    for deadline in sorted(dated):
        lines.extend(_render_group(str(deadline), dated[deadline]))
    if undated:
        lines.extend(_render_group(NO_DEADLINE_HEADER, undated))
    return "".join(f"{line}\n" for line in lines)
