# src/tasklist/cli/render.py

from __future__ import annotations

from collections.abc import Sequence

from ..tasks.task_models import Task

SHORT_ID_LEN = 8


def render_task_row(position: int, task: Task, *, show_ids: bool = False) -> list[str]:
    mark = "[x]" if task.is_complete else "[ ]"
    head = f"{position:>3}. {mark} {task.title}"
    if show_ids:
        head += f"  ({task.id[:SHORT_ID_LEN]})"
    # Description sits under the title, aligned with it.
    indent = " " * (len(f"{position:>3}. {mark} "))
    return [head, f"{indent}{task.description}"]


def render_task_list(
    tasks: Sequence[Task],
    *,
    title: str = "My Tasks",
    empty_text: str = "Nothing to show yet.",
    show_ids: bool = False,
) -> str:
    lines = [title]
    if not tasks:
        lines.append(f"  {empty_text}")
        return "\n".join(lines)

    for i, task in enumerate(tasks, start=1):
        lines.extend(render_task_row(i, task, show_ids=show_ids))
    return "\n".join(lines)


def render_for_settings(tasks: Sequence[Task], settings) -> str:
    return render_task_list(
        tasks,
        title=str(getattr(settings, "list_title", "My Tasks")),
        empty_text=str(getattr(settings, "empty_text", "Nothing to show yet.")),
        show_ids=bool(getattr(settings, "show_ids", False)),
    )
