# src/tasklist/tasks/task_api.py

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..core.ports import TaskRepo
from .task_models import Task

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TaskDraft:
    """
    Editable form state for the "New Task" and "Edit Task" screens.

    A draft without task_id is a new task; otherwise it edits that task and
    carries its completion flag through unchanged.
    """

    title: str = ""
    description: str = ""
    task_id: str | None = None
    is_complete: bool = False

    @classmethod
    def for_task(cls, task: Task) -> TaskDraft:
        return cls(
            title=task.title,
            description=task.description,
            task_id=task.id,
            is_complete=task.is_complete,
        )

    @property
    def is_new(self) -> bool:
        return self.task_id is None

    @property
    def can_submit(self) -> bool:
        # Confirm stays disabled while either field is blank.
        return bool(self.title.strip()) and bool(self.description.strip())


def submit_draft(store: TaskRepo, draft: TaskDraft) -> Task | None:
    """
    Apply a draft to the store.

    Returns the stored task, or None when the draft cannot be submitted
    or the edited task no longer exists.
    """
    if not draft.can_submit:
        return None

    if draft.task_id is None:
        return store.add_task(title=draft.title, description=draft.description)

    updated = Task(
        id=draft.task_id,
        title=draft.title,
        description=draft.description,
        is_complete=draft.is_complete,
    )
    if not store.edit_task(updated):
        logger.info("Edit draft dropped, task is gone id=%s", draft.task_id)
        return None
    return updated


def resolve_task_ref(store: TaskRepo, ref: str) -> Task | None:
    """
    Resolve a user-typed reference to a task.

    Accepts a 1-based list position ("2") or a unique id prefix ("3f9a").
    """
    ref = (ref or "").strip()
    if not ref:
        return None

    tasks = store.list_tasks()

    if ref.isdigit():
        pos = int(ref)
        if 1 <= pos <= len(tasks):
            return tasks[pos - 1]
        return None

    needle = ref.lower()
    matches = [t for t in tasks if t.id.lower().startswith(needle)]
    if len(matches) == 1:
        return matches[0]
    return None
