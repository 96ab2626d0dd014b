# src/tasklist/tasks/task_store.py

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from dataclasses import replace

from ..core.ports import TaskListener
from .task_models import Task, TaskChange, TaskEvent

logger = logging.getLogger(__name__)


def _new_task_id() -> str:
    return str(uuid.uuid4())


class TaskStore:
    """
    In-memory ordered task store.

    - insertion order is the only ordering (no implicit sort)
    - lookup by id is a linear scan over the ordered list
    - records are immutable Task values; mutations replace the record in place
    - "not found" on toggle/edit/delete is reported as a False result
    - listeners are notified synchronously after each successful mutation

    Not thread-safe: the store is owned by a single view loop.
    """

    def __init__(self, *, id_factory: Callable[[], str] | None = None) -> None:
        self._tasks: list[Task] = []
        self._issued_ids: set[str] = set()
        self._id_factory = id_factory or _new_task_id
        self._listeners: list[TaskListener] = []
        logger.info("TaskStore ready (in-memory)")

    # ---- low-level helpers ----

    def _index_of(self, task_id: str) -> int | None:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None

    @staticmethod
    def _require_text(name: str, value: str) -> None:
        if not value or not value.strip():
            raise ValueError(f"{name} is required")

    def _notify(self, change: TaskChange, task: Task) -> None:
        event = TaskEvent(change=change, task=task)
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("Task listener failed change=%s task_id=%s", change, task.id)

    # ---- public API ----

    def count_tasks(self) -> int:
        return len(self._tasks)

    def list_tasks(self) -> tuple[Task, ...]:
        """Snapshot of the current ordered sequence."""
        return tuple(self._tasks)

    def get_task(self, task_id: str) -> Task | None:
        idx = self._index_of(task_id)
        return self._tasks[idx] if idx is not None else None

    def add_task(self, *, title: str, description: str) -> Task:
        self._require_text("title", title)
        self._require_text("description", description)

        task_id = self._id_factory()
        if task_id in self._issued_ids:
            raise RuntimeError(f"id factory returned an already issued id: {task_id}")
        self._issued_ids.add(task_id)

        task = Task(id=task_id, title=title, description=description, is_complete=False)
        self._tasks.append(task)
        logger.debug("Task added id=%s total=%d", task.id, len(self._tasks))
        self._notify(TaskChange.ADDED, task)
        return task

    def toggle_complete(self, task_id: str) -> bool:
        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("Toggle ignored, task not found id=%s", task_id)
            return False

        current = self._tasks[idx]
        task = replace(current, is_complete=not current.is_complete)
        self._tasks[idx] = task
        logger.debug("Task toggled id=%s status=%s", task.id, task.status.value)
        self._notify(TaskChange.TOGGLED, task)
        return True

    def edit_task(self, updated: Task) -> bool:
        """Replace the whole record (title, description, is_complete) matching updated.id."""
        self._require_text("title", updated.title)
        self._require_text("description", updated.description)

        idx = self._index_of(updated.id)
        if idx is None:
            logger.debug("Edit ignored, task not found id=%s", updated.id)
            return False

        self._tasks[idx] = updated
        logger.debug("Task edited id=%s status=%s", updated.id, updated.status.value)
        self._notify(TaskChange.EDITED, updated)
        return True

    def delete_task(self, task_id: str) -> bool:
        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("Delete ignored, task not found id=%s", task_id)
            return False

        task = self._tasks.pop(idx)
        logger.debug("Task deleted id=%s total=%d", task.id, len(self._tasks))
        self._notify(TaskChange.DELETED, task)
        return True

    def subscribe(self, listener: TaskListener) -> Callable[[], None]:
        """
        Register a change listener.

        Returns a callable that removes the listener again (safe to call twice).
        """
        self._listeners.append(listener)
        active = True

        def unsubscribe() -> None:
            nonlocal active
            if not active:
                return
            active = False
            # Match by identity: equal-by-value listeners are still distinct subscriptions.
            for i, registered in enumerate(self._listeners):
                if registered is listener:
                    del self._listeners[i]
                    return

        return unsubscribe
