# src/tasklist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the view layer.

Commands and connectors depend on these Protocols instead of the concrete store,
which keeps the store swappable and makes testing easier.
"""

from collections.abc import Callable
from typing import Protocol

from ..tasks.task_models import Task, TaskEvent


class TaskListener(Protocol):
    """Callback invoked synchronously after each successful store mutation."""
    def __call__(self, event: TaskEvent) -> None: ...


class TaskRepo(Protocol):
    # Read API
    def count_tasks(self) -> int: ...
    def list_tasks(self) -> tuple[Task, ...]: ...
    def get_task(self, task_id: str) -> Task | None: ...

    # Mutation API ("not found" is a False result, never an exception)
    def add_task(self, *, title: str, description: str) -> Task: ...
    def toggle_complete(self, task_id: str) -> bool: ...
    def edit_task(self, updated: Task) -> bool: ...
    def delete_task(self, task_id: str) -> bool: ...

    # Change notifications
    def subscribe(self, listener: TaskListener) -> Callable[[], None]: ...
