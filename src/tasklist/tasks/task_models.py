# src/tasklist/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class TaskStatus(StrEnum):
    """
    Task completion state.

    Notes:
    - the only transition is a symmetric toggle between the two states
    - edits may set either state directly
    """

    INCOMPLETE = "incomplete"
    COMPLETE = "complete"

    @classmethod
    def from_flag(cls, is_complete: bool) -> TaskStatus:
        return cls.COMPLETE if is_complete else cls.INCOMPLETE


class TaskChange(StrEnum):
    ADDED = "added"
    TOGGLED = "toggled"
    EDITED = "edited"
    DELETED = "deleted"


@dataclass(frozen=True, slots=True)
class Task:
    id: str
    title: str
    description: str
    is_complete: bool = False

    @property
    def status(self) -> TaskStatus:
        return TaskStatus.from_flag(self.is_complete)


@dataclass(frozen=True, slots=True)
class TaskEvent:
    """Change notification emitted by the store after a successful mutation."""

    change: TaskChange
    task: Task
