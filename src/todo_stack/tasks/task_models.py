# src/todo_stack/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class TaskError(StrEnum):
    """
    Named failure conditions of the task registry.

    Notes:
    - none of these are raised; they ride on the outcome objects below
      so the caller decides how to present them.
    """

    DUPLICATE_TASK = "duplicate_task"
    EMPTY = "empty"
    NOT_FOUND = "not_found"


@dataclass(frozen=True, slots=True)
class Added:
    task: str

    ok = True


@dataclass(frozen=True, slots=True)
class Rejected:
    task: str
    reason: TaskError = TaskError.DUPLICATE_TASK

    ok = False

    @property
    def error(self) -> TaskError:
        return self.reason


@dataclass(frozen=True, slots=True)
class Completed:
    task: str

    ok = True


@dataclass(frozen=True, slots=True)
class Empty:
    """Registry had nothing to complete or show."""

    ok = False
    error = TaskError.EMPTY


@dataclass(frozen=True, slots=True)
class Deleted:
    task: str

    ok = True


@dataclass(frozen=True, slots=True)
class NotFound:
    name: str

    ok = False
    error = TaskError.NOT_FOUND


AddOutcome = Added | Rejected
CompleteOutcome = Completed | Empty
DeleteOutcome = Deleted | NotFound
ViewOutcome = list[str] | Empty
