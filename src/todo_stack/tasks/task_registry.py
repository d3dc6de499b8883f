# src/todo_stack/tasks/task_registry.py

from __future__ import annotations

import logging
from collections.abc import Iterator

from .task_models import (
    AddOutcome,
    Added,
    CompleteOutcome,
    Completed,
    DeleteOutcome,
    Deleted,
    Empty,
    NotFound,
    Rejected,
    TaskError,
    ViewOutcome,
)

logger = logging.getLogger(__name__)


def normalize(name: str) -> str:
    """Comparison key for task names (case-insensitive)."""
    return name.lower()


class TaskRegistry:
    """
    In-memory task list with stack ("top") semantics.

    Two views over the same tasks are kept in lockstep by every mutating method:
    - _order: tasks with original casing; the last element is the top
    - _index: normalized names, for duplicate checks and membership

    Lookups never raise for expected failures; they return outcome objects
    (see task_models) and the caller picks the message.
    """

    def __init__(self) -> None:
        self._order: list[str] = []
        self._index: set[str] = set()
        logger.info("Task registry initialized.")

    def __len__(self) -> int:
        return len(self._order)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize(name) in self._index

    def __iter__(self) -> Iterator[str]:
        return reversed(self._order)

    # ---- mutations ----

    def add(self, task: str) -> AddOutcome:
        key = normalize(task)
        if key in self._index:
            logger.debug("Rejected duplicate task %r", task)
            return Rejected(task, reason=TaskError.DUPLICATE_TASK)

        self._order.append(task)
        self._index.add(key)
        logger.debug("Added task %r (total=%d)", task, len(self._order))
        return Added(task)

    def complete_top(self) -> CompleteOutcome:
        if not self._order:
            return Empty()

        task = self._order.pop()
        self._index.discard(normalize(task))
        logger.debug("Completed task %r (total=%d)", task, len(self._order))
        return Completed(task)

    def delete_by_name(self, name: str) -> DeleteOutcome:
        """
        Remove the task whose name equals `name` ignoring case.

        Exact match only (search() is the substring variant). The scan starts
        at the top; uniqueness means at most one task can match.
        """
        target = normalize(name)
        if target not in self._index:
            return NotFound(name)

        for pos in range(len(self._order) - 1, -1, -1):
            if normalize(self._order[pos]) == target:
                task = self._order.pop(pos)
                self._index.discard(target)
                logger.debug("Deleted task %r (total=%d)", task, len(self._order))
                return Deleted(task)
        return NotFound(name)

    def clear(self) -> None:
        dropped = len(self._order)
        self._order.clear()
        self._index.clear()
        logger.debug("Cleared %d task(s)", dropped)

    # ---- queries ----

    def view_all(self) -> ViewOutcome:
        """Snapshot of all tasks, top to bottom, or Empty()."""
        if not self._order:
            return Empty()
        return list(self)

    def search(self, keyword: str) -> list[str]:
        key = normalize(keyword)
        return [task for task in self if key in normalize(task)]

    def count(self) -> int:
        return len(self._order)
