# src/todo_stack/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..tasks.task_registry import TaskRegistry


@dataclass
class AppState:
    # Settings (or a test stand-in) live on the state for easy access by handlers.
    settings: object

    # The one registry this session works on. Passed around explicitly, never global.
    registry: TaskRegistry = field(default_factory=TaskRegistry)
