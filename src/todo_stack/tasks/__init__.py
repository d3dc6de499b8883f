"""
Task subsystem.

Components:
- task_models.py: outcome objects (Added, Rejected, Completed, ...) and TaskError
- task_registry.py: in-memory TaskRegistry with stack ("top") semantics
"""

from .task_models import Added, Completed, Deleted, Empty, NotFound, Rejected, TaskError
from .task_registry import TaskRegistry, normalize

__all__ = [
    "Added",
    "Completed",
    "Deleted",
    "Empty",
    "NotFound",
    "Rejected",
    "TaskError",
    "TaskRegistry",
    "normalize",
]
