"""In-memory stack-style to-do list with a console menu."""

from .tasks.task_models import Added, Completed, Deleted, Empty, NotFound, Rejected, TaskError
from .tasks.task_registry import TaskRegistry, normalize

__version__ = "0.1.0"

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
