"""
Task subsystem.

Components:
- task_models.py: data structures (Task) and task errors
- task_store.py: in-memory list + flat-file load/save
"""

from .task_models import NotFoundError, Task, TaskError, ValidationError
from .task_store import TaskStore

__all__ = ["NotFoundError", "Task", "TaskError", "TaskStore", "ValidationError"]
