"""
Task subsystem.

Components:
- task_models.py: data structures (Task)
- task_codec.py: line-based text format (encode/decode)
- task_store.py: file-backed storage owning the open handle
"""

from .task_models import Task
from .task_store import TaskStore

__all__ = ["Task", "TaskStore"]
