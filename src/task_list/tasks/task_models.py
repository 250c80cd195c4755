# src/task_list/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Task:
    """
    A single task.

    Identity is positional: a task has no id beyond its index in the list,
    so indices computed before a mutation must not be reused after it.
    """

    title: str
    description: str = ""
