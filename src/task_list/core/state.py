# src/task_list/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..config import ErrorPolicy
from ..tasks.task_models import Task
from .ports import TaskRepo


@dataclass
class AppState:
    store: TaskRepo

    tasks: list[Task] = field(default_factory=list)

    # Status / prompt line shown under the list; cleared after each command.
    message: str = ""

    # True while delete/edit waits for an index: the list is drawn with [n] prefixes.
    selecting: bool = False

    # Set to False by the `exit` command.
    running: bool = True

    on_storage_error: ErrorPolicy = ErrorPolicy.EXIT

    def persist(self) -> None:
        """Write the full task list through the store."""
        self.store.write(self.tasks)
