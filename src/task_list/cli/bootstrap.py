# src/task_list/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- ensures the data directory exists,
- opens the one TaskStore the process will use,
- loads the task list into a fresh AppState.
"""

from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..core.state import AppState
from ..errors import TaskStoreError
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def ensure_data_dir(settings: Settings) -> None:
    path = settings.tasks_path.parent
    try:
        path.mkdir(mode=0o755, parents=True, exist_ok=True)
    except OSError as e:
        raise TaskStoreError(f"Cannot create data directory {path}: {e}") from e


def open_store(settings: Settings | None = None) -> TaskStore:
    if settings is None:
        settings = get_settings()
    ensure_data_dir(settings)
    return TaskStore(settings.tasks_path)


def create_initial_state(*, store: TaskStore, settings: Settings | None = None) -> AppState:
    """
    Create AppState with the task list loaded from `store`.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    """
    if settings is None:
        settings = get_settings()

    tasks = store.read()
    logger.info("Loaded %d tasks from %s", len(tasks), store.path)

    return AppState(
        store=store,
        tasks=tasks,
        on_storage_error=settings.on_storage_error,
    )
