# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from task_list.config import ErrorPolicy, reset_settings
from task_list.core.state import AppState
from task_list.tasks.task_models import Task
from task_list.tasks.task_store import TaskStore

from .fakes import FakeTaskRepo


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Never let a test see a cached Settings or the developer's env vars."""
    for name in (
        "TASK_LIST_DATA_DIR",
        "TASK_LIST_FILE",
        "TASK_LIST_LOG_LEVEL",
        "TASK_LIST_LOG_FILE",
        "TASK_LIST_ON_STORAGE_ERROR",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and AppState.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        data_dir=data_dir,
        tasks_path=data_dir / "list",
        log_level="WARNING",
        log_file=None,
        on_storage_error=ErrorPolicy.EXIT,
    )


@pytest.fixture()
def store(tmp_path: Path):
    s = TaskStore(tmp_path / "list")
    yield s
    s.close()


@pytest.fixture()
def three_tasks() -> list[Task]:
    return [
        Task("Buy milk", "2 litres"),
        Task("Call mom"),
        Task("Write report", "due Friday"),
    ]


@pytest.fixture()
def repo(three_tasks: list[Task]) -> FakeTaskRepo:
    return FakeTaskRepo(three_tasks)


@pytest.fixture()
def state(repo: FakeTaskRepo) -> AppState:
    """AppState wired to the in-memory repo and pre-loaded from it."""
    return AppState(store=repo, tasks=repo.read())
