# src/task_list/core/ports.py

"""
Ports (interfaces) used by the core.

The command loop depends on Protocols instead of concrete implementations,
so tests can drive it with scripted input and an in-memory store.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """Whole-list persistence: load once, rewrite after every mutation."""

    def read(self) -> list[Task]: ...
    def write(self, tasks: Sequence[Task]) -> None: ...


class Console(Protocol):
    """
    Line-oriented terminal.

    read_line() returns the line with surrounding whitespace stripped and
    raises EOFError when input is exhausted.
    """

    def read_line(self) -> str: ...
    def write(self, text: str) -> None: ...
