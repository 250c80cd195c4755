# src/task_list/errors.py

"""
Exception hierarchy.

Storage never terminates the process on its own: it raises, and the command
loop / entrypoint decide what a failure means (see config.ErrorPolicy).
"""

from __future__ import annotations


class TaskListError(Exception):
    """Base class for all task-list errors."""


class ConfigError(TaskListError):
    """Settings could not be resolved (e.g. no home directory)."""


class TaskStoreError(TaskListError):
    """The task file could not be opened, read or written."""


class TaskParseError(TaskStoreError):
    """A stored line does not contain the title/description separator."""

    def __init__(self, line: str, lineno: int) -> None:
        super().__init__(f"Error parsing task on line {lineno}: {line}")
        self.line = line
        self.lineno = lineno
