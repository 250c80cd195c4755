# src/task_list/tasks/task_codec.py

"""
Line-based task file format.

One task per line:

    <title><-$-><description>\n

An empty description is written as the sentinel "-$-" so that every line
always carries a non-empty right-hand side. Fields are not escaped: a title
containing the separator or a newline will not survive a round trip.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..errors import TaskParseError
from .task_models import Task

SEP = "<-$->"
EMPTY = "-$-"


def encode_task(task: Task) -> str:
    desc = task.description or EMPTY
    return f"{task.title}{SEP}{desc}\n"


def encode_tasks(tasks: Iterable[Task]) -> str:
    return "".join(encode_task(t) for t in tasks)


def decode_line(line: str, lineno: int = 1) -> Task:
    title, found, desc = line.partition(SEP)
    if not found:
        raise TaskParseError(line, lineno)
    if desc == EMPTY:
        desc = ""
    return Task(title=title, description=desc)


def decode_tasks(data: str) -> list[Task]:
    """
    Parse the whole file contents.

    The segment after the last "\\n" is dropped, so a trailing newline does not
    produce an extra record (and an unterminated last line is ignored).
    """
    if not data:
        return []

    lines = data.split("\n")
    return [decode_line(line, i) for i, line in enumerate(lines[:-1], start=1)]
