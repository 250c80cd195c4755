# src/task_list/tasks/task_store.py

from __future__ import annotations

import io
import logging
import os
from collections.abc import Sequence
from pathlib import Path
from types import TracebackType

from ..errors import TaskStoreError
from .task_codec import decode_tasks, encode_tasks
from .task_models import Task

logger = logging.getLogger(__name__)

# surrogateescape lets bytes that are not valid UTF-8 (e.g. typed under a C
# locale) pass through the file unchanged.
ENCODING = "utf-8"
ENCODING_ERRORS = "surrogateescape"


class TaskStore:
    """
    File-backed task store.

    One handle is opened at construction and held for the lifetime of the
    store. Every write rewrites the whole file in place (truncate, seek,
    write); there is no temp-file swap, so a crash mid-write can leave a
    partial file.

    No locking: the store assumes it is the only writer.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        try:
            fd = os.open(self._path, os.O_RDWR | os.O_CREAT, 0o644)
            self._fh: io.BufferedRandom | None = open(fd, "r+b")
        except OSError as e:
            raise TaskStoreError(f"Cannot open task file {self._path}: {e}") from e
        logger.info("TaskStore ready path=%s", self._path)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def closed(self) -> bool:
        return self._fh is None

    def close(self) -> None:
        if self._fh is None:
            return
        try:
            self._fh.close()
        finally:
            self._fh = None
        logger.debug("TaskStore closed path=%s", self._path)

    def __enter__(self) -> TaskStore:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # ---- low-level helpers ----

    def _handle(self) -> io.BufferedRandom:
        if self._fh is None:
            raise TaskStoreError(f"Task file {self._path} is closed")
        return self._fh

    # ---- public API ----

    def read(self) -> list[Task]:
        """Read and parse the whole file. Raises TaskParseError on a bad line."""
        fh = self._handle()
        try:
            fh.seek(0)
            data = fh.read().decode(ENCODING, ENCODING_ERRORS)
        except (OSError, UnicodeError) as e:
            raise TaskStoreError(f"Cannot read task file {self._path}: {e}") from e

        tasks = decode_tasks(data)
        logger.debug("TaskStore read path=%s tasks=%d", self._path, len(tasks))
        return tasks

    def write(self, tasks: Sequence[Task]) -> None:
        """Replace the file contents with the given tasks, in order."""
        fh = self._handle()
        # Encode up front: an unencodable task must fail before the file is truncated.
        try:
            buf = encode_tasks(tasks).encode(ENCODING, ENCODING_ERRORS)
        except UnicodeError as e:
            raise TaskStoreError(f"Cannot encode tasks for {self._path}: {e}") from e

        try:
            fh.truncate(0)
            fh.seek(0)
            fh.write(buf)
            fh.flush()
        except OSError as e:
            raise TaskStoreError(f"Cannot write task file {self._path}: {e}") from e
        logger.debug("TaskStore write path=%s tasks=%d", self._path, len(tasks))
