# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from task_list.logging_setup import _ConsoleNoiseFilter, level_from_name, setup_logging


@pytest.fixture()
def root_logger():
    """Restore the root logger (pytest's own handlers included) after the test."""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield root
    for h in list(root.handlers):
        root.removeHandler(h)
        if h not in saved_handlers:
            h.close()
    for h in saved_handlers:
        root.addHandler(h)
    root.setLevel(saved_level)
    logging.captureWarnings(False)


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_and_file_handlers(root_logger: logging.Logger, tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "x.log"
    setup_logging(log_file=log_file, console_level=logging.INFO)

    assert root_logger.level == logging.DEBUG
    stream = [h for h in root_logger.handlers if type(h) is logging.StreamHandler]
    files = [h for h in root_logger.handlers if isinstance(h, logging.FileHandler)]
    assert len(stream) == 1 and len(files) == 1
    assert stream[0].level == logging.INFO
    assert files[0].level == logging.DEBUG
    assert log_file.parent.is_dir()

    logging.getLogger("task_list.test").debug("hello file")
    files[0].flush()
    assert "hello file" in log_file.read_text("utf-8")


def test_no_file_handler_without_log_file(root_logger: logging.Logger) -> None:
    setup_logging(log_file=None)

    assert len(root_logger.handlers) == 1
    assert not isinstance(root_logger.handlers[0], logging.FileHandler)
    assert root_logger.handlers[0].level == logging.WARNING


def test_setup_replaces_previous_handlers(root_logger: logging.Logger) -> None:
    setup_logging()
    setup_logging()
    assert len(root_logger.handlers) == 1


def test_console_filter_decisions() -> None:
    f = _ConsoleNoiseFilter()

    assert f.filter(_record("task_list", logging.DEBUG))
    assert f.filter(_record("task_list.tasks.task_store", logging.INFO))

    assert not f.filter(_record("py.warnings", logging.WARNING))
    assert f.filter(_record("py.warnings", logging.ERROR))

    assert not f.filter(_record("urllib3", logging.WARNING))
    assert f.filter(_record("urllib3", logging.ERROR))

    # Prefix match must respect the package boundary.
    assert not f.filter(_record("task_listing", logging.INFO))


def test_level_from_name() -> None:
    assert level_from_name("debug") == logging.DEBUG
    assert level_from_name("ERROR") == logging.ERROR
    assert level_from_name("bogus") == logging.WARNING
    assert level_from_name("bogus", default=logging.INFO) == logging.INFO
