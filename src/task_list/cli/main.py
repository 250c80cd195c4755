# src/task_list/cli/main.py

"""
CLI entrypoint.

    task-list          interactive loop on stdin/stdout
    task-list print    print the task list (if any) and exit

Any failure to set up storage is fatal: a diagnostic goes to stderr and the
exit status is 1.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from ..config import get_settings
from ..core.render import render_tasks
from ..core.state import AppState
from ..errors import TaskListError
from ..logging_setup import level_from_name, setup_logging
from .bootstrap import create_initial_state, open_store
from .console import StreamConsole
from .loop import run_command_loop

logger = logging.getLogger(__name__)


def is_print_mode(argv: Sequence[str]) -> bool:
    """Only the exact form `<prog> print` selects one-shot mode."""
    return len(argv) == 2 and argv[1] == "print"


def print_tasks(state: AppState, out: TextIO) -> None:
    """One-shot mode: the task-list block only, and nothing at all for an empty list."""
    if state.tasks:
        out.write(render_tasks(state))
        out.flush()


def _fatal(err: BaseException) -> int:
    logger.critical("Fatal: %s", err)
    print(f"task-list: {err}", file=sys.stderr)
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv

    try:
        settings = get_settings()
    except TaskListError as e:
        # Logging is not configured yet.
        print(f"task-list: {e}", file=sys.stderr)
        return 1

    try:
        setup_logging(
            log_file=settings.log_file,
            console_level=level_from_name(settings.log_level),
        )
    except OSError as e:
        print(f"task-list: cannot set up logging: {e}", file=sys.stderr)
        return 1

    try:
        with open_store(settings) as store:
            state = create_initial_state(store=store, settings=settings)

            if is_print_mode(argv):
                print_tasks(state, sys.stdout)
                return 0

            run_command_loop(state, StreamConsole(sys.stdin, sys.stdout))
    except TaskListError as e:
        return _fatal(e)

    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
