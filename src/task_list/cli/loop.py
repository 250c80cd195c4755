# src/task_list/cli/loop.py

from __future__ import annotations

import logging

from ..config import ErrorPolicy
from ..core.ports import Console
from ..core.state import AppState
from ..errors import TaskStoreError
from .commands import CommandRegistry, unknown_command_message
from .commands import registry as default_registry
from .console import draw

logger = logging.getLogger(__name__)


def _handle_storage_error(state: AppState, err: TaskStoreError) -> None:
    """Apply the configured policy: re-raise (fatal) or show it and carry on."""
    if state.on_storage_error is ErrorPolicy.EXIT:
        raise err
    logger.error("Storage error (continuing): %s", err)
    state.selecting = False
    state.message = f"Storage error: {err}"


def dispatch(state: AppState, console: Console, cmd: str, registry: CommandRegistry) -> None:
    """Run one non-empty command line against the state."""
    state.message = ""
    try:
        if not registry.handle(state, console, cmd):
            state.message = unknown_command_message(cmd)
    except TaskStoreError as e:
        _handle_storage_error(state, e)


def run_command_loop(
    state: AppState,
    console: Console,
    registry: CommandRegistry | None = None,
) -> None:
    """
    Blocking draw -> read -> dispatch loop.

    Ends on `exit`, end of input, or Ctrl+C. TaskStoreError escapes only
    under ErrorPolicy.EXIT.
    """
    registry = registry or default_registry
    logger.info("Command loop started (tasks=%d).", len(state.tasks))

    try:
        while state.running:
            draw(state, console)

            cmd = console.read_line()
            if not cmd:
                state.message = ""
                continue

            dispatch(state, console, cmd, registry)
    except EOFError:
        logger.info("End of input, exiting.")
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt, exiting.")
        console.write("\n")

    logger.info("Command loop finished.")
