# src/task_list/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.ports import Console
from ..core.state import AppState
from ..tasks.task_models import Task
from .console import draw

CommandHandler = Callable[[AppState, Console], None]

NO_TASKS_MESSAGE = "You have no tasks. Use `add` command to create one"
NO_SELECTION = -1

logger = logging.getLogger(__name__)


class CommandRegistry:
    """
    Top-level command registry used by the command loop.

    Names and aliases are matched exactly (case-sensitive) against the
    stripped input line.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        self._handlers[name] = handler
        self._help[name] = _help_label(name, aliases)
        for alias in aliases:
            self._handlers[alias] = handler

    def handle(self, state: AppState, console: Console, line: str) -> bool:
        """Run the handler for `line`. Returns False if no command matches."""
        handler = self._handlers.get(line)
        if handler is None:
            return False
        handler(state, console)
        return True

    def build_help(self) -> str:
        return "\n".join(self._help.values())


def _help_label(name: str, aliases: list[str]) -> str:
    """'add' with alias 'a' -> '(a)dd'."""
    for alias in aliases:
        if len(alias) == 1 and name.startswith(alias):
            return f"({alias}){name[1:]}"
    return name


def unknown_command_message(cmd: str) -> str:
    return f"Unknown command `{cmd}`. Type `help` to see commands"


def prompt(state: AppState, console: Console, message: str) -> str:
    """Show `message` on the status line, redraw, and read one line."""
    state.message = message
    draw(state, console)
    return console.read_line()


def select_task_index(state: AppState, console: Console) -> int:
    """
    Read a 1-based task number until one is valid.

    Returns the 0-based index, or NO_SELECTION on empty input. Anything that
    is not an in-range integer just redraws and asks again.
    """
    while True:
        text = console.read_line()
        if not text:
            return NO_SELECTION

        try:
            val = int(text)
        except ValueError:
            val = 0

        if 1 <= val <= len(state.tasks):
            return val - 1

        draw(state, console)


def cmd_add(state: AppState, console: Console) -> None:
    title = prompt(state, console, "Enter title (empty to cancel):")
    if title:
        desc = prompt(state, console, "Enter description (optional):")
        state.tasks.append(Task(title=title, description=desc))
        state.persist()
        logger.info("Task added index=%d", len(state.tasks))

    state.message = ""


def cmd_delete(state: AppState, console: Console) -> None:
    if not state.tasks:
        state.message = NO_TASKS_MESSAGE
        return

    state.message = "Choose task to delete (empty to cancel):"
    state.selecting = True
    draw(state, console)

    try:
        idx = select_task_index(state, console)
    finally:
        state.selecting = False

    if idx != NO_SELECTION:
        state.tasks = [t for i, t in enumerate(state.tasks) if i != idx]
        state.persist()
        logger.info("Task deleted index=%d", idx + 1)

    state.message = ""


def cmd_edit(state: AppState, console: Console) -> None:
    if not state.tasks:
        state.message = NO_TASKS_MESSAGE
        return

    state.message = "Choose task to edit (empty to cancel):"
    state.selecting = True
    draw(state, console)

    title = desc = ""
    try:
        idx = select_task_index(state, console)
        if idx != NO_SELECTION:
            title = prompt(state, console, "Enter new title (empty to skip):")
            desc = prompt(state, console, "Enter new description (empty to skip):")
    finally:
        state.selecting = False

    if idx != NO_SELECTION:
        task = state.tasks[idx]
        changed = False

        if title:
            task.title = title
            changed = True

        if desc:
            task.description = desc
            changed = True

        if changed:
            state.persist()
            logger.info("Task edited index=%d", idx + 1)

    state.message = ""


def cmd_help(state: AppState, console: Console) -> None:
    state.message = registry.build_help()


def cmd_exit(state: AppState, console: Console) -> None:
    state.running = False


registry = CommandRegistry()

registry.register("add", cmd_add, aliases=["a"])
registry.register("delete", cmd_delete, aliases=["d"])
registry.register("edit", cmd_edit, aliases=["e"])
registry.register("help", cmd_help)
registry.register("exit", cmd_exit)
