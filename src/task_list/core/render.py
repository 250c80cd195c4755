# src/task_list/core/render.py

"""Pure renderers: AppState -> text. Nothing here writes to a terminal."""

from __future__ import annotations

from .state import AppState

CLEAR_SCREEN = "\033c"
HEADER = "┏━━ Task List ━━━\n\n"
PROMPT = ">> "


def render_tasks(state: AppState) -> str:
    """Header plus one block per task; in selecting mode blocks get 1-based [n] prefixes."""
    parts = [HEADER]

    for i, task in enumerate(state.tasks, start=1):
        if state.selecting:
            parts.append(f"  [{i}] {task.title}\n")
            if task.description:
                parts.append(f"        {task.description}\n")
        else:
            parts.append(f"  {task.title}\n")
            if task.description:
                parts.append(f"    {task.description}\n")
        parts.append("\n")

    return "".join(parts)


def render_screen(state: AppState) -> str:
    return f"{CLEAR_SCREEN}{render_tasks(state)}{state.message}\n{PROMPT}"
