# tests/test_render.py

from __future__ import annotations

from task_list.core.render import CLEAR_SCREEN, HEADER, PROMPT, render_screen, render_tasks
from task_list.core.state import AppState
from task_list.tasks.task_models import Task

from .fakes import FakeTaskRepo


def _state(tasks: list[Task], **kw) -> AppState:
    return AppState(store=FakeTaskRepo(), tasks=tasks, **kw)


def test_render_tasks_idle_has_no_indices() -> None:
    out = render_tasks(_state([Task("Buy milk", "2 litres"), Task("Call mom")]))
    assert out == (
        "┏━━ Task List ━━━\n\n"
        "  Buy milk\n"
        "    2 litres\n"
        "\n"
        "  Call mom\n"
        "\n"
    )


def test_render_tasks_selecting_prefixes_one_based_indices() -> None:
    out = render_tasks(
        _state([Task("Buy milk", "2 litres"), Task("Call mom")], selecting=True)
    )
    assert out == (
        HEADER
        + "  [1] Buy milk\n"
        + "        2 litres\n"
        + "\n"
        + "  [2] Call mom\n"
        + "\n"
    )


def test_render_tasks_empty_list_is_header_only() -> None:
    assert render_tasks(_state([])) == HEADER


def test_render_screen_layout() -> None:
    state = _state([Task("A")], message="hello")
    out = render_screen(state)

    assert out.startswith(CLEAR_SCREEN + HEADER)
    assert out.endswith("hello\n" + PROMPT)
    assert PROMPT == ">> "
    assert "  A\n\n" in out


def test_render_screen_empty_message_still_has_its_line() -> None:
    out = render_screen(_state([]))
    assert out == CLEAR_SCREEN + HEADER + "\n" + PROMPT
