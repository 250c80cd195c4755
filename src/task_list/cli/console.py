# src/task_list/cli/console.py

from __future__ import annotations

import logging
from typing import TextIO

from ..core.ports import Console
from ..core.render import render_screen
from ..core.state import AppState

logger = logging.getLogger(__name__)


class StreamConsole:
    """Console over a pair of text streams (normally stdin/stdout)."""

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self._in = stdin
        self._out = stdout

    def read_line(self) -> str:
        line = self._in.readline()
        if line == "":
            raise EOFError("end of input")
        return line.strip()

    def write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()


def draw(state: AppState, console: Console) -> None:
    """Redraw the whole screen for the current state."""
    console.write(render_screen(state))
