"""Main interactive event loop for the terminal UI.

Each tick projects the current state, draws it, blocks for one key, and
hands that key to the pure reducer. The loop itself holds no feature logic.
"""

from __future__ import annotations

import contextlib
import logging
import os
from typing import Protocol

from ..config import PAGE_STEP
from ..input import reduce_key, sync_viewport
from ..layout import list_viewport_rows
from ..state import AppState
from ..view import ViewModel, project

logger = logging.getLogger(__name__)


class TerminalDriver(Protocol):
    def raw_mode(self) -> contextlib.AbstractContextManager[None]: ...

    def read_key(self) -> str: ...

    def size(self) -> os.terminal_size: ...


class Renderer(Protocol):
    def draw(self, view: ViewModel, width: int, height: int) -> None: ...


def run_main_loop(
    state: AppState,
    terminal: TerminalDriver,
    renderer: Renderer,
    page_step: int = PAGE_STEP,
) -> AppState:
    """Run the interactive loop until a quit key and return the final state.

    Terminal size is re-read every tick so resizes and help-panel toggles
    re-clamp the scroll offset before the frame is drawn.
    """
    with terminal.raw_mode():
        while True:
            term = terminal.size()
            rows = list_viewport_rows(term.lines, state.help_visible)
            state = sync_viewport(state, rows)
            renderer.draw(project(state, rows), term.columns, term.lines)

            key = terminal.read_key()
            logger.debug("key: %s", key)
            state, should_quit = reduce_key(state, key, rows, page_step)
            if should_quit:
                logger.debug("quit requested; query=%r", state.query)
                return state
