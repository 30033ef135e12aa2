"""Runtime composition layer for vimbo.

Builds initial state, wires the terminal driver and renderer, and starts the
loop. Non-interactive runs print the filtered cheats instead.
"""

from __future__ import annotations

import logging
import os
import sys

from ..cheats import DEFAULT_CHEATS, CheatEntry
from ..config import SessionConfig
from ..filtering import filter_entries
from ..input import initial_state
from ..layout import list_viewport_rows
from ..render import FrameRenderer, format_entry
from ..terminal import TerminalController
from ..ui_theme import resolve_theme
from .loop import run_main_loop

logger = logging.getLogger(__name__)


def print_cheats(
    query: str,
    config: SessionConfig,
    dataset: tuple[CheatEntry, ...] = DEFAULT_CHEATS,
) -> None:
    """Write matching cheats to stdout, one per line."""
    colorize = not config.no_color and sys.stdout.isatty()
    theme = resolve_theme(config.theme, no_color=not colorize)
    lines = []
    for entry in filter_entries(dataset, query):
        if colorize:
            lines.append(format_entry(entry, theme, config.style))
        else:
            lines.append(entry.label())
    sys.stdout.write("".join(line + "\n" for line in lines))


def run_cheatsheet(query: str, config: SessionConfig, nopager: bool = False) -> None:
    """Run the interactive cheatsheet, or print it when stdin is not a TTY."""
    if nopager or not os.isatty(sys.stdin.fileno()):
        print_cheats(query, config)
        return

    terminal = TerminalController(sys.stdin.fileno(), sys.stdout.fileno())
    renderer = FrameRenderer(
        resolve_theme(config.theme, no_color=config.no_color),
        None if config.no_color else config.style,
    )
    state = initial_state(query, list_viewport_rows(terminal.size().lines, False))
    logger.debug("starting session; query=%r, shown=%d", state.query, len(state.filtered))
    run_main_loop(state, terminal, renderer, page_step=config.page_step)
