"""Pure projection from session state to what one frame shows.

The renderer consumes ``ViewModel`` only; it never reads ``AppState``.
"""

from __future__ import annotations

from dataclasses import dataclass

from .cheats import CheatEntry
from .state import AppState

HelpLine = tuple[tuple[str, str], ...]

HELP_LINES: tuple[HelpLine, ...] = (
    (("Up/Down", "move"), ("PgUp/PgDn", "scroll"), ("g/G", "top/bottom")),
    (("Type", "filters cheats"), ("Backspace", "deletes"), ("/", "clears query")),
    (("?", "toggle this help"), ("Esc", "quit")),
)


@dataclass(frozen=True)
class ViewModel:
    rows: tuple[CheatEntry, ...]
    selected_row: int | None
    query: str
    help_lines: tuple[HelpLine, ...] | None
    total_count: int
    shown_count: int


def project(state: AppState, viewport_height: int) -> ViewModel:
    """Slice the visible window of ``state.filtered`` and locate the selection."""
    height = max(1, viewport_height)
    start = state.scroll_offset
    rows = state.filtered[start : start + height]
    selected_row: int | None = None
    if state.filtered:
        offset = state.selected_index - start
        if 0 <= offset < len(rows):
            selected_row = offset
    return ViewModel(
        rows=rows,
        selected_row=selected_row,
        query=state.query,
        help_lines=HELP_LINES if state.help_visible else None,
        total_count=len(state.dataset),
        shown_count=len(state.filtered),
    )


__all__ = ["HELP_LINES", "HelpLine", "ViewModel", "project"]
