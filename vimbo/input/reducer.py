"""Pure key reducer for the cheatsheet session.

``reduce_key`` maps one key token and the current ``AppState`` to the next
state plus a quit flag. It performs no I/O; the runtime loop owns reading
keys and drawing frames.
"""

from __future__ import annotations

from dataclasses import replace

from ..cheats import DEFAULT_CHEATS, CheatEntry
from ..config import PAGE_STEP
from ..filtering import filter_entries
from ..navigation import (
    clamp_selection,
    jump_bottom,
    jump_top,
    move_selection,
    reconcile_scroll,
    reset_after_filter_change,
)
from ..state import AppState

QUIT_KEYS = frozenset({"ESC"})
COMMAND_CHARS = frozenset({"/", "?", "g", "G"})


def is_query_char(key: str) -> bool:
    """Return whether ``key`` should be appended to the query."""
    return len(key) == 1 and key.isprintable() and key not in COMMAND_CHARS


def set_query(state: AppState, query: str, viewport_height: int) -> AppState:
    """Replace the query, refilter, and reset selection to the top."""
    filtered = filter_entries(state.dataset, query)
    selected, scroll = reset_after_filter_change(len(filtered))
    scroll = reconcile_scroll(selected, scroll, len(filtered), viewport_height)
    return replace(
        state,
        query=query,
        filtered=filtered,
        selected_index=selected,
        scroll_offset=scroll,
    )


def select_index(state: AppState, selected: int, viewport_height: int) -> AppState:
    """Set selection (clamped) and scroll just enough to keep it visible."""
    length = len(state.filtered)
    selected = clamp_selection(selected, length)
    scroll = reconcile_scroll(selected, state.scroll_offset, length, viewport_height)
    if selected == state.selected_index and scroll == state.scroll_offset:
        return state
    return replace(state, selected_index=selected, scroll_offset=scroll)


def sync_viewport(state: AppState, viewport_height: int) -> AppState:
    """Re-apply scroll bounds after the viewport height changed."""
    return select_index(state, state.selected_index, viewport_height)


def initial_state(
    query: str = "",
    viewport_height: int = 1,
    dataset: tuple[CheatEntry, ...] = DEFAULT_CHEATS,
) -> AppState:
    """Build the startup state, applying a seeded query before the first frame."""
    return set_query(AppState(dataset=dataset), query, viewport_height)


def reduce_key(
    state: AppState,
    key: str,
    viewport_height: int,
    page_step: int = PAGE_STEP,
) -> tuple[AppState, bool]:
    """Apply one key token and return ``(next_state, should_quit)``."""
    if key in QUIT_KEYS:
        return state, True

    length = len(state.filtered)
    if key == "?":
        return replace(state, help_visible=not state.help_visible), False
    if key == "UP":
        return select_index(state, move_selection(state.selected_index, -1, length), viewport_height), False
    if key == "DOWN":
        return select_index(state, move_selection(state.selected_index, 1, length), viewport_height), False
    if key == "PAGE_UP":
        return select_index(state, move_selection(state.selected_index, -page_step, length), viewport_height), False
    if key == "PAGE_DOWN":
        return select_index(state, move_selection(state.selected_index, page_step, length), viewport_height), False
    if key == "g":
        return select_index(state, jump_top(length), viewport_height), False
    if key == "G":
        return select_index(state, jump_bottom(length), viewport_height), False
    if key == "/":
        return set_query(state, "", viewport_height), False
    if key == "BACKSPACE":
        if not state.query:
            return state, False
        return set_query(state, state.query[:-1], viewport_height), False
    if is_query_char(key):
        return set_query(state, state.query + key, viewport_height), False
    return state, False


__all__ = [
    "COMMAND_CHARS",
    "QUIT_KEYS",
    "initial_state",
    "is_query_char",
    "reduce_key",
    "select_index",
    "set_query",
    "sync_viewport",
]
