from __future__ import annotations

from dataclasses import dataclass

from .cheats import DEFAULT_CHEATS, CheatEntry


@dataclass(frozen=True)
class AppState:
    """Complete interactive session state.

    Instances are never mutated; the reducer returns a replacement for every
    transition. ``dataset`` is the shared read-only source for refiltering.
    """

    dataset: tuple[CheatEntry, ...] = DEFAULT_CHEATS
    query: str = ""
    filtered: tuple[CheatEntry, ...] = ()
    selected_index: int = 0
    scroll_offset: int = 0
    help_visible: bool = False
