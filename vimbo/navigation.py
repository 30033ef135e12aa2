"""Selection and viewport arithmetic for the cheatsheet list.

Every function here is pure and total over non-negative inputs.
An empty list always maps to selection ``0``, which means nothing is highlighted.
"""

from __future__ import annotations


def clamp_selection(selected: int, length: int) -> int:
    """Coerce ``selected`` into ``[0, length - 1]``; ``0`` for empty lists."""
    if length <= 0:
        return 0
    return max(0, min(length - 1, selected))


def move_selection(selected: int, delta: int, length: int) -> int:
    """Move selection by ``delta`` rows, clamped to the list bounds."""
    return clamp_selection(selected + delta, length)


def jump_top(length: int) -> int:
    return 0


def jump_bottom(length: int) -> int:
    return max(0, length - 1)


def reset_after_filter_change(length: int) -> tuple[int, int]:
    """Return ``(selected, scroll)`` for a freshly filtered list.

    Positions are not stable across lists with different content, so a new
    filter result always starts at the top.
    """
    return 0, 0


def max_scroll_offset(length: int, viewport_height: int) -> int:
    """Largest scroll offset that still fills the viewport."""
    return max(0, length - max(1, viewport_height))


def reconcile_scroll(selected: int, scroll: int, length: int, viewport_height: int) -> int:
    """Return the scroll offset that keeps ``selected`` inside the viewport.

    The offset moves only as far as needed: up when the selection is above
    the window, down when it falls below. The result never exceeds
    ``max_scroll_offset`` so the viewport does not show blank trailing rows
    while enough entries exist to fill it.
    """
    rows = max(1, viewport_height)
    if selected < scroll:
        scroll = selected
    elif selected >= scroll + rows:
        scroll = selected - rows + 1
    return max(0, min(scroll, max_scroll_offset(length, rows)))


__all__ = [
    "clamp_selection",
    "jump_bottom",
    "jump_top",
    "max_scroll_offset",
    "move_selection",
    "reconcile_scroll",
    "reset_after_filter_change",
]
