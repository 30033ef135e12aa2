"""Vertical frame layout: search box, list box, and footer.

The list viewport is whatever remains after fixed-height chrome.
"""

from __future__ import annotations

from dataclasses import dataclass

from .config import HELP_PANEL_ROWS, LIST_BORDER_ROWS, SEARCH_BAR_ROWS, STATUS_ROWS


@dataclass(frozen=True)
class FrameLayout:
    search_rows: int
    list_rows: int
    footer_rows: int

    @property
    def viewport_rows(self) -> int:
        """Rows available for cheat entries inside the list border."""
        return max(1, self.list_rows - LIST_BORDER_ROWS)


def footer_rows(help_visible: bool) -> int:
    return HELP_PANEL_ROWS if help_visible else STATUS_ROWS


def compute_layout(term_lines: int, help_visible: bool) -> FrameLayout:
    """Split ``term_lines`` rows between the three frame sections."""
    footer = footer_rows(help_visible)
    list_rows = max(LIST_BORDER_ROWS + 1, term_lines - SEARCH_BAR_ROWS - footer)
    return FrameLayout(search_rows=SEARCH_BAR_ROWS, list_rows=list_rows, footer_rows=footer)


def list_viewport_rows(term_lines: int, help_visible: bool) -> int:
    return compute_layout(term_lines, help_visible).viewport_rows


__all__ = ["FrameLayout", "compute_layout", "footer_rows", "list_viewport_rows"]
