"""Session settings and layout constants.

vimbo has no configuration file; every option comes from the command line
and lives only for the current process.
"""

from __future__ import annotations

from dataclasses import dataclass

PAGE_STEP = 10
DEFAULT_PYGMENTS_STYLE = "monokai"

SEARCH_BAR_ROWS = 3
STATUS_ROWS = 1
HELP_PANEL_ROWS = 5
LIST_BORDER_ROWS = 2


@dataclass(frozen=True)
class SessionConfig:
    """Options resolved from CLI flags for one run."""

    theme: str | None = None
    style: str = DEFAULT_PYGMENTS_STYLE
    no_color: bool = False
    page_step: int = PAGE_STEP


__all__ = [
    "DEFAULT_PYGMENTS_STYLE",
    "HELP_PANEL_ROWS",
    "LIST_BORDER_ROWS",
    "PAGE_STEP",
    "SEARCH_BAR_ROWS",
    "STATUS_ROWS",
    "SessionConfig",
]
