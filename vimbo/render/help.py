"""Help panel content formatting.

Rendering helpers here are presentation-only and side-effect free.
"""

from __future__ import annotations

from ..ui_theme import UITheme
from ..view import HelpLine
from .styles import styled

HELP_SEPARATOR = "  •  "
HELP_TITLE = " Help "


def format_help_line(line: HelpLine, theme: UITheme) -> str:
    """Join ``(key, action)`` pairs into one styled help row."""
    parts = [
        f"{styled(key, theme.help_key)} {styled(action, theme.help_text)}"
        for key, action in line
    ]
    return HELP_SEPARATOR.join(parts)


def help_panel_body(lines: tuple[HelpLine, ...], theme: UITheme) -> list[str]:
    return [format_help_line(line, theme) for line in lines]


__all__ = ["HELP_SEPARATOR", "HELP_TITLE", "format_help_line", "help_panel_body"]
