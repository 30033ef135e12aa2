"""Rendering engine for the cheatsheet terminal view.

Composes full ANSI frames from a ``ViewModel`` and writes them to stdout.
Frame composition is side-effect free; only ``draw`` performs I/O.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

from ..ansi import clip_ansi_line, display_width, pad_ansi_line
from ..cheats import CheatEntry, command_padding
from ..config import DEFAULT_PYGMENTS_STYLE
from ..highlight import highlight_command
from ..layout import compute_layout
from ..ui_theme import DEFAULT_THEME, UITheme
from ..view import ViewModel
from .help import HELP_TITLE, help_panel_body
from .styles import RESET, styled

SEARCH_TITLE = " Search (type to filter, Esc to quit) "
LIST_TITLE = " Vim Cheatsheet "
SELECTED_MARKER = ">> "


def format_entry(
    entry: CheatEntry,
    theme: UITheme = DEFAULT_THEME,
    style: str | None = DEFAULT_PYGMENTS_STYLE,
) -> str:
    """Return the styled ``[category] command description`` row.

    ``style`` names the Pygments style for Ex commands; ``None`` disables
    syntax highlighting.
    """
    command = highlight_command(entry.command, style) if style is not None else None
    if command is None:
        command = styled(entry.command, theme.command)
    return (
        f"{styled(f'[{entry.category}]', theme.category)} "
        f"{command}{command_padding(entry.command)} "
        f"{styled(entry.description, theme.description)}"
    )


def format_list_row(
    entry: CheatEntry,
    selected: bool,
    width: int,
    theme: UITheme,
    style: str | None,
) -> str:
    """Return one list row exactly ``width`` columns wide."""
    if selected:
        # Per-token colors would reset the highlight background mid-row.
        plain = SELECTED_MARKER + entry.label()
        return styled(pad_ansi_line(plain, width), theme.selected)
    return pad_ansi_line(" " * len(SELECTED_MARKER) + format_entry(entry, theme, style), width)


def box_lines(
    title: str,
    body: list[str],
    width: int,
    height: int,
    theme: UITheme,
    title_style: str,
) -> list[str]:
    """Draw a rounded box of ``height`` rows with ``body`` rows inside."""
    if height <= 0 or width <= 0:
        return []
    inner_w = max(0, width - 2)
    shown_title = clip_ansi_line(title, inner_w)
    top_fill = "─" * max(0, inner_w - display_width(shown_title))
    lines = [
        f"{styled('╭', theme.border)}{styled(shown_title, title_style)}"
        f"{styled(top_fill + '╮', theme.border)}"
    ]
    inner_h = max(0, height - 2)
    side = styled("│", theme.border)
    for idx in range(inner_h):
        text = body[idx] if idx < len(body) else ""
        closing = RESET if "\x1b" in text else ""
        lines.append(f"{side}{pad_ansi_line(text, inner_w)}{closing}{side}")
    if height > 1:
        lines.append(styled("╰" + "─" * inner_w + "╯", theme.border))
    return lines[:height]


def compose_frame(
    view: ViewModel,
    width: int,
    height: int,
    theme: UITheme = DEFAULT_THEME,
    style: str | None = DEFAULT_PYGMENTS_STYLE,
) -> list[str]:
    """Return the frame as a list of styled rows, top to bottom."""
    layout = compute_layout(height, view.help_lines is not None)
    inner_w = max(0, width - 2)

    search_body = [styled(view.query, theme.search_query)]
    rows = box_lines(SEARCH_TITLE, search_body, width, layout.search_rows, theme, theme.search_title)

    list_body: list[str] = []
    for idx, entry in enumerate(view.rows):
        list_body.append(format_list_row(entry, idx == view.selected_row, inner_w, theme, style))
    if not view.rows and view.query:
        list_body.append(styled(f"   no cheats match {view.query!r}", theme.status))
    rows.extend(box_lines(LIST_TITLE, list_body, width, layout.list_rows, theme, theme.list_title))

    if view.help_lines is not None:
        help_body = help_panel_body(view.help_lines, theme)
        rows.extend(box_lines(HELP_TITLE, help_body, width, layout.footer_rows, theme, theme.help_title))
    else:
        status = f"Total: {view.total_count}  Shown: {view.shown_count}  (? for help)"
        rows.append(styled(clip_ansi_line(status, width), theme.status))
    return rows[:height]


def render_frame(
    view: ViewModel,
    width: int,
    height: int,
    theme: UITheme = DEFAULT_THEME,
    style: str | None = DEFAULT_PYGMENTS_STYLE,
) -> str:
    """Return the full escape-sequence payload that paints one frame."""
    out: list[str] = ["\033[H\033[J"]
    for row_idx, row in enumerate(compose_frame(view, width, height, theme, style)):
        out.append(f"\033[{row_idx + 1};1H")
        out.append(row)
        out.append(RESET)
    return "".join(out)


@dataclass(frozen=True)
class FrameRenderer:
    """Renderer collaborator bound to one theme and Pygments style."""

    theme: UITheme = DEFAULT_THEME
    style: str | None = DEFAULT_PYGMENTS_STYLE

    def draw(self, view: ViewModel, width: int, height: int) -> None:
        payload = render_frame(view, width, height, self.theme, self.style)
        os.write(sys.stdout.fileno(), payload.encode("utf-8", errors="replace"))


__all__ = [
    "FrameRenderer",
    "box_lines",
    "compose_frame",
    "format_entry",
    "format_list_row",
    "render_frame",
]
