"""Pygments colorizing for Ex-command cheats.

Commands that start with ``:`` are Vim script and go through Pygments' Vim
lexer. Normal-mode key sequences are not Vim script and are left to the
theme's plain command color.
"""

from __future__ import annotations

from functools import lru_cache

from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import get_lexer_by_name
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from .config import DEFAULT_PYGMENTS_STYLE


def is_ex_command(command: str) -> bool:
    return command.startswith(":")


@lru_cache(maxsize=None)
def normalize_style(style: str) -> str:
    """Return ``style`` if Pygments knows it, else the default style."""
    try:
        get_style_by_name(style)
    except ClassNotFound:
        return DEFAULT_PYGMENTS_STYLE
    return style


@lru_cache(maxsize=None)
def _formatter_for_style(style: str) -> Terminal256Formatter:
    return Terminal256Formatter(style=normalize_style(style))


@lru_cache(maxsize=None)
def _vim_lexer():
    return get_lexer_by_name("vim")


@lru_cache(maxsize=512)
def highlight_command(command: str, style: str = DEFAULT_PYGMENTS_STYLE) -> str | None:
    """Return ANSI-colored ``command``, or ``None`` when it is not an Ex command."""
    if not is_ex_command(command):
        return None
    rendered = highlight(command, _vim_lexer(), _formatter_for_style(style))
    return rendered.rstrip("\n")


__all__ = ["highlight_command", "is_ex_command", "normalize_style"]
