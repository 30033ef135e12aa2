"""UI theme definitions and selection helpers.

Themes are UI-only ANSI palettes (borders, list rows, help panel). Syntax
highlighting style for Ex commands remains a separate Pygments setting.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    border: str
    search_title: str
    search_query: str
    list_title: str
    category: str
    command: str
    description: str
    selected: str
    status: str
    help_title: str
    help_key: str
    help_text: str


DEFAULT_THEME = UITheme(
    name="default",
    border="\033[38;5;244m",
    search_title="\033[1;33m",
    search_query="\033[36m",
    list_title="\033[1;36m",
    category="\033[35m",
    command="\033[1;32m",
    description="\033[37m",
    selected="\033[1;37;44m",
    status="\033[3;90m",
    help_title="\033[1;33m",
    help_key="\033[38;5;229m",
    help_text="\033[37m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    border="\033[2;38;5;31m",
    search_title="\033[1;38;5;45m",
    search_query="\033[38;5;153m",
    list_title="\033[1;38;5;39m",
    category="\033[38;5;73m",
    command="\033[1;38;5;117m",
    description="\033[38;5;252m",
    selected="\033[1;38;5;231;48;5;24m",
    status="\033[2;38;5;110m",
    help_title="\033[1;38;5;45m",
    help_key="\033[38;5;153m",
    help_text="\033[38;5;252m",
)

PLAIN_THEME = UITheme(
    name="plain",
    border="",
    search_title="",
    search_query="",
    list_title="",
    category="",
    command="",
    description="",
    selected="\033[7m",
    status="",
    help_title="",
    help_key="",
    help_text="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
