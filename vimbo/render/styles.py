"""Small SGR helpers shared by frame and list formatting."""

from __future__ import annotations

RESET = "\033[0m"


def styled(text: str, style: str) -> str:
    """Wrap ``text`` in ``style``; plain palettes emit no escape codes."""
    if not style or not text:
        return text
    return f"{style}{text}{RESET}"
