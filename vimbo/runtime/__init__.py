"""Runtime orchestration: session wiring and the interactive loop."""

from .app import print_cheats, run_cheatsheet
from .loop import run_main_loop

__all__ = ["print_cheats", "run_cheatsheet", "run_main_loop"]
