"""Terminal control helpers for the TUI session.

Owns raw-mode lifecycle and alternate-screen switching.
The saved tty attributes are restored on every exit path from ``raw_mode``.
"""

from __future__ import annotations

import contextlib
import os
import shutil
import signal
import termios
import tty

from .input import read_key

FALLBACK_TERMINAL_SIZE = (80, 24)
RESTORE_ON_SIGNALS = (signal.SIGTERM, signal.SIGHUP)


def _exit_on_signal(signum: int, _frame) -> None:
    raise SystemExit(128 + signum)


class TerminalController:
    """Manage terminal mode transitions and blocking key reads."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with the cursor hidden."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, b"\x1b[?1049h\x1b[?25l")

    def disable_tui_mode(self) -> None:
        """Show the cursor, leave the alternate screen, and restore tty state."""
        try:
            os.write(self.stdout_fd, b"\x1b[?25h\x1b[?1049l")
        finally:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def read_key(self) -> str:
        """Block until the next key token arrives."""
        return read_key(self.stdin_fd)

    def size(self) -> os.terminal_size:
        return shutil.get_terminal_size(FALLBACK_TERMINAL_SIZE)

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls.

        SIGTERM and SIGHUP are turned into ``SystemExit`` while active so the
        tty is restored before the process ends.
        """
        previous = {signum: signal.signal(signum, _exit_on_signal) for signum in RESTORE_ON_SIGNALS}
        try:
            self.enable_tui_mode()
            yield
        finally:
            try:
                self.disable_tui_mode()
            finally:
                for signum, handler in previous.items():
                    # None means the handler was installed outside Python.
                    signal.signal(signum, signal.SIG_DFL if handler is None else handler)
