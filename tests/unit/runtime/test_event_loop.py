"""Event-loop tests driven by scripted keys and a recording renderer.

The fakes stand in for the terminal driver and renderer so the loop can run
without a tty.
"""

from __future__ import annotations

import contextlib
import os
import unittest

from vimbo.cheats import CheatEntry
from vimbo.input import initial_state
from vimbo.runtime.loop import run_main_loop
from vimbo.view import ViewModel

DD = CheatEntry("dd", "normal", "delete line")
YY = CheatEntry("yy", "normal", "yank line")


class _FakeTerminal:
    def __init__(self, keys: list[str], lines: int = 24, columns: int = 80) -> None:
        self.keys = list(keys)
        self.lines = lines
        self.columns = columns
        self.entered = 0
        self.exited = 0

    @contextlib.contextmanager
    def raw_mode(self):
        self.entered += 1
        try:
            yield
        finally:
            self.exited += 1

    def read_key(self) -> str:
        if not self.keys:
            raise EOFError("script exhausted")
        return self.keys.pop(0)

    def size(self) -> os.terminal_size:
        return os.terminal_size((self.columns, self.lines))


class _RecordingRenderer:
    def __init__(self) -> None:
        self.frames: list[tuple[ViewModel, int, int]] = []

    def draw(self, view: ViewModel, width: int, height: int) -> None:
        self.frames.append((view, width, height))


class RunMainLoopTests(unittest.TestCase):
    def test_scenario_type_navigate_clear_and_quit(self) -> None:
        terminal = _FakeTerminal(["d", "DOWN", "/", "ESC"])
        renderer = _RecordingRenderer()
        state = initial_state("", 10, dataset=(DD, YY))

        final = run_main_loop(state, terminal, renderer)

        self.assertEqual(final.query, "")
        self.assertEqual(final.filtered, (DD, YY))
        self.assertEqual(len(renderer.frames), 4)
        first, after_d, after_down, after_clear = (frame[0] for frame in renderer.frames)
        self.assertEqual(first.rows, (DD, YY))
        self.assertEqual(after_d.rows, (DD,))
        self.assertEqual(after_down.selected_row, 0)
        self.assertEqual(after_clear.rows, (DD, YY))
        self.assertEqual((terminal.entered, terminal.exited), (1, 1))

    def test_frames_use_terminal_dimensions(self) -> None:
        terminal = _FakeTerminal(["ESC"], lines=30, columns=100)
        renderer = _RecordingRenderer()

        run_main_loop(initial_state("", 10, dataset=(DD,)), terminal, renderer)

        _view, width, height = renderer.frames[0]
        self.assertEqual((width, height), (100, 30))

    def test_help_toggle_shrinks_viewport_and_keeps_selection_visible(self) -> None:
        dataset = tuple(CheatEntry(f"c{idx}", "n", f"entry {idx}") for idx in range(40))
        # 14 lines leaves 8 list rows with the status line and 4 with the help panel.
        terminal = _FakeTerminal(["DOWN"] * 7 + ["?", "ESC"], lines=14)
        renderer = _RecordingRenderer()

        final = run_main_loop(initial_state("", 8, dataset=dataset), terminal, renderer)

        self.assertTrue(final.help_visible)
        self.assertEqual(final.selected_index, 7)
        last_view = renderer.frames[-1][0]
        self.assertEqual(len(last_view.rows), 4)
        self.assertEqual(last_view.selected_row, 3)
        self.assertIsNotNone(last_view.help_lines)

    def test_raw_mode_is_released_when_input_fails(self) -> None:
        terminal = _FakeTerminal(["x"])
        renderer = _RecordingRenderer()

        with self.assertRaises(EOFError):
            run_main_loop(initial_state("", 10, dataset=(DD,)), terminal, renderer)

        self.assertEqual((terminal.entered, terminal.exited), (1, 1))

    def test_draw_failure_propagates_after_restoring_terminal(self) -> None:
        class _BrokenRenderer:
            def draw(self, view: ViewModel, width: int, height: int) -> None:
                raise OSError("write failed")

        terminal = _FakeTerminal(["ESC"])
        with self.assertRaises(OSError):
            run_main_loop(initial_state("", 10, dataset=(DD,)), terminal, _BrokenRenderer())
        self.assertEqual(terminal.exited, 1)


if __name__ == "__main__":
    unittest.main()
