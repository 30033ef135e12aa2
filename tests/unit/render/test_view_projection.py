"""Tests for the pure state-to-view projection."""

from __future__ import annotations

import unittest

from vimbo.cheats import CheatEntry
from vimbo.input import initial_state, reduce_key
from vimbo.view import HELP_LINES, project


def _numbered(count: int) -> tuple[CheatEntry, ...]:
    return tuple(CheatEntry(f"cmd{idx}", "numbers", f"entry {idx}") for idx in range(count))


class ProjectTests(unittest.TestCase):
    def test_slice_starts_at_scroll_offset(self) -> None:
        dataset = _numbered(12)
        state = initial_state("", 4, dataset=dataset)
        for _ in range(6):
            state, _ = reduce_key(state, "DOWN", 4)

        view = project(state, 4)

        self.assertEqual(state.scroll_offset, 3)
        self.assertEqual(view.rows, dataset[3:7])
        self.assertEqual(view.selected_row, 3)
        self.assertEqual(view.total_count, 12)
        self.assertEqual(view.shown_count, 12)

    def test_slice_is_clipped_to_available_rows(self) -> None:
        state = initial_state("", 10, dataset=_numbered(3))
        view = project(state, 10)
        self.assertEqual(len(view.rows), 3)
        self.assertEqual(view.selected_row, 0)

    def test_empty_filter_has_no_selected_row(self) -> None:
        state = initial_state("nothing-matches", 5, dataset=_numbered(3))
        view = project(state, 5)
        self.assertEqual(view.rows, ())
        self.assertIsNone(view.selected_row)
        self.assertEqual(view.query, "nothing-matches")
        self.assertEqual(view.shown_count, 0)
        self.assertEqual(view.total_count, 3)

    def test_help_lines_follow_help_flag(self) -> None:
        state = initial_state("", 5, dataset=_numbered(3))
        self.assertIsNone(project(state, 5).help_lines)
        state, _ = reduce_key(state, "?", 5)
        self.assertEqual(project(state, 5).help_lines, HELP_LINES)

    def test_projection_is_pure(self) -> None:
        state = initial_state("cmd1", 5, dataset=_numbered(15))
        self.assertEqual(project(state, 5), project(state, 5))


if __name__ == "__main__":
    unittest.main()
