"""Frame layout arithmetic."""

from __future__ import annotations

import unittest

from vimbo.layout import compute_layout, footer_rows, list_viewport_rows


class FrameLayoutTests(unittest.TestCase):
    def test_status_line_footer(self) -> None:
        layout = compute_layout(24, help_visible=False)

        self.assertEqual((layout.search_rows, layout.list_rows, layout.footer_rows), (3, 20, 1))
        self.assertEqual(layout.viewport_rows, 18)

    def test_help_panel_takes_more_rows(self) -> None:
        self.assertEqual(footer_rows(True), 5)
        self.assertEqual(list_viewport_rows(24, True), 14)

    def test_tiny_terminal_keeps_one_list_row(self) -> None:
        self.assertEqual(list_viewport_rows(3, False), 1)
        self.assertEqual(list_viewport_rows(0, True), 1)


if __name__ == "__main__":
    unittest.main()
