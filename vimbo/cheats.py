"""Built-in Vim cheatsheet dataset.

Entries are grouped by category and kept in presentation order.
The dataset is a module-level tuple and is never mutated at runtime.
"""

from __future__ import annotations

from dataclasses import dataclass

from .ansi import display_width

COMMAND_COLUMN_WIDTH = 12


def command_padding(command: str) -> str:
    """Return the spaces that pad ``command`` to the command column width."""
    return " " * max(0, COMMAND_COLUMN_WIDTH - display_width(command))


@dataclass(frozen=True)
class CheatEntry:
    """One cheatsheet row."""

    command: str
    category: str
    description: str

    def label(self) -> str:
        """Return the plain ``[category] command description`` row text."""
        return f"[{self.category}] {self.command}{command_padding(self.command)} {self.description}"


DEFAULT_CHEATS: tuple[CheatEntry, ...] = (
    CheatEntry(":q", "Basics", "quit (fails if there are unsaved changes)"),
    CheatEntry(":q!", "Basics", "quit discarding changes"),
    CheatEntry(":w", "Basics", "write (save) current buffer"),
    CheatEntry(":wq / :x / ZZ", "Basics", "save and quit"),
    CheatEntry(":e {file}", "Basics", "edit / open file"),
    CheatEntry(":help {topic}", "Basics", "open Vim help (e.g. :help motion)"),

    CheatEntry("i", "Modes", "enter insert mode before cursor"),
    CheatEntry("a", "Modes", "enter insert mode after cursor"),
    CheatEntry("v", "Modes", "enter visual mode"),
    CheatEntry("V", "Modes", "enter visual line mode"),
    CheatEntry("Ctrl + v", "Modes", "enter visual block (blockwise) mode"),
    CheatEntry("Esc", "Modes", "return to normal mode"),

    CheatEntry("h j k l", "Navigation - line", "move cursor left / down / up / right"),
    CheatEntry("0 / $", "Navigation - line", "move cursor to start / end of line"),
    CheatEntry("^", "Navigation - line", "move cursor to first non-blank in line"),

    CheatEntry("Ctrl + u / Ctrl + d", "Navigation - scrolling", "move view half-page up / down"),
    CheatEntry("Ctrl + b / Ctrl + f", "Navigation - scrolling", "move view page up / down"),

    CheatEntry("gg / G", "Navigation - file", "move cursor to first / last line of file"),
    CheatEntry("{n}G", "Navigation - file", "move cursor to line {n}"),

    CheatEntry("H / M / L", "Navigation - screen", "move cursor to top / middle / bottom of screen"),
    CheatEntry("zz / zt / zb", "Navigation - screen", "move view to center / top / bottom current line"),

    CheatEntry("{ / }", "Navigation - paragraphs", "move cursor to previous / next paragraph or block"),

    CheatEntry("( / )", "Navigation - sentences", "move cursor to previous / next sentence"),

    CheatEntry("%", "Navigation - matching", "move cursor to matching bracket/brace/paren"),

    CheatEntry("w / b / e", "Navigation - word", "move cursor to next / previous / end of word"),
    CheatEntry("W / B / E", "Navigation - word", "move cursor WORD-wise next / previous / end"),

    CheatEntry("f{char} / F{char}", "Navigation - find", "move cursor to char right / left"),
    CheatEntry("t{char} / T{char}", "Navigation - find", "move cursor till before char right / left"),
    CheatEntry("; / ,", "Navigation - find", "move cursor by repeating / reversing last f/F/t/T"),

    CheatEntry("x", "Editing", "delete character under cursor"),
    CheatEntry("dd", "Editing", "delete (cut) current line"),
    CheatEntry("D", "Editing", "delete from cursor to end of line"),
    CheatEntry("cc", "Editing", "change (replace) entire line"),
    CheatEntry("cw / c$", "Editing", "change to end of word / line"),
    CheatEntry("r{char}", "Editing", "replace a single character"),
    CheatEntry("J", "Editing", "join current line with next"),

    CheatEntry("y{motion}", "Yank (copy)", "yank text covered by a motion (e.g. yw, y$)"),
    CheatEntry("yy / Y", "Yank (copy)", "yank (copy) current line"),
    CheatEntry("yiw / yaw", "Yank (copy)", "yank inner word / a word incl. space"),
    CheatEntry("y0 / y$", "Yank (copy)", "yank from cursor to start / end of line"),

    CheatEntry("p / P", "Paste", "paste after / before cursor or line"),
    CheatEntry("gp / gP", "Paste", "paste and move cursor to end of paste"),

    CheatEntry(">> / <<", "Indentation", "indent / dedent current line"),
    CheatEntry("=", "Indentation", "auto-indent motion or selection"),

    CheatEntry("v / V / Ctrl + v + motion", "Visual mode", "select characters / lines / block"),
    CheatEntry("y / d / c", "Visual mode", "yank / delete / change selection"),
    CheatEntry("> / <", "Visual mode", "indent / dedent selection"),

    CheatEntry("/pattern", "Search", "search forward for pattern"),
    CheatEntry("n / N", "Search", "next / previous search match"),
    CheatEntry("?pattern", "Search", "search backward for pattern"),

    CheatEntry(":%s/old/new/g", "Search & replace", "replace all 'old' with 'new' in file"),
    CheatEntry(":%s/old/new/gc", "Search & replace", "replace with confirmation"),

    CheatEntry(":w / :q / :wq", "Buffers", "write, quit, write & quit"),
    CheatEntry(":ls / :buffers", "Buffers", "list buffers"),
    CheatEntry(":b {n}", "Buffers", "go to buffer {n}"),
    CheatEntry(":bn / :bp", "Buffers", "next / previous buffer"),

    CheatEntry(":split / :vsplit", "Windows", "horizontal / vertical split"),
    CheatEntry("Ctrl + w, then h/j/k/l", "Windows", "move to window left/down/up/right"),
    CheatEntry("Ctrl + w, then c / o", "Windows", "close current / keep only current"),

    CheatEntry(":tabnew {file}", "Tabs", "open file in a new tab"),
    CheatEntry("gt / gT", "Tabs", "next / previous tab"),
    CheatEntry(":tabclose", "Tabs", "close current tab"),

    CheatEntry('"{reg}y / "{reg}p', "Registers", "yank / paste using register {reg}"),
    CheatEntry('"+y / "+p / "*y', "Registers", "use system clipboards (+ or * register)"),

    CheatEntry("m{a-z}", "Marks", "set mark {a-z} on a line"),
    CheatEntry("'{a-z} / `{a-z}", "Marks", "jump to mark line / exact position"),

    CheatEntry("q{reg} ... q", "Macros", "record macro into register {reg}"),
    CheatEntry("@{reg} / @@", "Macros", "play macro / repeat last macro"),

    CheatEntry(".", "Repeat", "repeat last change"),

    CheatEntry("u / Ctrl + r", "Undo/Redo", "undo / redo last change"),
)


__all__ = ["COMMAND_COLUMN_WIDTH", "CheatEntry", "DEFAULT_CHEATS", "command_padding"]
