"""Tests for cell colors and text attributes."""

from __future__ import annotations

import pytest

from pi.table import Attribute, Cell, Color, Table, presets
from pi.table import terminal
from pi.table.ansi import sgr, stylize


class TestStylize:
    def test_foreground(self) -> None:
        assert stylize("x", Color.RED) == "\x1b[91mx\x1b[0m"

    def test_attributes_come_first(self) -> None:
        assert stylize("x", bg=Color.BLUE, attributes=[Attribute.BOLD]) == "\x1b[1;104mx\x1b[0m"

    def test_nothing_set(self) -> None:
        assert stylize("x") == "x"

    def test_rgb_and_palette(self) -> None:
        assert stylize("x", Color.rgb(1, 2, 3)) == "\x1b[38;2;1;2;3mx\x1b[0m"
        assert stylize("x", bg=Color.ansi_value(200)) == "\x1b[48;5;200mx\x1b[0m"

    def test_sgr_empty(self) -> None:
        assert sgr([]) == ""


def _styled_table() -> Table:
    table = Table().load_preset(presets.NOTHING)
    table.add_row([Cell("x").fg(Color.RED).add_attribute(Attribute.BOLD)])
    return table


class TestTableStyling:
    def test_enforced_styling(self) -> None:
        table = _styled_table().force_no_tty().enforce_styling()
        assert str(table) == "\x1b[1;91m x \x1b[0m"

    def test_no_styling_without_terminal(self) -> None:
        table = _styled_table().force_no_tty()
        assert str(table) == " x "

    def test_terminal_enables_styling(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(terminal, "is_terminal", lambda: True)
        monkeypatch.setattr(terminal, "terminal_size", lambda: (80, 24))
        assert str(_styled_table()) == "\x1b[1;91m x \x1b[0m"

    def test_no_color_disables_styling(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NO_COLOR", "1")
        monkeypatch.setattr(terminal, "is_terminal", lambda: True)
        monkeypatch.setattr(terminal, "terminal_size", lambda: (80, 24))
        assert str(_styled_table()) == " x "

    def test_enforce_overrides_no_color(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NO_COLOR", "1")
        table = _styled_table().force_no_tty().enforce_styling()
        assert "\x1b[" in str(table)

    def test_disable_styling(self) -> None:
        table = _styled_table().enforce_styling().disable_styling()
        assert str(table) == " x "

    def test_styled_cells_keep_alignment(self) -> None:
        table = Table().force_no_tty().enforce_styling()
        table.add_rows([[Cell("a").bg(Color.GREEN)], ["long"]])
        lines = list(table.lines())
        assert lines[1] == "|\x1b[102m a    \x1b[0m|"
        assert lines[3] == "| long |"

    def test_cell_constructor_styles(self) -> None:
        cell = Cell("x", fg=Color.CYAN, attributes=[Attribute.ITALIC, Attribute.UNDERLINED])
        assert cell.fg_color == Color.CYAN
        assert cell.attributes == [Attribute.ITALIC, Attribute.UNDERLINED]

    def test_force_tty_styles_piped_output(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(terminal, "is_terminal", lambda: False)
        monkeypatch.setattr(terminal, "terminal_size", lambda: None)
        assert str(_styled_table().force_tty()) == "\x1b[1;91m x \x1b[0m"

    def test_force_tty_respects_no_color(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NO_COLOR", "1")
        monkeypatch.setattr(terminal, "terminal_size", lambda: None)
        assert str(_styled_table().force_tty()) == " x "

    def test_terminal_queried_once_per_render(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[int] = []

        def is_terminal() -> bool:
            calls.append(1)
            return True

        monkeypatch.setattr(terminal, "is_terminal", is_terminal)
        monkeypatch.setattr(terminal, "terminal_size", lambda: (80, 24))
        table = _styled_table()
        table.add_rows([[Cell("y").fg(Color.GREEN)], ["z"], ["w"]])
        assert table.row_count() == 4

        lines = list(table.lines())
        assert len(lines) == 4
        assert len(calls) == 1
