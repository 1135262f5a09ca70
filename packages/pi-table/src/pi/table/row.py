"""Table row: an ordered list of cells with an optional height cap."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from pi.table.cell import Cell, to_cell
from pi.table.utils import display_width


class Row:
    """An ordered sequence of cells.

    ``max_height`` caps the number of rendered lines. Cells cut by the cap
    get the table's truncation indicator on their last kept line.
    """

    def __init__(self, cells: Iterable[Any] | None = None) -> None:
        self.cells: list[Cell] = [to_cell(c) for c in cells] if cells is not None else []
        self.max_height: int | None = None

    @classmethod
    def from_values(cls, values: Iterable[Any]) -> Row:
        return cls(values)

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def add_cell(self, cell: Any) -> Row:
        self.cells.append(to_cell(cell))
        return self

    def set_max_height(self, lines: int | None) -> Row:
        """Cap the rendered height of this row. ``None`` removes the cap."""
        self.max_height = None if lines is None else max(1, int(lines))
        return self

    def cell_count(self) -> int:
        return len(self.cells)

    def max_content_widths(self, indicator: str = "...") -> list[int]:
        """Widest explicit line of each cell, in display columns.

        A cell cut by ``max_height`` is measured as it renders: its last
        kept line carries *indicator*.
        """
        return [_cell_width(cell, self.max_height, indicator) for cell in self.cells]


def _cell_width(cell: Cell, max_height: int | None, indicator: str) -> int:
    widths = [display_width(line) for line in cell.lines]
    if max_height is not None and cell.line_count() > max_height:
        widths = widths[:max_height]
        widths[-1] += display_width(indicator)
    return max(widths)


def to_row(value: Any) -> Row:
    if isinstance(value, Row):
        return value
    return Row.from_values(value)
