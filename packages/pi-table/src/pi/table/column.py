"""Table column settings. Columns hold no cells; cells are reached via rows."""

from __future__ import annotations

from pi.table.style import CellAlignment, Constraint, Hidden, check_constraint


class Column:
    """Per-column layout settings, identified by position."""

    def __init__(self, index: int) -> None:
        self.index = index
        self.padding: tuple[int, int] = (1, 1)
        self.constraint: Constraint | None = None
        self.cell_alignment: CellAlignment | None = None
        self.delimiter: str | None = None

    def __repr__(self) -> str:
        return f"Column(index={self.index}, constraint={self.constraint!r})"

    def set_padding(self, padding: tuple[int, int]) -> Column:
        """Set ``(left, right)`` padding in spaces. Default is ``(1, 1)``."""
        left, right = padding
        self.padding = (max(0, int(left)), max(0, int(right)))
        return self

    def padding_width(self) -> int:
        return self.padding[0] + self.padding[1]

    def set_constraint(self, constraint: Constraint) -> Column:
        self.constraint = check_constraint(constraint)
        return self

    def remove_constraint(self) -> Column:
        self.constraint = None
        return self

    def set_cell_alignment(self, alignment: CellAlignment) -> Column:
        """Default alignment for all cells of this column."""
        self.cell_alignment = alignment
        return self

    def set_delimiter(self, delimiter: str) -> Column:
        self.delimiter = delimiter
        return self

    def is_hidden(self) -> bool:
        return isinstance(self.constraint, Hidden)
