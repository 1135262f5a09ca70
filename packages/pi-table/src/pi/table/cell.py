"""Table cell: content lines plus optional alignment, delimiter and styling."""

from __future__ import annotations

from typing import Any, Iterable

from pi.table.style import Attribute, CellAlignment, Color


class Cell:
    """A single table cell.

    The content is split on ``"\\n"`` at construction time; each piece is an
    explicit line that the wrapper reflows independently.
    """

    def __init__(
        self,
        content: Any = "",
        *,
        alignment: CellAlignment | None = None,
        delimiter: str | None = None,
        fg: Color | None = None,
        bg: Color | None = None,
        attributes: Iterable[Attribute] = (),
    ) -> None:
        self.lines: list[str] = str(content).split("\n")
        self.alignment = alignment
        self.delimiter = delimiter
        self.fg_color = fg
        self.bg_color = bg
        self.attributes: list[Attribute] = list(attributes)

    def __repr__(self) -> str:
        return f"Cell({self.content()!r})"

    def content(self) -> str:
        return "\n".join(self.lines)

    def line_count(self) -> int:
        return len(self.lines)

    # -- fluent setters -----------------------------------------------------

    def set_alignment(self, alignment: CellAlignment) -> Cell:
        """Override the column's alignment for this cell."""
        self.alignment = alignment
        return self

    def set_delimiter(self, delimiter: str) -> Cell:
        """Set the character used to split this cell's text into words."""
        self.delimiter = delimiter
        return self

    def fg(self, color: Color) -> Cell:
        self.fg_color = color
        return self

    def bg(self, color: Color) -> Cell:
        self.bg_color = color
        return self

    def add_attribute(self, attribute: Attribute) -> Cell:
        self.attributes.append(attribute)
        return self

    def add_attributes(self, attributes: Iterable[Attribute]) -> Cell:
        self.attributes.extend(attributes)
        return self


def to_cell(value: Any) -> Cell:
    """Return *value* if it already is a :class:`Cell`, else wrap it."""
    if isinstance(value, Cell):
        return value
    return Cell(value)
