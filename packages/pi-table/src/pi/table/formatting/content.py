"""Cell formatting: wrap, truncate, align, pad and style every cell.

The result for each row is a list of display lines, each a list of parts
(one per visible column) padded to exactly the column width.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from pi.table.ansi import stylize
from pi.table.cell import Cell
from pi.table.formatting.wrap import truncate_cell, wrap_cell
from pi.table.style import CellAlignment
from pi.table.utils import display_width

if TYPE_CHECKING:
    from pi.table.arrangement import ColumnDisplayInfo
    from pi.table.row import Row
    from pi.table.table import Table


def format_content(
    table: Table,
    display_info: Sequence[ColumnDisplayInfo],
    styling: bool = False,
) -> list[list[list[str]]]:
    """Format the header (if any) and all body rows of *table*.

    *styling* is decided once per render by the caller.
    """
    return [format_row(row, display_info, table, styling) for row in table.all_rows()]


def format_row(
    row: Row,
    display_info: Sequence[ColumnDisplayInfo],
    table: Table,
    styling: bool = False,
) -> list[list[str]]:
    """Wrap and pad all cells of *row*; missing cells render empty."""
    visible = [info for info in display_info if not info.is_hidden]

    cells: list[Cell] = []
    wrapped: list[list[str]] = []
    for info in visible:
        cell = row.cells[info.index] if info.index < len(row.cells) else Cell("")
        delimiter = cell.delimiter or info.delimiter or table.delimiter or " "
        cells.append(cell)
        wrapped.append(wrap_cell(cell.lines, info.content_width, delimiter))

    if row.max_height is not None:
        wrapped = [
            truncate_cell(lines, row.max_height, info.content_width, table.truncation_indicator)
            for lines, info in zip(wrapped, visible)
        ]

    height = max((len(lines) for lines in wrapped), default=0)

    result: list[list[str]] = []
    for line_index in range(height):
        parts: list[str] = []
        for cell, lines, info in zip(cells, wrapped, visible):
            text = lines[line_index] if line_index < len(lines) else ""
            alignment = cell.alignment or info.cell_alignment or CellAlignment.LEFT
            part = (
                " " * info.padding[0]
                + align_line(text, info.content_width, alignment)
                + " " * info.padding[1]
            )
            if styling:
                part = stylize(part, cell.fg_color, cell.bg_color, cell.attributes)
            parts.append(part)
        result.append(parts)
    return result


def align_line(text: str, width: int, alignment: CellAlignment) -> str:
    """Pad *text* with spaces to *width* display columns.

    Centering puts the odd remaining space on the right.
    """
    remaining = max(0, width - display_width(text))
    if alignment is CellAlignment.RIGHT:
        return " " * remaining + text
    if alignment is CellAlignment.CENTER:
        left = remaining // 2
        return " " * left + text + " " * (remaining - left)
    return text + " " * remaining
