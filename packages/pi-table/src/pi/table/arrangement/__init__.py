"""Content arrangement: decide how wide every column is for one render.

Pipeline: scan content -> resolve constraints -> allocate space. Results
are returned as :class:`ColumnDisplayInfo` objects and discarded after the
render; nothing here survives between calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pi.table.arrangement.allocator import allocate
from pi.table.arrangement.constraints import disabled_width, resolve_bounds
from pi.table.arrangement.scanner import ColumnScan, scan_columns
from pi.table.formatting.borders import count_border_columns
from pi.table.style import CellAlignment, ContentArrangement

if TYPE_CHECKING:
    from pi.table.table import Table


@dataclass
class ColumnDisplayInfo:
    """Render-time facts about one column."""

    index: int
    padding: tuple[int, int]
    width: int
    is_hidden: bool = False
    cell_alignment: CellAlignment | None = None
    delimiter: str | None = None

    @property
    def content_width(self) -> int:
        """Width left for text after padding; never below 1 for visible columns."""
        if self.is_hidden:
            return 0
        return max(1, self.width - self.padding[0] - self.padding[1])


def arrange_content(table: Table, table_width: int | None) -> list[ColumnDisplayInfo]:
    """Compute display info for every column of *table*.

    Without a known *table_width* the dynamic modes fall back to the
    disabled arrangement.
    """
    scans = scan_columns(table.columns, table.all_rows(), table.truncation_indicator)
    arrangement = table.content_arrangement()

    if arrangement is ContentArrangement.DISABLED or table_width is None:
        widths = [disabled_width(col.constraint, scan) for col, scan in zip(table.columns, scans)]
    else:
        bounds = [
            resolve_bounds(col.constraint, scan, table_width)
            for col, scan in zip(table.columns, scans)
        ]
        visible_count = sum(1 for b in bounds if not b.hidden)
        overhead = count_border_columns(table, visible_count)
        widths = allocate(bounds, table_width - overhead, arrangement)

    return [
        ColumnDisplayInfo(
            index=col.index,
            padding=col.padding,
            width=width,
            is_hidden=col.is_hidden(),
            cell_alignment=col.cell_alignment,
            delimiter=col.delimiter,
        )
        for col, width in zip(table.columns, widths)
    ]


__all__ = ["ColumnDisplayInfo", "ColumnScan", "arrange_content", "scan_columns"]
