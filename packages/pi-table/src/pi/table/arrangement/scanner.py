"""Content scanner: measure every column's widest line."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from pi.table.column import Column
from pi.table.row import Row


@dataclass
class ColumnScan:
    """Scan result for one column.

    ``max_content_width`` includes the column's left and right padding.
    """

    index: int
    padding: int
    max_content_width: int

    @property
    def content_width(self) -> int:
        """Widest explicit line without padding."""
        return self.max_content_width - self.padding


def scan_columns(
    columns: Sequence[Column],
    rows: Sequence[Row],
    indicator: str = "...",
) -> list[ColumnScan]:
    """Scan *rows* (header first, if any) against *columns*.

    Cells beyond the last column are ignored. Nothing is cached: the scan
    reflects the table exactly as it is right now.
    """
    scans = [
        ColumnScan(index=col.index, padding=col.padding_width(), max_content_width=0)
        for col in columns
    ]

    for row in rows:
        widths = row.max_content_widths(indicator)
        for scan in scans:
            if scan.index < len(widths) and widths[scan.index] > scan.max_content_width:
                scan.max_content_width = widths[scan.index]

    for scan in scans:
        scan.max_content_width += scan.padding

    return scans
