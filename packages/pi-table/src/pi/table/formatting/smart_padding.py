"""Smart padding: widen the gap between columns drawn without a visible border.

With a blank vertical line, adjacent cells can end up separated by a single
space, which reads as one column::

    1 con 0 root  07:29:04

When ``Table.smart_padding_width`` is set, every pair of adjacent columns
whose texts sit closer than that gets extra spaces on one side, as long as
the target width and the columns' own width caps leave room::

    1 con 0  root   07:29:04

A column is never padded on the side it is aligned to, so right-aligned
numbers stay flush right.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Sequence

from pi.table.arrangement.constraints import constraint_max_width
from pi.table.formatting.borders import count_border_columns
from pi.table.style import CellAlignment, ContentArrangement, TableComponent
from pi.table.utils import strip_ansi

if TYPE_CHECKING:
    from pi.table.arrangement import ColumnDisplayInfo
    from pi.table.formatting.borders import RowLines
    from pi.table.table import Table

_UNLIMITED = sys.maxsize


def smart_pad_content(
    table: Table,
    content: list[RowLines],
    display_info: Sequence[ColumnDisplayInfo],
    table_width: int | None,
) -> None:
    """Add padding between tightly packed columns, in place.

    Widths in *display_info* grow by the padding added so the borders
    match the padded parts.
    """
    if table.smart_padding_width <= 0:
        return
    if table.content_arrangement() is ContentArrangement.DYNAMIC_FULL_WIDTH:
        return
    if table.style_or_default(TableComponent.VERTICAL_LINES) != " ":
        return

    visible = [info for info in display_info if not info.is_hidden]
    if len(visible) < 2 or not content:
        return

    rooms = [_room(table, info, table_width) for info in visible]
    remaining = _remaining_width(table, visible, table_width)
    body = content[1:] if table.get_header() is not None else content

    for left in range(len(visible) - 1):
        if remaining <= 0:
            return
        right = left + 1
        limit = min(remaining, max(rooms[left], rooms[right]))
        needed = _padding_needed(table.smart_padding_width, body, visible, left, limit)
        if needed == 0:
            continue

        left_align = _alignment(visible[left])
        right_align = _alignment(visible[right])
        order = [(left, CellAlignment.RIGHT), (right, CellAlignment.LEFT)]
        # A centered or right-aligned left column next to a right-aligned
        # one: widen the right column first.
        if left_align is not CellAlignment.LEFT and right_align is CellAlignment.RIGHT:
            order.reverse()

        for index, side in order:
            if needed == 0:
                break
            if _alignment(visible[index]) is side:
                continue
            padding = min(needed, rooms[index], remaining)
            if padding <= 0:
                continue
            _pad_column(content, index, side, padding)
            visible[index].width += padding
            rooms[index] -= padding
            remaining -= padding
            needed -= padding


def _alignment(info: ColumnDisplayInfo) -> CellAlignment:
    return info.cell_alignment or CellAlignment.LEFT


def _room(table: Table, info: ColumnDisplayInfo, table_width: int | None) -> int:
    """How many columns *info* may still grow before hitting its constraint."""
    column = table.get_column(info.index)
    cap = constraint_max_width(column.constraint if column else None, table_width)
    if cap is None:
        return _UNLIMITED
    return max(0, cap - info.width)


def _remaining_width(
    table: Table,
    visible: Sequence[ColumnDisplayInfo],
    table_width: int | None,
) -> int:
    if table_width is None:
        return _UNLIMITED
    used = count_border_columns(table, len(visible)) + sum(info.width for info in visible)
    return max(0, table_width - used)


def _padding_needed(
    wanted: int,
    body: Sequence[RowLines],
    visible: Sequence[ColumnDisplayInfo],
    left: int,
    limit: int,
) -> int:
    """Largest shortfall of blank space between column *left* and the next one."""
    left_align = _alignment(visible[left])
    right_align = _alignment(visible[left + 1])
    if left_align is CellAlignment.RIGHT and right_align is CellAlignment.LEFT:
        return 0

    needed = 0
    for row in body:
        for parts in row:
            gap = _boundary_spaces(parts[left], parts[left + 1])
            needed = max(needed, wanted - gap)
            if needed >= limit:
                return limit
    return needed


def _boundary_spaces(left: str, right: str) -> int:
    left = strip_ansi(left)
    right = strip_ansi(right)
    return (len(left) - len(left.rstrip())) + (len(right) - len(right.lstrip()))


def _pad_column(content: list[RowLines], index: int, side: CellAlignment, padding: int) -> None:
    fill = " " * padding
    for row in content:
        for parts in row:
            if side is CellAlignment.RIGHT:
                parts[index] = parts[index] + fill
            else:
                parts[index] = fill + parts[index]
