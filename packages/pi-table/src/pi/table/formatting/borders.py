"""Border assembly: join padded cell lines with border and separator glyphs."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from pi.table.style import TableComponent as C

if TYPE_CHECKING:
    from pi.table.arrangement import ColumnDisplayInfo
    from pi.table.table import Table

# One formatted row: a list of display lines, each a list of column parts.
RowLines = list[list[str]]


def should_draw_top_border(table: Table) -> bool:
    return table.style_exists(
        C.TOP_LEFT_CORNER, C.TOP_BORDER, C.TOP_BORDER_INTERSECTIONS, C.TOP_RIGHT_CORNER
    )


def should_draw_bottom_border(table: Table) -> bool:
    return table.style_exists(
        C.BOTTOM_LEFT_CORNER,
        C.BOTTOM_BORDER,
        C.BOTTOM_BORDER_INTERSECTIONS,
        C.BOTTOM_RIGHT_CORNER,
    )


def should_draw_left_border(table: Table) -> bool:
    return table.style_exists(
        C.TOP_LEFT_CORNER,
        C.LEFT_BORDER,
        C.LEFT_BORDER_INTERSECTIONS,
        C.LEFT_HEADER_INTERSECTION,
        C.BOTTOM_LEFT_CORNER,
    )


def should_draw_right_border(table: Table) -> bool:
    return table.style_exists(
        C.TOP_RIGHT_CORNER,
        C.RIGHT_BORDER,
        C.RIGHT_BORDER_INTERSECTIONS,
        C.RIGHT_HEADER_INTERSECTION,
        C.BOTTOM_RIGHT_CORNER,
    )


def should_draw_vertical_lines(table: Table) -> bool:
    return table.style_exists(
        C.TOP_BORDER_INTERSECTIONS,
        C.MIDDLE_HEADER_INTERSECTIONS,
        C.VERTICAL_LINES,
        C.MIDDLE_INTERSECTIONS,
        C.BOTTOM_BORDER_INTERSECTIONS,
    )


def should_draw_horizontal_lines(table: Table) -> bool:
    return table.style_exists(
        C.LEFT_BORDER_INTERSECTIONS,
        C.HORIZONTAL_LINES,
        C.MIDDLE_INTERSECTIONS,
        C.RIGHT_BORDER_INTERSECTIONS,
    )


def should_draw_header(table: Table) -> bool:
    return table.style_exists(
        C.LEFT_HEADER_INTERSECTION,
        C.HEADER_LINES,
        C.MIDDLE_HEADER_INTERSECTIONS,
        C.RIGHT_HEADER_INTERSECTION,
    )


def count_border_columns(table: Table, visible_columns: int) -> int:
    """Display columns taken by borders and separators on a content line."""
    count = 0
    if should_draw_left_border(table):
        count += 1
    if should_draw_right_border(table):
        count += 1
    if should_draw_vertical_lines(table) and visible_columns > 1:
        count += visible_columns - 1
    return count


def draw_borders(
    table: Table,
    rows: Sequence[RowLines],
    display_info: Sequence[ColumnDisplayInfo],
) -> list[str]:
    """Assemble the final table lines.

    *rows* holds the formatted header (if the table has one) followed by the
    body rows; each part is already padded to its column width.
    """
    widths = [info.width for info in display_info if not info.is_hidden]
    lines: list[str] = []

    if should_draw_top_border(table):
        lines.append(
            _horizontal_line(
                table, widths, C.TOP_LEFT_CORNER, C.TOP_BORDER,
                C.TOP_BORDER_INTERSECTIONS, C.TOP_RIGHT_CORNER,
            )
        )

    has_header = table.get_header() is not None
    for row_index, row in enumerate(rows):
        for parts in row:
            lines.append(_embed_line(table, parts))

        is_last = row_index == len(rows) - 1
        if row_index == 0 and has_header:
            if should_draw_header(table) and not is_last:
                lines.append(
                    _horizontal_line(
                        table, widths, C.LEFT_HEADER_INTERSECTION, C.HEADER_LINES,
                        C.MIDDLE_HEADER_INTERSECTIONS, C.RIGHT_HEADER_INTERSECTION,
                    )
                )
            continue

        if not is_last and should_draw_horizontal_lines(table):
            lines.append(
                _horizontal_line(
                    table, widths, C.LEFT_BORDER_INTERSECTIONS, C.HORIZONTAL_LINES,
                    C.MIDDLE_INTERSECTIONS, C.RIGHT_BORDER_INTERSECTIONS,
                )
            )

    if should_draw_bottom_border(table):
        lines.append(
            _horizontal_line(
                table, widths, C.BOTTOM_LEFT_CORNER, C.BOTTOM_BORDER,
                C.BOTTOM_BORDER_INTERSECTIONS, C.BOTTOM_RIGHT_CORNER,
            )
        )

    return lines


def _horizontal_line(
    table: Table,
    widths: Sequence[int],
    left: C,
    fill: C,
    intersection: C,
    right: C,
) -> str:
    """Draw a full-width horizontal line from four components."""
    fill_glyph = table.style_or_default(fill)
    separator = table.style_or_default(intersection) if should_draw_vertical_lines(table) else ""

    line = table.style_or_default(left) if should_draw_left_border(table) else ""
    line += separator.join(fill_glyph * w for w in widths)
    if should_draw_right_border(table):
        line += table.style_or_default(right)
    return line


def _embed_line(table: Table, parts: Sequence[str]) -> str:
    """Surround one content line's column parts with vertical borders."""
    separator = table.style_or_default(C.VERTICAL_LINES) if should_draw_vertical_lines(table) else ""

    line = table.style_or_default(C.LEFT_BORDER) if should_draw_left_border(table) else ""
    line += separator.join(parts)
    if should_draw_right_border(table):
        line += table.style_or_default(C.RIGHT_BORDER)
    return line
