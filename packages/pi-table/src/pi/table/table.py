"""The Table builder and its render pipeline.

A render is a pure function of the table's current state::

    scan -> resolve constraints -> allocate -> wrap/format -> borders

Nothing computed during a render is stored on the table.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Callable, Iterable, Iterator

from pi.table import terminal
from pi.table.arrangement import arrange_content, scan_columns
from pi.table.cell import Cell
from pi.table.column import Column
from pi.table.formatting.borders import draw_borders
from pi.table.formatting.content import format_content
from pi.table.formatting.smart_padding import smart_pad_content
from pi.table.presets import ASCII_FULL
from pi.table.row import Row, to_row
from pi.table.style import Constraint, ContentArrangement, TableComponent

logger = logging.getLogger(__name__)

_COMPONENTS = list(TableComponent)


class Table:
    """A table of rows and columns rendered to fixed-width terminal text."""

    def __init__(self, *, auto_discover_columns: bool = False) -> None:
        self.columns: list[Column] = []
        self.header: Row | None = None
        self.rows: list[Row] = []
        self.delimiter: str | None = None
        self.truncation_indicator = "..."
        self.auto_discover_columns = auto_discover_columns
        self._arrangement = ContentArrangement.DISABLED
        self._style: dict[TableComponent, str] = {}
        self.smart_padding_width = 0
        self._table_width: int | None = None
        self._tty: bool | None = None
        self._enforce_styling = False

        self.load_preset(ASCII_FULL)

    def __str__(self) -> str:
        return "\n".join(self.lines())

    # -- rendering ----------------------------------------------------------

    def lines(self) -> Iterator[str]:
        """Render the table and iterate over its display lines.

        Every call renders afresh from the current state.
        """
        yield from self._render()

    def fmt_with_margin(self, margin: int) -> str:
        """Render the table with every line indented by *margin* spaces."""
        indent = " " * max(0, margin)
        return "\n".join(indent + line for line in self._render())

    def _render(self) -> list[str]:
        # The terminal is queried at most once per render.
        is_tty = self.is_tty()
        table_width = self._target_width(is_tty)
        display_info = arrange_content(self, table_width)
        content = format_content(self, display_info, self._styling(is_tty))
        smart_pad_content(self, content, display_info, table_width)
        return draw_borders(self, content, display_info)

    # -- rows ---------------------------------------------------------------

    def set_header(self, row: Any) -> Table:
        """Set the header row. The header always declares enough columns."""
        row = to_row(row)
        self._ensure_columns(row.cell_count())
        self.header = row
        return self

    def get_header(self) -> Row | None:
        return self.header

    def add_row(self, row: Any) -> Table:
        """Append a row of cells or displayable values.

        A row wider than the current columns only adds columns when
        ``auto_discover_columns`` is enabled or no column exists yet;
        otherwise the excess cells are kept but not rendered.
        """
        row = to_row(row)
        if self.auto_discover_columns or not self.columns:
            self._ensure_columns(row.cell_count())
        self.rows.append(row)
        return self

    def add_rows(self, rows: Iterable[Any]) -> Table:
        for row in rows:
            self.add_row(row)
        return self

    def add_row_if(self, predicate: Callable[[int, Row], bool], row: Any) -> Table:
        """Add *row* only if ``predicate(row_index, row)`` is true."""
        row = to_row(row)
        if predicate(len(self.rows), row):
            self.add_row(row)
        return self

    def get_row(self, index: int) -> Row | None:
        """Return the body row at *index*, or ``None`` if there is none."""
        if 0 <= index < len(self.rows):
            return self.rows[index]
        return None

    def remove_row(self, index: int) -> Row | None:
        if 0 <= index < len(self.rows):
            return self.rows.pop(index)
        return None

    def row_count(self) -> int:
        return len(self.rows)

    def is_empty(self) -> bool:
        return not self.rows

    def all_rows(self) -> list[Row]:
        """Header (if any) followed by the body rows."""
        if self.header is None:
            return list(self.rows)
        return [self.header, *self.rows]

    # -- columns ------------------------------------------------------------

    def _ensure_columns(self, count: int) -> None:
        for index in range(len(self.columns), count):
            self.columns.append(Column(index))

    def set_column_count(self, count: int) -> Table:
        """Declare at least *count* columns."""
        self._ensure_columns(count)
        return self

    def column_count(self) -> int:
        return len(self.columns)

    def get_column(self, index: int) -> Column | None:
        """Return the column at *index*, or ``None`` if it does not exist."""
        if 0 <= index < len(self.columns):
            return self.columns[index]
        return None

    def column(self, index: int) -> Column:
        """Like :meth:`get_column`, but raise ``IndexError`` if missing."""
        col = self.get_column(index)
        if col is None:
            raise IndexError(f"Column {index} does not exist (table has {len(self.columns)})")
        return col

    def column_iter(self) -> Iterator[Column]:
        return iter(self.columns)

    def set_constraints(self, constraints: Iterable[Constraint | None]) -> Table:
        """Assign constraints to the existing columns in order. ``None`` clears one."""
        for col, constraint in zip(self.column_iter(), constraints):
            if constraint is None:
                col.remove_constraint()
            else:
                col.set_constraint(constraint)
        return self

    def column_cells_iter(self, index: int) -> Iterator[Cell | None]:
        """Iterate over the body cells at column *index*; ``None`` where a row is short."""
        for row in self.rows:
            yield row.cells[index] if index < len(row.cells) else None

    def column_max_content_widths(self) -> list[int]:
        """Widest explicit line of every column, without padding."""
        return [
            scan.content_width
            for scan in scan_columns(self.columns, self.all_rows(), self.truncation_indicator)
        ]

    # -- width and arrangement ----------------------------------------------

    def set_width(self, width: int) -> Table:
        """Set an explicit target width for dynamic arrangement."""
        self._table_width = max(0, int(width))
        return self

    def unset_width(self) -> Table:
        self._table_width = None
        return self

    def width(self) -> int | None:
        """Target width for this render.

        Order: explicit width, ``PI_TABLE_WIDTH``, the terminal width when
        stdout is a terminal. ``None`` if none is available.
        """
        return self._target_width(self.is_tty())

    def _target_width(self, is_tty: bool) -> int | None:
        if self._table_width is not None:
            return self._table_width

        env_width = os.environ.get("PI_TABLE_WIDTH", "")
        if env_width:
            try:
                return max(0, int(env_width))
            except ValueError:
                logger.debug("Ignoring non-integer PI_TABLE_WIDTH=%r", env_width)

        if is_tty:
            size = terminal.terminal_size()
            if size is not None:
                return size[0]
        return None

    def set_content_arrangement(self, arrangement: ContentArrangement) -> Table:
        self._arrangement = ContentArrangement(arrangement)
        return self

    def content_arrangement(self) -> ContentArrangement:
        return self._arrangement

    def set_delimiter(self, delimiter: str) -> Table:
        """Default word delimiter for all cells."""
        self.delimiter = delimiter
        return self

    def set_truncation_indicator(self, indicator: str) -> Table:
        """Marker appended to cells cut by a row's max height. Default ``...``."""
        self.truncation_indicator = indicator
        return self

    def set_smart_padding_width(self, width: int) -> Table:
        """Keep at least *width* spaces between the texts of adjacent columns.

        Only applies when the vertical line glyph is blank and the
        arrangement is Disabled or Dynamic. ``0`` turns it off.
        """
        self.smart_padding_width = max(0, int(width))
        return self

    # -- tty and styling ----------------------------------------------------

    def force_tty(self) -> Table:
        """Behave as if printing to a terminal, e.g. to get styled output in a pipe."""
        self._tty = True
        return self

    def force_no_tty(self) -> Table:
        """Behave as if not printing to a terminal: no terminal width, no styling."""
        self._tty = False
        return self

    def is_tty(self) -> bool:
        if self._tty is not None:
            return self._tty
        return terminal.is_terminal()

    def enforce_styling(self) -> Table:
        """Emit cell colors and attributes even when not on a terminal."""
        self._enforce_styling = True
        return self

    def disable_styling(self) -> Table:
        self._enforce_styling = False
        self._tty = False
        return self

    def should_style(self) -> bool:
        return self._styling(self.is_tty())

    def _styling(self, is_tty: bool) -> bool:
        if self._enforce_styling:
            return True
        if os.environ.get("NO_COLOR"):
            return False
        return is_tty

    # -- border style -------------------------------------------------------

    def load_preset(self, preset: str) -> Table:
        """Replace the border style with *preset* (see :mod:`pi.table.presets`).

        Spaces mean "do not draw". Components beyond the end of a short
        preset are removed; glyphs beyond the last component are ignored.
        """
        self._style = {}
        for component, glyph in zip(_COMPONENTS, preset):
            if glyph != " ":
                self._style[component] = glyph
        return self

    def current_style_as_preset(self) -> str:
        return "".join(self._style.get(component, " ") for component in _COMPONENTS)

    def apply_modifier(self, modifier: str) -> Table:
        """Overlay *modifier* on the current style; spaces leave components as they are."""
        for component, glyph in zip(_COMPONENTS, modifier):
            if glyph != " ":
                self._style[component] = glyph
        return self

    def set_style(self, component: TableComponent, glyph: str) -> Table:
        """Draw *component* with *glyph*.

        Unlike in presets, a space is kept: the component still takes up
        its column but renders blank. Use :meth:`remove_style` to drop it.
        """
        self._style[component] = glyph
        return self

    def get_style(self, component: TableComponent) -> str | None:
        return self._style.get(component)

    def remove_style(self, component: TableComponent) -> Table:
        self._style.pop(component, None)
        return self

    def style_or_default(self, component: TableComponent) -> str:
        return self._style.get(component, " ")

    def style_exists(self, *components: TableComponent) -> bool:
        """Return ``True`` if any of *components* is drawn."""
        return any(component in self._style for component in components)
