"""Constraint resolver: turn declared constraints into concrete width bounds.

All widths here are total column widths, padding included. Every visible
column has a floor of ``padding + 1`` so at least one display column of
content always remains.
"""

from __future__ import annotations

from dataclasses import dataclass

from pi.table.arrangement.scanner import ColumnScan
from pi.table.style import (
    Absolute,
    Boundaries,
    Constraint,
    ContentWidth,
    Fixed,
    Hidden,
    LowerBoundary,
    Percentage,
    UpperBoundary,
    Width,
    clamp_percentage,
)


@dataclass(frozen=True)
class ColumnBounds:
    """Resolved ``(min_width, max_width)`` for one column."""

    min_width: int
    max_width: int
    floor: int = 1
    hidden: bool = False


def percent_of(percent: int, table_width: int) -> int:
    """``round(percent / 100 * table_width)``, rounding halves up."""
    return (clamp_percentage(percent) * table_width + 50) // 100


def resolve_width(width: Width, table_width: int | None) -> int | None:
    """Resolve a fixed or percentage width.

    Returns ``None`` for a percentage when the table width is unknown.
    """
    if isinstance(width, Fixed):
        return max(0, int(width.width))
    if isinstance(width, Percentage):
        if table_width is None:
            return None
        return percent_of(width.percent, table_width)
    raise TypeError(f"Not a width: {width!r}")


def resolve_bounds(
    constraint: Constraint | None,
    scan: ColumnScan,
    table_width: int | None,
) -> ColumnBounds:
    """Compute the width bounds of one column.

    Percentages that cannot be resolved because *table_width* is ``None``
    are treated as if the constraint (or that half of it) were absent.
    """
    floor = scan.padding + 1
    content = max(scan.max_content_width, floor)

    if constraint is None:
        return ColumnBounds(floor, content, floor)

    if isinstance(constraint, Hidden):
        return ColumnBounds(0, 0, 0, hidden=True)

    if isinstance(constraint, ContentWidth):
        return ColumnBounds(content, content, floor)

    if isinstance(constraint, (Absolute, Percentage)):
        width = constraint.width if isinstance(constraint, Absolute) else constraint
        resolved = resolve_width(width, table_width)
        if resolved is None:
            return ColumnBounds(floor, content, floor)
        resolved = max(resolved, floor)
        return ColumnBounds(resolved, resolved, floor)

    if isinstance(constraint, LowerBoundary):
        lower = resolve_width(constraint.width, table_width)
        if lower is None:
            return ColumnBounds(floor, content, floor)
        lower = max(lower, floor)
        # Content narrower than the boundary: the column is pinned to it.
        return ColumnBounds(lower, max(lower, content), floor)

    if isinstance(constraint, UpperBoundary):
        upper = resolve_width(constraint.width, table_width)
        if upper is None:
            return ColumnBounds(floor, content, floor)
        return ColumnBounds(floor, max(floor, min(upper, content)), floor)

    if isinstance(constraint, Boundaries):
        lower = resolve_width(constraint.lower, table_width)
        upper = resolve_width(constraint.upper, table_width)
        lower = floor if lower is None else max(lower, floor)
        upper = content if upper is None else min(upper, content)
        return ColumnBounds(lower, max(upper, lower), floor)

    raise TypeError(f"Not a column constraint: {constraint!r}")


def disabled_width(constraint: Constraint | None, scan: ColumnScan) -> int:
    """Final width of a column when dynamic arrangement is off.

    Only fixed absolute widths override the content width; percentages
    need a target width and are ignored here.
    """
    floor = scan.padding + 1
    if isinstance(constraint, Hidden):
        return 0
    if isinstance(constraint, Absolute) and isinstance(constraint.width, Fixed):
        return max(int(constraint.width.width), floor)
    return max(scan.max_content_width, floor)


def constraint_max_width(constraint: Constraint | None, table_width: int | None) -> int | None:
    """Largest total width *constraint* allows, or ``None`` if it sets no cap."""
    if isinstance(constraint, Absolute):
        return resolve_width(constraint.width, table_width)
    if isinstance(constraint, Percentage):
        return resolve_width(constraint, table_width)
    if isinstance(constraint, UpperBoundary):
        return resolve_width(constraint.width, table_width)
    if isinstance(constraint, Boundaries):
        return resolve_width(constraint.upper, table_width)
    return None
