"""Space allocator: split the available width between visible columns.

Policy for integer remainders: whenever space is handed out in shares,
leftover units go one at a time to the lowest-index columns that can still
take them. The same inputs always yield the same widths.
"""

from __future__ import annotations

import logging
from typing import Sequence

from pi.table.arrangement.constraints import ColumnBounds
from pi.table.style import ContentArrangement

logger = logging.getLogger(__name__)


def distribute(widths: list[int], caps: Sequence[int], amount: int) -> int:
    """Grow *widths* in place toward *caps* by at most *amount* columns.

    Space is shared proportionally to each column's headroom
    (``cap - width``). Returns whatever could not be placed.
    """
    headroom = [max(0, cap - w) for w, cap in zip(widths, caps)]
    total = sum(headroom)
    if amount <= 0 or total == 0:
        return max(amount, 0)

    if amount >= total:
        for i, room in enumerate(headroom):
            widths[i] += room
        return amount - total

    grants = [amount * room // total for room in headroom]
    remainder = amount - sum(grants)
    for i, room in enumerate(headroom):
        if remainder == 0:
            break
        if grants[i] < room:
            grants[i] += 1
            remainder -= 1

    for i, grant in enumerate(grants):
        widths[i] += grant
    return 0


def spread_evenly(widths: list[int], amount: int) -> None:
    """Add *amount* to *widths* in equal parts, remainder to the first columns."""
    if not widths or amount <= 0:
        return
    share, remainder = divmod(amount, len(widths))
    for i in range(len(widths)):
        widths[i] += share + (1 if i < remainder else 0)


def allocate(
    bounds: Sequence[ColumnBounds],
    available: int,
    arrangement: ContentArrangement,
) -> list[int]:
    """Compute final widths for *bounds* within *available* columns.

    *available* is the target width minus borders and separators. Hidden
    columns always get 0 and take no part in the arithmetic. The result is
    index-aligned with *bounds*.
    """
    visible = [i for i, b in enumerate(bounds) if not b.hidden]
    result = [0] * len(bounds)
    if not visible:
        return result

    mins = [bounds[i].min_width for i in visible]
    maxs = [bounds[i].max_width for i in visible]
    available = max(0, available)

    if sum(mins) > available:
        widths = _shrink(bounds, visible, available)
    else:
        widths = list(mins)
        leftover = distribute(widths, maxs, available - sum(mins))
        if leftover and arrangement is ContentArrangement.DYNAMIC_FULL_WIDTH:
            spread_evenly(widths, leftover)

    for i, width in zip(visible, widths):
        result[i] = width
    return result


def _shrink(bounds: Sequence[ColumnBounds], visible: list[int], available: int) -> list[int]:
    """Squeeze columns below their minimum when the minimums do not fit.

    Every column keeps its floor (padding plus one content column). The
    space above the floors is shared in proportion to how far each column's
    minimum sits above its floor.
    """
    floors = [bounds[i].floor for i in visible]
    mins = [bounds[i].min_width for i in visible]

    logger.warning(
        "Table layout compromise: column minimums need %d columns, only %d available",
        sum(mins),
        available,
    )

    widths = list(floors)
    distribute(widths, mins, available - sum(floors))
    return widths
