"""Declarative styling types: constraints, arrangement, alignment, colors.

Constraints form a closed set of frozen dataclass variants. Consumers
dispatch on them with ``isinstance`` chains that end in a ``TypeError``
for anything outside the set.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


def clamp_percentage(percent: int) -> int:
    """Clamp a percentage value into ``[0, 100]``."""
    return max(0, min(100, int(percent)))


# ---------------------------------------------------------------------------
# Width boundaries
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Fixed:
    """A width given in display columns."""

    width: int


@dataclass(frozen=True)
class Percentage:
    """A width given as a percentage of the table's target width.

    Values outside ``[0, 100]`` are clamped when resolved. Ignored when the
    target width is unknown.
    """

    percent: int


Width = Union[Fixed, Percentage]


# ---------------------------------------------------------------------------
# Column constraints
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Absolute:
    """Force the column to exactly this width."""

    width: Width


@dataclass(frozen=True)
class ContentWidth:
    """Force the column to be as wide as its widest content line."""


@dataclass(frozen=True)
class LowerBoundary:
    """The column is never narrower than this width."""

    width: Width


@dataclass(frozen=True)
class UpperBoundary:
    """The column is never wider than this width."""

    width: Width


@dataclass(frozen=True)
class Boundaries:
    """Both a lower and an upper boundary."""

    lower: Width
    upper: Width


@dataclass(frozen=True)
class Hidden:
    """Hide the column. Its cells are kept but never rendered."""


Constraint = Union[
    Absolute,
    ContentWidth,
    LowerBoundary,
    UpperBoundary,
    Boundaries,
    Percentage,
    Hidden,
]

CONSTRAINT_TYPES = (
    Absolute,
    ContentWidth,
    LowerBoundary,
    UpperBoundary,
    Boundaries,
    Percentage,
    Hidden,
)


def check_constraint(constraint: object) -> Constraint:
    """Return *constraint* unchanged, or raise ``TypeError`` if it is not one."""
    if not isinstance(constraint, CONSTRAINT_TYPES):
        raise TypeError(f"Not a column constraint: {constraint!r}")
    return constraint


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class ContentArrangement(Enum):
    """How column widths react to the table's target width."""

    #: Columns always render at full content width.
    DISABLED = "disabled"
    #: Columns shrink and wrap to fit; narrow content leaves the table narrower.
    DYNAMIC = "dynamic"
    #: Like DYNAMIC, but always expands to the full target width.
    DYNAMIC_FULL_WIDTH = "dynamic_full_width"


class CellAlignment(Enum):
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


class TableComponent(Enum):
    """All glyph slots of a table, in preset-string order."""

    LEFT_BORDER = 0
    RIGHT_BORDER = 1
    TOP_BORDER = 2
    BOTTOM_BORDER = 3
    LEFT_HEADER_INTERSECTION = 4
    HEADER_LINES = 5
    MIDDLE_HEADER_INTERSECTIONS = 6
    RIGHT_HEADER_INTERSECTION = 7
    VERTICAL_LINES = 8
    HORIZONTAL_LINES = 9
    MIDDLE_INTERSECTIONS = 10
    LEFT_BORDER_INTERSECTIONS = 11
    RIGHT_BORDER_INTERSECTIONS = 12
    TOP_BORDER_INTERSECTIONS = 13
    BOTTOM_BORDER_INTERSECTIONS = 14
    TOP_LEFT_CORNER = 15
    TOP_RIGHT_CORNER = 16
    BOTTOM_LEFT_CORNER = 17
    BOTTOM_RIGHT_CORNER = 18


# ---------------------------------------------------------------------------
# Colors and attributes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Color:
    """A terminal color as SGR parameters for foreground and background."""

    fg_params: str
    bg_params: str

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> Color:
        return cls(f"38;2;{r};{g};{b}", f"48;2;{r};{g};{b}")

    @classmethod
    def ansi_value(cls, n: int) -> Color:
        """A color from the 256-color palette."""
        return cls(f"38;5;{n}", f"48;5;{n}")


Color.RESET = Color("39", "49")
Color.BLACK = Color("30", "40")
Color.DARK_GREY = Color("90", "100")
Color.RED = Color("91", "101")
Color.DARK_RED = Color("31", "41")
Color.GREEN = Color("92", "102")
Color.DARK_GREEN = Color("32", "42")
Color.YELLOW = Color("93", "103")
Color.DARK_YELLOW = Color("33", "43")
Color.BLUE = Color("94", "104")
Color.DARK_BLUE = Color("34", "44")
Color.MAGENTA = Color("95", "105")
Color.DARK_MAGENTA = Color("35", "45")
Color.CYAN = Color("96", "106")
Color.DARK_CYAN = Color("36", "46")
Color.WHITE = Color("97", "107")
Color.GREY = Color("37", "47")


class Attribute(Enum):
    """Text attributes, valued by their SGR parameter."""

    BOLD = "1"
    DIM = "2"
    ITALIC = "3"
    UNDERLINED = "4"
    SLOW_BLINK = "5"
    RAPID_BLINK = "6"
    REVERSE = "7"
    HIDDEN = "8"
    CROSSED_OUT = "9"
