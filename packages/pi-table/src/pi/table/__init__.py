"""pi-table: width-aware terminal tables with dynamic content arrangement."""

# Data model
from pi.table.cell import Cell
from pi.table.column import Column
from pi.table.row import Row

# Styling types and constraints
from pi.table.style import (
    Absolute,
    Attribute,
    Boundaries,
    CellAlignment,
    Color,
    Constraint,
    ContentArrangement,
    ContentWidth,
    Fixed,
    Hidden,
    LowerBoundary,
    Percentage,
    TableComponent,
    UpperBoundary,
    Width,
)

# Table builder
from pi.table.table import Table

# Width measurement
from pi.table.utils import display_width, strip_ansi

__all__ = [
    # Data model
    "Cell",
    "Column",
    "Row",
    "Table",
    # Constraints
    "Absolute",
    "Boundaries",
    "Constraint",
    "ContentWidth",
    "Fixed",
    "Hidden",
    "LowerBoundary",
    "Percentage",
    "UpperBoundary",
    "Width",
    # Styling
    "Attribute",
    "CellAlignment",
    "Color",
    "ContentArrangement",
    "TableComponent",
    # Utilities
    "display_width",
    "strip_ansi",
]
