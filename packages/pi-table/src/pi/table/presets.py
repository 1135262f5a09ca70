"""Border presets and modifiers.

A preset is a string with one glyph per :class:`~pi.table.style.TableComponent`,
in enum order. A space means the component is not drawn.

Component order::

    LeftBorder, RightBorder, TopBorder, BottomBorder,
    LeftHeaderIntersection, HeaderLines, MiddleHeaderIntersections,
    RightHeaderIntersection, VerticalLines, HorizontalLines,
    MiddleIntersections, LeftBorderIntersections, RightBorderIntersections,
    TopBorderIntersections, BottomBorderIntersections,
    TopLeftCorner, TopRightCorner, BottomLeftCorner, BottomRightCorner

A separator column between cells exists whenever vertical lines or any
vertical intersection is part of the preset.
"""

from __future__ import annotations

# +-------+-------+
# | Hello | there |
# +===============+
# | a     | b     |
# |-------+-------|
# | c     | d     |
# +-------+-------+
ASCII_FULL = "||--+==+|-+||++++++"

# +-------+-------+
# | Hello | there |
# +===============+
# | a     | b     |
# | c     | d     |
# +-------+-------+
ASCII_FULL_CONDENSED = "||--+==+|    ++++++"

#  Hello | there
# ===============
#  a     | b
# -------+-------
#  c     | d
ASCII_NO_BORDERS = "     == |-+        "

# +--------------+
# | Hello  there |
# +==============+
# | a      b     |
# | c      d     |
# +--------------+
ASCII_BORDERS_ONLY = "||--+= +       ++++"

# ---------------
#  Hello   there
# ===============
#  a       b
# ---------------
#  c       d
# ---------------
ASCII_HORIZONTAL_ONLY = "  -- ==  --  --    "

# | Hello | there |
# |-------|-------|
# | a     | b     |
# | c     | d     |
ASCII_MARKDOWN = "||  |-|||          "

# ┌───────┬───────┐
# │ Hello ┆ there │
# ╞═══════╪═══════╡
# │ a     ┆ b     │
# ├╌╌╌╌╌╌╌┼╌╌╌╌╌╌╌┤
# │ c     ┆ d     │
# └───────┴───────┘
UTF8_FULL = "││──╞═╪╡┆╌┼├┤┬┴┌┐└┘"

# ┌───────┬───────┐
# │ Hello ┆ there │
# ╞═══════╪═══════╡
# │ a     ┆ b     │
# │ c     ┆ d     │
# └───────┴───────┘
UTF8_FULL_CONDENSED = "││──╞═╪╡┆    ┬┴┌┐└┘"

#  Hello ┆ there
# ═══════╪═══════
#  a     ┆ b
# ╌╌╌╌╌╌╌┼╌╌╌╌╌╌╌
#  c     ┆ d
UTF8_NO_BORDERS = "     ═╪ ┆╌┼        "

# ┌──────────────┐
# │ Hello  there │
# ╞══════════════╡
# │ a      b     │
# │ c      d     │
# └──────────────┘
UTF8_BORDERS_ONLY = "││──╞═ ╡       ┌┐└┘"

# ───────────────
#  Hello   there
# ═══════════════
#  a       b
# ───────────────
#  c       d
# ───────────────
UTF8_HORIZONTAL_ONLY = "  ── ══  ──  ──    "

NOTHING = " " * 19

# Modifiers. Spaces leave the underlying component untouched.

# ╭───────┬───────╮
# │ Hello ┆ there │
# ╞═══════╪═══════╡
# │ a     ┆ b     │
# ╰───────┴───────╯
UTF8_ROUND_CORNERS = "               ╭╮╰╯"

# Replaces the dashed inner lines of UTF8_FULL with solid ones.
UTF8_SOLID_INNER_BORDERS = "        │─         "
