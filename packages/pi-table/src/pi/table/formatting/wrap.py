"""Line wrapper: reflow explicit cell lines to a column's content width."""

from __future__ import annotations

from typing import Iterable

from pi.table.utils import (
    TAB_WIDTH,
    display_width,
    graphemes,
    split_at_width,
    strip_ansi,
    truncate_to_width,
)


def wrap_line(line: str, width: int, delimiter: str = " ") -> list[str]:
    """Wrap one explicit line (no ``"\\n"``) to *width* display columns.

    Words are packed greedily. A word wider than *width* on its own is
    hard-split on grapheme boundaries. A single grapheme wider than *width*
    cannot be split and is emitted alone on its line.
    """
    width = max(1, width)
    delimiter = delimiter or " "
    line = line.replace("\t", " " * TAB_WIDTH)
    if display_width(line) <= width:
        return [line]

    delimiter_width = display_width(delimiter)
    result: list[str] = []
    current = ""
    current_width = 0

    for word in line.split(delimiter):
        if not word:
            continue
        word_width = display_width(word)

        if current:
            if current_width + delimiter_width + word_width <= width:
                current += delimiter + word
                current_width += delimiter_width + word_width
                continue
            result.append(current)
            current = ""
            current_width = 0

        if word_width <= width:
            current = word
            current_width = word_width
            continue

        # The word does not fit on a line of its own.
        rest = strip_ansi(word)
        while display_width(rest) > width:
            head, rest = split_at_width(rest, width)
            if not head:
                head = graphemes(rest)[0]
                rest = rest[len(head):]
            result.append(head)
        current = rest
        current_width = display_width(rest)

    if current or not result:
        result.append(current)
    return result


def wrap_cell(lines: Iterable[str], width: int, delimiter: str = " ") -> list[str]:
    """Wrap every explicit line of a cell independently."""
    wrapped: list[str] = []
    for line in lines:
        wrapped.extend(wrap_line(line, width, delimiter))
    return wrapped


def truncate_cell(lines: list[str], max_height: int, width: int, indicator: str = "...") -> list[str]:
    """Keep at most *max_height* lines, marking the last kept one if any were cut.

    The indicator counts toward the line's width: the line is shortened
    until line plus indicator fits in *width*.
    """
    if len(lines) <= max_height:
        return lines
    kept = lines[:max_height]
    kept[-1] = truncate_to_width(kept[-1], width, indicator)
    return kept
