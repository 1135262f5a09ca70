"""Terminal text utilities: ANSI stripping, display width, grapheme slicing.

Every width comparison in the table engine goes through :func:`display_width`.
Byte length or ``len()`` is never a valid substitute.
"""

from __future__ import annotations

import re
import unicodedata

import grapheme
import wcwidth as _wcwidth


# ---------------------------------------------------------------------------
# Regex patterns for ANSI / OSC / APC sequences
# ---------------------------------------------------------------------------

_STRIP_RE = re.compile(
    r"\x1b\[[0-9;]*[mGKHJ]"        # CSI
    r"|\x1b\]8;;[^\x07]*\x07"       # OSC 8
    r"|\x1b_[^\x07\x1b]*(?:\x07|\x1b\\)"  # APC
)

TAB_WIDTH = 3

# Pure memo of display_width for non-ASCII text; oldest entries go first.
_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 512


def _remember(text: str, width: int) -> int:
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        del _width_cache[next(iter(_width_cache))]
    _width_cache[text] = width
    return width


def strip_ansi(text: str) -> str:
    """Remove CSI, OSC 8 and APC escape sequences from *text*."""
    return _STRIP_RE.sub("", text)


# Code points that turn a multi-codepoint cluster into a two-column emoji:
# VS16, ZWJ, skin tones, regional indicators.
_EMOJI_JOINERS = frozenset((0xFE0F, 0x200D))
_EMOJI_RANGES = ((0x1F3FB, 0x1F3FF), (0x1F1E6, 0x1F1FF))


def _is_emoji_cluster(g: str) -> bool:
    for ch in g:
        cp = ord(ch)
        if cp in _EMOJI_JOINERS or any(lo <= cp <= hi for lo, hi in _EMOJI_RANGES):
            return True
    first = ord(g[0])
    return first >= 0x1F000 or 0x2600 <= first <= 0x27BF


def grapheme_width(g: str) -> int:
    """Columns taken by one grapheme cluster. Tabs count ``TAB_WIDTH``."""
    if not g:
        return 0
    if g == "\t":
        return TAB_WIDTH

    if len(g) == 1:
        cp = ord(g)
        if cp < 0x20 or 0x7F <= cp <= 0x9F:
            return 0
        return max(_wcwidth.wcwidth(g), 0)

    if _is_emoji_cluster(g):
        return 2
    category = unicodedata.category(g[0])
    if category.startswith("M") or category == "Cf":
        return 0
    return max(_wcwidth.wcwidth(g[0]), 0)


def graphemes(text: str) -> list[str]:
    """Split *text* into grapheme clusters."""
    return list(grapheme.graphemes(text))


def display_width(text: str) -> int:
    """Terminal columns taken by *text*, escape sequences excluded."""
    plain = strip_ansi(text)
    if plain.isascii() and plain.isprintable():
        return len(plain)

    cached = _width_cache.get(plain)
    if cached is not None:
        return cached
    return _remember(plain, sum(grapheme_width(g) for g in grapheme.graphemes(plain)))


# ---------------------------------------------------------------------------
# Column slicing
# ---------------------------------------------------------------------------

def split_at_width(text: str, max_cols: int) -> tuple[str, str]:
    """Split plain *text* into a prefix fitting *max_cols* and the rest.

    The cut happens on a grapheme boundary, so a wide glyph or a base
    character with its combining marks is never divided.
    """
    cols = 0
    taken = 0
    clusters = graphemes(text)
    for g in clusters:
        w = grapheme_width(g)
        if cols + w > max_cols:
            break
        cols += w
        taken += 1
    return "".join(clusters[:taken]), "".join(clusters[taken:])


def truncate_to_width(text: str, max_width: int, indicator: str = "...") -> str:
    """Fit *text* plus a trailing *indicator* into *max_width* columns.

    The indicator is always appended and counts toward the width. Escape
    sequences are stripped first, since a cut could split one of them.
    """
    if max_width <= 0:
        return ""

    text = strip_ansi(text)
    indicator_width = display_width(indicator)
    if display_width(text) + indicator_width <= max_width:
        return text + indicator

    target_width = max_width - indicator_width
    if target_width <= 0:
        # Indicator alone exceeds max_width -- just cut the indicator
        return split_at_width(indicator, max_width)[0]

    return split_at_width(text, target_width)[0] + indicator
