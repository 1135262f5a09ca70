"""Tests for pi.table.utils -- display width and grapheme slicing."""

from __future__ import annotations

from pi.table import utils
from pi.table.utils import (
    display_width,
    graphemes,
    split_at_width,
    strip_ansi,
    truncate_to_width,
)


# ---------------------------------------------------------------------------
# display_width
# ---------------------------------------------------------------------------


class TestDisplayWidth:
    """Measure the display width of text in terminal columns."""

    def test_plain_ascii(self) -> None:
        assert display_width("hello") == 5

    def test_empty_string(self) -> None:
        assert display_width("") == 0

    def test_ansi_codes_do_not_count(self) -> None:
        assert display_width("\x1b[1mhi\x1b[0m") == 2

    def test_multiple_ansi_codes(self) -> None:
        assert display_width("\x1b[1m\x1b[31mabc\x1b[0m") == 3

    def test_only_ansi_codes(self) -> None:
        assert display_width("\x1b[31m\x1b[0m") == 0

    def test_wide_cjk_characters_count_as_two(self) -> None:
        assert display_width("世") == 2

    def test_mixed_ascii_and_wide(self) -> None:
        # "A" (1) + U+4E16 (2) + "B" (1) = 4
        assert display_width("A世B") == 4

    def test_combining_mark_counts_zero(self) -> None:
        # "e" + COMBINING ACUTE ACCENT renders as one column
        assert display_width("e\u0301") == 1

    def test_emoji_counts_as_two(self) -> None:
        assert display_width("\U0001F44D") == 2

    def test_tab_counts_as_three_columns(self) -> None:
        assert display_width("\t") == 3

    def test_osc8_hyperlink_does_not_count(self) -> None:
        text = "\x1b]8;;https://example.com\x07link\x1b]8;;\x07"
        assert display_width(text) == 4

    def test_width_differs_from_len(self) -> None:
        text = "世界"
        assert len(text) == 2
        assert display_width(text) == 4

    def test_cache_is_bounded(self) -> None:
        utils._width_cache.clear()
        for i in range(utils._WIDTH_CACHE_MAX + 10):
            assert display_width(f"\u00e9{i}") == len(str(i)) + 1
        assert len(utils._width_cache) == utils._WIDTH_CACHE_MAX
        assert "\u00e90" not in utils._width_cache


class TestStripAnsi:
    def test_removes_sgr(self) -> None:
        assert strip_ansi("\x1b[1;31mred\x1b[0m") == "red"

    def test_plain_text_unchanged(self) -> None:
        assert strip_ansi("plain") == "plain"


# ---------------------------------------------------------------------------
# split_at_width
# ---------------------------------------------------------------------------


class TestSplitAtWidth:
    """Cut text at a column boundary without dividing graphemes."""

    def test_ascii_split(self) -> None:
        assert split_at_width("abcdef", 4) == ("abcd", "ef")

    def test_fits_entirely(self) -> None:
        assert split_at_width("abc", 10) == ("abc", "")

    def test_does_not_cut_wide_character(self) -> None:
        # "a" (1) + U+4E16 (2) would need 3 columns
        assert split_at_width("a世b", 2) == ("a", "世b")

    def test_wide_character_wider_than_limit(self) -> None:
        assert split_at_width("世", 1) == ("", "世")

    def test_keeps_combining_marks_with_base(self) -> None:
        text = "e\u0301" * 3
        head, rest = split_at_width(text, 2)
        assert head == "e\u0301e\u0301"
        assert rest == "e\u0301"

    def test_graphemes_groups_combining_marks(self) -> None:
        assert graphemes("e\u0301a") == ["e\u0301", "a"]


# ---------------------------------------------------------------------------
# truncate_to_width
# ---------------------------------------------------------------------------


class TestTruncateToWidth:
    """Fit text plus a truncation indicator into a width."""

    def test_short_text_gets_indicator(self) -> None:
        assert truncate_to_width("hi", 10) == "hi..."

    def test_long_text_is_cut(self) -> None:
        result = truncate_to_width("hello world", 6)
        assert result == "hel..."
        assert display_width(result) == 6

    def test_custom_indicator(self) -> None:
        assert truncate_to_width("hello world", 4, indicator="~") == "hel~"

    def test_indicator_wider_than_limit(self) -> None:
        assert truncate_to_width("abc", 2) == ".."

    def test_zero_width_returns_empty(self) -> None:
        assert truncate_to_width("hello", 0) == ""

    def test_wide_characters_not_split(self) -> None:
        result = truncate_to_width("世界世", 4, indicator=".")
        # Only one wide char fits in front of the indicator.
        assert result == "世."
        assert display_width(result) <= 4

    def test_ansi_is_stripped(self) -> None:
        result = truncate_to_width("\x1b[31mhello world\x1b[0m", 8)
        assert "\x1b" not in result
        assert display_width(result) == 8
