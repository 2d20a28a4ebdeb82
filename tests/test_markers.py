"""Tests for delimiter lookahead.

Lookahead is pure over a token list, so it is tested directly on lexer
output without constructing a parser.
"""

from hypothesis import given
from hypothesis import strategies as st

from gohan.lexer import scan
from gohan.parsing.markers import (
    DelimiterIndex,
    InlineMarker,
    LinkMarker,
    find_emphasis,
    find_heading,
    find_link,
    find_strong,
)


def _find_link(source: str, start: int = 0):
    tokens = scan(source)
    return find_link(tokens, start, len(tokens))


def _find_strong(source: str, start: int = 0):
    tokens = scan(source)
    return find_strong(tokens, start, len(tokens))


def _find_emphasis(source: str, start: int = 0):
    tokens = scan(source)
    return find_emphasis(tokens, start, len(tokens))


def _find_heading(source: str, start: int = 0):
    tokens = scan(source)
    return find_heading(tokens, start, len(tokens))


class TestFindLink:
    """Test link boundary detection."""

    def test_simple_link(self) -> None:
        marker = _find_link("[a](b)")
        assert marker == LinkMarker(start_text=1, end_text=2, start_url=4, end_url=5)
        assert marker.text_range == (1, 2)
        assert marker.url_range == (4, 5)
        assert marker.stop == 6

    def test_empty_text_and_url(self) -> None:
        """Both halves of a link may be empty."""
        marker = _find_link("[]()")
        assert marker is not None
        assert marker.text_range == (1, 1)
        assert marker.url_range == (3, 3)

    def test_unclosed_bracket(self) -> None:
        assert _find_link("[oops") is None

    def test_missing_url(self) -> None:
        assert _find_link("[a]") is None

    def test_unclosed_url(self) -> None:
        assert _find_link("[a](b") is None

    def test_bracket_not_followed_by_paren(self) -> None:
        """The first ``]`` must be immediately followed by ``(``."""
        assert _find_link("[a] (b)") is None
        assert _find_link("[a]x(b)") is None

    def test_single_newline_allowed(self) -> None:
        """A soft line break inside link text does not end the search."""
        marker = _find_link("[a\nb](c)")
        assert marker == LinkMarker(start_text=1, end_text=4, start_url=6, end_url=7)

    def test_blank_line_aborts(self) -> None:
        assert _find_link("[a\n\nb](c)") is None

    def test_first_closing_paren_wins(self) -> None:
        marker = _find_link("[a](b)c)")
        assert marker is not None
        assert marker.end_url == 5

    def test_not_at_bracket(self) -> None:
        assert _find_link("a[b](c)") is None

    def test_respects_range_bound(self) -> None:
        """Lookahead never looks past the exclusive end of its range."""
        tokens = scan("[a](b)")
        assert find_link(tokens, 0, 4) is None

    def test_start_at_offset(self) -> None:
        marker = _find_link("x [y](z)", start=2)
        assert marker == LinkMarker(start_text=3, end_text=4, start_url=6, end_url=7)


class TestFindStrong:
    """Test ``**strong**`` boundary detection."""

    def test_simple_strong(self) -> None:
        marker = _find_strong("**x**")
        assert marker == InlineMarker(start=2, end=3, stop=5)
        assert marker.body_range == (2, 3)

    def test_single_star_never_opens(self) -> None:
        assert _find_strong("*x*") is None

    def test_space_after_opener(self) -> None:
        assert _find_strong("** x**") is None

    def test_space_before_closer(self) -> None:
        assert _find_strong("**x **") is None

    def test_empty_body(self) -> None:
        assert _find_strong("****") is None

    def test_unclosed(self) -> None:
        assert _find_strong("**x") is None
        assert _find_strong("**x*") is None

    def test_single_newline_allowed(self) -> None:
        assert _find_strong("**a\nb**") == InlineMarker(start=2, end=5, stop=7)

    def test_blank_line_aborts(self) -> None:
        assert _find_strong("**a\n\nb**") is None

    def test_earliest_closer_wins(self) -> None:
        assert _find_strong("**a**b**") == InlineMarker(start=2, end=3, stop=5)

    def test_punctuation_before_closer(self) -> None:
        """Only a space or newline blocks a closer, punctuation does not."""
        assert _find_strong("**try!**") == InlineMarker(start=2, end=4, stop=6)

    def test_link_inside_strong(self) -> None:
        marker = _find_strong("**[a](b)**")
        assert marker == InlineMarker(start=2, end=8, stop=10)


class TestFindEmphasis:
    """Test ``_emphasis_`` boundary detection."""

    def test_simple_emphasis(self) -> None:
        assert _find_emphasis("_a_") == InlineMarker(start=1, end=2, stop=3)

    def test_space_after_opener(self) -> None:
        assert _find_emphasis("_ a_") is None

    def test_space_before_closer(self) -> None:
        assert _find_emphasis("_a _") is None

    def test_doubled_delimiter(self) -> None:
        assert _find_emphasis("__a__") is None

    def test_intraword_opener(self) -> None:
        """An underscore right after a word never opens."""
        assert _find_emphasis("snake_case_name", start=1) is None

    def test_intraword_closer_skipped(self) -> None:
        """An underscore right before a word never closes."""
        assert _find_emphasis("_a_b") is None
        assert _find_emphasis("_a_b_") == InlineMarker(start=1, end=4, stop=5)

    def test_blank_line_aborts(self) -> None:
        assert _find_emphasis("_a\n\nb_") is None


class TestFindHeading:
    """Test ATX heading opener detection."""

    def test_levels_one_to_six(self) -> None:
        for level in range(1, 7):
            assert _find_heading("#" * level + " x") == level

    def test_seven_hashes(self) -> None:
        assert _find_heading("####### x") is None

    def test_no_space(self) -> None:
        assert _find_heading("#x") is None
        assert _find_heading("##") is None

    def test_not_column_one(self) -> None:
        assert _find_heading(" # x", start=1) is None
        assert _find_heading("a # x", start=2) is None

    def test_after_newline(self) -> None:
        assert _find_heading("a\n## b", start=2) == 2


class TestDelimiterIndex:
    """One index answers every opener of a range."""

    def test_doc_example(self) -> None:
        tokens = scan("[a](b) **c**")
        index = DelimiterIndex(tokens, 0, len(tokens))
        assert index.link(0) == LinkMarker(start_text=1, end_text=2, start_url=4, end_url=5)
        assert index.strong(7) == InlineMarker(start=9, end=10, stop=12)

    def test_every_opener_matches_single_lookup(self) -> None:
        tokens = scan("x [a](b) [c\n**d** _e_ **f\n\n[g](h) _i")
        end = len(tokens)
        index = DelimiterIndex(tokens, 0, end)
        for start in range(end):
            assert index.link(start) == find_link(tokens, start, end)
            assert index.strong(start) == find_strong(tokens, start, end)
            assert index.emphasis(start) == find_emphasis(tokens, start, end)

    def test_subrange_end_is_respected(self) -> None:
        """A closer past the range end does not count."""
        tokens = scan("**a** [b](c)")
        index = DelimiterIndex(tokens, 0, 4)
        assert index.strong(0) is None
        assert DelimiterIndex(tokens, 6, 12).link(6) == LinkMarker(7, 8, 10, 11)

    def test_subrange_start_offsets_tables(self) -> None:
        tokens = scan("zz [a](b)")
        index = DelimiterIndex(tokens, 2, len(tokens))
        assert index.link(2) == LinkMarker(3, 4, 6, 7)

    def test_long_unclosed_bracket_run(self) -> None:
        tokens = scan("[" * 5000)
        index = DelimiterIndex(tokens, 0, len(tokens))
        assert all(index.link(start) is None for start in range(5000))

    def test_long_unclosed_strong_run(self) -> None:
        tokens = scan("**a " * 2000)
        index = DelimiterIndex(tokens, 0, len(tokens))
        assert all(index.strong(start) is None for start in range(len(tokens)))

    def test_empty_range(self) -> None:
        tokens = scan("[")
        index = DelimiterIndex(tokens, 1, 1)
        assert index.link(1) is None
        assert index.strong(1) is None

    @given(st.text(alphabet="[]()*_ a1\n#", max_size=40))
    def test_shared_index_agrees_with_fresh_lookups(self, source: str) -> None:
        tokens = scan(source)
        end = len(tokens)
        index = DelimiterIndex(tokens, 0, end)
        for start in range(end):
            assert index.link(start) == find_link(tokens, start, end)
            assert index.strong(start) == find_strong(tokens, start, end)
            assert index.emphasis(start) == find_emphasis(tokens, start, end)
