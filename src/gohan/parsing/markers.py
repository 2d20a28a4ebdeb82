"""Lookahead for inline delimiters that may or may not close.

A ``[``, ``**`` or ``_`` is read optimistically as the start of a link,
strong or emphasis span. Before the parser commits, it asks this module for
the token ranges of the whole construct, or None when no well-formed closing
sequence exists before the paragraph ends. The parser then either sub-parses
the ranges and jumps past the construct, or keeps the delimiter as text.

Rules shared by every construct:
- The earliest well-formed closing sequence wins.
- A blank line (two consecutive NEWLINE tokens) or EOF ends the search, so
  no inline construct ever spans a paragraph break.

Finding the earliest closer by walking forward costs O(n) per opener, and a
paragraph of n unclosed openers would cost O(n^2). DelimiterIndex instead
records, for every position of a token range, where the next closer of each
kind and the next paragraph boundary are. Both are built once per range in
one right-to-left pass, after which every opener is answered in O(1).

Nothing here mutates the token list, and every result is frozen.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from gohan.tokens import Token, TokenType

# Tokens that may not follow an opener or precede a closer
_NON_FLANKING = frozenset({TokenType.SPACE, TokenType.NEWLINE, TokenType.EOF})

# Tokens that make an underscore intraword
_WORD_TOKENS = frozenset({TokenType.TEXT, TokenType.DIGIT})


@dataclass(frozen=True, slots=True)
class LinkMarker:
    """Token boundaries of a complete ``[text](url)`` link.

    Attributes:
        start_text: Index of the first token after ``[``
        end_text: Index of the ``]`` token
        start_url: Index of the first token after ``(``
        end_url: Index of the ``)`` token

    """

    start_text: int
    end_text: int
    start_url: int
    end_url: int

    @property
    def text_range(self) -> tuple[int, int]:
        return self.start_text, self.end_text

    @property
    def url_range(self) -> tuple[int, int]:
        return self.start_url, self.end_url

    @property
    def stop(self) -> int:
        """Index of the first token after the closing ``)``."""
        return self.end_url + 1


@dataclass(frozen=True, slots=True)
class InlineMarker:
    """Token boundaries of a delimited span such as ``**body**``.

    ``start:end`` is the body; ``stop`` is the first token after the closer.
    """

    start: int
    end: int
    stop: int

    @property
    def body_range(self) -> tuple[int, int]:
        return self.start, self.end


class DelimiterIndex:
    """Next-closer tables for ``tokens[start:end]``.

    Each table maps a position to the smallest index at or after it where
    some condition holds, or to ``end`` when none does. Tables are built on
    first use, so a range with no ``[`` never pays for the bracket table.

    Usage:
        >>> from gohan.lexer import scan
        >>> tokens = scan("[a](b) **c**")
        >>> index = DelimiterIndex(tokens, 0, len(tokens))
        >>> index.link(0)
        LinkMarker(start_text=1, end_text=2, start_url=4, end_url=5)
        >>> index.strong(7)
        InlineMarker(start=9, end=10, stop=12)

    An instance is bound to one token list and one range; a parser keeps
    one for its own range and never shares it.
    """

    __slots__ = ("_tokens", "_start", "_end", "_tables")

    def __init__(self, tokens: Sequence[Token], start: int, end: int) -> None:
        self._tokens = tokens
        self._start = start
        self._end = end
        self._tables: dict[object, list[int]] = {}

    def _next(self, key: object, holds: Callable[[int], bool], index: int) -> int:
        table = self._tables.get(key)
        if table is None:
            table = self._tables[key] = self._build(holds)
        if index >= self._end:
            return self._end
        return table[index - self._start]

    def _build(self, holds: Callable[[int], bool]) -> list[int]:
        start, end = self._start, self._end
        table = [end] * (end - start)
        found = end
        for index in range(end - 1, start - 1, -1):
            if holds(index):
                found = index
            table[index - start] = found
        return table

    def _boundary(self, index: int) -> int:
        """First EOF or blank line at or after ``index``."""
        return self._next("boundary", self._is_boundary, index)

    def _is_boundary(self, index: int) -> bool:
        token_type = self._tokens[index].type
        if token_type is TokenType.EOF:
            return True
        return (
            token_type is TokenType.NEWLINE
            and index + 1 < self._end
            and self._tokens[index + 1].type is TokenType.NEWLINE
        )

    def _next_of_type(self, token_type: TokenType, index: int) -> int:
        tokens = self._tokens
        return self._next(token_type, lambda i: tokens[i].type is token_type, index)

    def link(self, start: int) -> LinkMarker | None:
        """Link whose ``[`` is at ``start``.

        The first ``]`` after the opener closes the text and must be followed
        directly by ``(``. The first ``)`` after that closes the url. Text and
        url may both be empty.
        """
        tokens, end = self._tokens, self._end
        if start >= end or tokens[start].type is not TokenType.LEFT_BRACKET:
            return None

        end_text = self._next_of_type(TokenType.RIGHT_BRACKET, start + 1)
        if end_text >= self._boundary(start + 1):
            return None
        if end_text + 1 >= end or tokens[end_text + 1].type is not TokenType.LEFT_PAREN:
            return None

        start_url = end_text + 2
        end_url = self._next_of_type(TokenType.RIGHT_PAREN, start_url)
        if end_url >= self._boundary(start_url):
            return None
        return LinkMarker(start + 1, end_text, start_url, end_url)

    def strong(self, start: int) -> InlineMarker | None:
        """Strong span whose first ``*`` is at ``start``.

        Opens on ``**`` followed by a token other than space, newline or EOF.
        Closes on the earliest later ``**`` not directly preceded by a space
        or newline, so the body is never empty.
        """
        tokens, end = self._tokens, self._end
        if (
            start + 2 >= end
            or tokens[start].type is not TokenType.STAR
            or tokens[start + 1].type is not TokenType.STAR
        ):
            return None

        body_start = start + 2
        if tokens[body_start].type in _NON_FLANKING:
            return None

        closer = self._next("strong", self._closes_strong, body_start + 1)
        if closer >= self._boundary(body_start + 1):
            return None
        return InlineMarker(body_start, closer, closer + 2)

    def _closes_strong(self, index: int) -> bool:
        tokens = self._tokens
        return (
            index > self._start
            and index + 1 < self._end
            and tokens[index].type is TokenType.STAR
            and tokens[index + 1].type is TokenType.STAR
            and tokens[index - 1].type not in _NON_FLANKING
        )

    def emphasis(
        self,
        start: int,
        delimiter: TokenType = TokenType.UNDERSCORE,
    ) -> InlineMarker | None:
        """Single-delimiter span such as ``_body_`` starting at ``start``.

        Flanking works as for strong. On top of that, an opener directly after
        a word and a closer directly before one are intraword
        (``snake_case_name``) and never match.
        """
        tokens, end = self._tokens, self._end
        if start + 1 >= end or tokens[start].type is not delimiter:
            return None
        if start > 0 and tokens[start - 1].type in _WORD_TOKENS:
            return None

        body_start = start + 1
        first = tokens[body_start].type
        if first in _NON_FLANKING or first is delimiter:
            return None

        def closes(index: int) -> bool:
            return (
                index > self._start
                and tokens[index].type is delimiter
                and tokens[index - 1].type not in _NON_FLANKING
                and not (index + 1 < end and tokens[index + 1].type in _WORD_TOKENS)
            )

        closer = self._next(("emphasis", delimiter), closes, body_start + 1)
        if closer >= self._boundary(body_start + 1):
            return None
        return InlineMarker(body_start, closer, closer + 1)


def find_link(tokens: Sequence[Token], start: int, end: int) -> LinkMarker | None:
    """Find the ``[text](url)`` link whose ``[`` is at ``start``.

    Args:
        tokens: Token list produced by the lexer
        start: Index of the candidate ``[``
        end: Exclusive bound of the range being parsed

    Returns:
        LinkMarker for a complete link, or None

    Example:
        >>> from gohan.lexer import scan
        >>> find_link(scan("[a](b)"), 0, 7)
        LinkMarker(start_text=1, end_text=2, start_url=4, end_url=5)
    """
    return DelimiterIndex(tokens, start, end).link(start)


def find_strong(tokens: Sequence[Token], start: int, end: int) -> InlineMarker | None:
    """Find the ``**body**`` span whose first ``*`` is at ``start``."""
    return DelimiterIndex(tokens, start, end).strong(start)


def find_emphasis(
    tokens: Sequence[Token],
    start: int,
    end: int,
    delimiter: TokenType = TokenType.UNDERSCORE,
) -> InlineMarker | None:
    """Find the ``_body_`` span whose delimiter is at ``start``."""
    return DelimiterIndex(tokens, start, end).emphasis(start, delimiter)


def find_heading(tokens: Sequence[Token], start: int, end: int) -> int | None:
    """Heading level of an ATX opener at ``start``, or None.

    An opener is one to six ``#`` starting at column 1, followed by a space.
    Each line has at most one column-1 ``#``, so the walk over the hash run
    stays linear overall.
    """
    if start >= end:
        return None
    first = tokens[start]
    if first.type is not TokenType.HASH or first.col != 1:
        return None

    index = start
    while index < end and tokens[index].type is TokenType.HASH:
        index += 1
    level = index - start

    if level <= 6 and index < end and tokens[index].type is TokenType.SPACE:
        return level
    return None
