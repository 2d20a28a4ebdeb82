"""Inline parsing: text, digits, line breaks, links, strong and emphasis.

Dispatch is on the current token. A delimiter that may open a construct
(``[``, ``**``, and ``_`` when emphasis is enabled) is looked up in the
parser's DelimiterIndex first. When no closer exists, the single delimiter
token becomes literal text and the tokens after it go through ordinary
dispatch again.
"""

from __future__ import annotations

from gohan.nodes import Digit, Emphasis, Inline, LineBreak, Link, Strong, Text
from gohan.parsing.markers import DelimiterIndex, find_heading
from gohan.tokens import Token, TokenType
from gohan.utils.logger import get_logger

logger = get_logger(__name__)


class InlineParsingMixin:
    """Inline content parsing.

    Required Host Attributes:
        - _tokens: Sequence[Token]
        - _start: int, _end: int, _pos: int
        - _current: Token | None
        - _delimiters: DelimiterIndex | None
        - _inline_only: bool
        - _emphasis_enabled: bool
        - _text_transformer: Callable[[str], str] | None

    Required Host Methods:
        - _at_end(), _advance(), _rewind(pos), _check(type, offset), _expect(type)
        - _parse_inline_range(start, end) -> tuple[Inline, ...]

    """

    def _collect_inline(self) -> tuple[Inline, ...]:
        """Inline nodes up to a blank line, a heading or the end of the range."""
        nodes: list[Inline] = []
        while (node := self._parse_inline_node()) is not None:
            nodes.append(node)
        return tuple(nodes)

    def _parse_inline_node(self) -> Inline | None:
        """One inline node, or None (consuming nothing) where the run stops.

        The run stops at the end of the range, at a blank line, and at a
        ``#`` that opens a heading on a new line.
        """
        if self._at_end():
            return None

        token = self._current
        match token.type:
            case TokenType.NEWLINE:
                if self._check(TokenType.NEWLINE, 1):
                    return None
                self._advance()
                return LineBreak(location=token.location)
            case TokenType.STAR:
                return self._maybe_strong()
            case TokenType.LEFT_BRACKET:
                return self._maybe_link()
            case TokenType.UNDERSCORE if self._emphasis_enabled:
                return self._maybe_emphasis()
            case TokenType.HASH if self._starts_heading():
                return None
            case TokenType.DIGIT:
                self._advance()
                return Digit(location=token.location, content=token.value)
            case TokenType.TEXT:
                self._advance()
                return Text(location=token.location, content=self._transform_text(token.value))
            case _:
                self._advance()
                return Text(location=token.location, content=token.literal)

    def _starts_heading(self) -> bool:
        if self._inline_only:
            return False
        return find_heading(self._tokens, self._pos, self._end) is not None

    def _transform_text(self, content: str) -> str:
        transformer = self._text_transformer
        return content if transformer is None else transformer(content)

    def _delimiter_index(self) -> DelimiterIndex:
        """The closer tables for this parser's range, built on first use."""
        index = self._delimiters
        if index is None:
            index = self._delimiters = DelimiterIndex(self._tokens, self._start, self._end)
        return index

    def _maybe_link(self) -> Inline:
        opener = self._expect(TokenType.LEFT_BRACKET)
        marker = self._delimiter_index().link(self._pos - 1)
        if marker is None:
            return _as_text(opener)

        children = self._parse_inline_range(*marker.text_range)
        url = self._parse_inline_range(*marker.url_range)
        self._rewind(marker.stop)
        return Link(location=opener.location, children=children, url=url)

    def _maybe_strong(self) -> Inline:
        opener = self._expect(TokenType.STAR)
        marker = self._delimiter_index().strong(self._pos - 1)
        if marker is None:
            return _as_text(opener)

        children = self._parse_inline_range(*marker.body_range)
        self._rewind(marker.stop)
        return Strong(location=opener.location, children=children)

    def _maybe_emphasis(self) -> Inline:
        opener = self._expect(TokenType.UNDERSCORE)
        marker = self._delimiter_index().emphasis(self._pos - 1)
        if marker is None:
            return _as_text(opener)

        children = self._parse_inline_range(*marker.body_range)
        self._rewind(marker.stop)
        return Emphasis(location=opener.location, children=children)


def _as_text(opener: Token) -> Text:
    """Keep an unmatched delimiter as literal text."""
    logger.debug(
        "No closing sequence for %r at %d:%d, treating it as text",
        opener.value,
        opener.lineno,
        opener.col,
    )
    return Text(location=opener.location, content=opener.literal)
