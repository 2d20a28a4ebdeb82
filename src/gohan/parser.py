"""The Gohan parser: a token list in, a tuple of blocks out.

Three mixins split the grammar:
- `TokenNavigationMixin`: the cursor (advance, rewind, match, expect)
- `InlineParsingMixin`: text, digits, line breaks, strong, emphasis, links
- `BlockParsingMixin`: headings and paragraphs

Link text, link urls and strong/emphasis bodies are parsed by a second
Parser pointed at a sub-range of the same token list with ``inline_only``
set, so a nested construct can never produce a block.

Settings come from the active ParseConfig (see gohan.config); sub-parsers
run in the same context and see the same settings.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from gohan.config import ParseConfig, get_parse_config
from gohan.errors import ParseError
from gohan.lexer import scan
from gohan.nodes import Block, Inline
from gohan.parsing import (
    BlockParsingMixin,
    DelimiterIndex,
    InlineParsingMixin,
    TokenNavigationMixin,
)
from gohan.tokens import Token


class Parser(
    TokenNavigationMixin,
    InlineParsingMixin,
    BlockParsingMixin,
):
    """Single-use recursive descent parser.

    Usage:
        >>> Parser("# Hello\\n\\nWorld").parse()
        (Heading(..., level=1, ...), Paragraph(...))

        >>> from gohan.lexer import scan
        >>> Parser.from_tokens(scan("**hi**")).parse()
        (Paragraph(..., children=(Strong(...),)),)

    An instance holds a cursor and must not be shared between threads. The
    tuple it returns is immutable and may be.
    """

    __slots__ = (
        "_source",
        "_source_file",
        "_tokens",
        "_start",
        "_end",
        "_pos",
        "_current",
        # Closer tables for this range, built on the first delimiter
        "_delimiters",
        # Set on sub-parsers: every ``#`` is plain text
        "_inline_only",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Prepare to parse ``source``; lexing happens on the first parse().

        Args:
            source: Markdown text
            source_file: Recorded on tokens and in ParseError messages
        """
        self._source = source
        self._source_file = source_file
        self._tokens: Sequence[Token] = ()
        self._start = 0
        self._end = 0
        self._pos = 0
        self._current: Token | None = None
        self._delimiters: DelimiterIndex | None = None
        self._inline_only = False

    @classmethod
    def from_tokens(
        cls,
        tokens: Sequence[Token],
        start: int = 0,
        end: int | None = None,
        *,
        source_file: str | None = None,
        inline_only: bool = False,
    ) -> Parser:
        """Parser over ``tokens[start:end]`` of an already-scanned list.

        Args:
            tokens: Output of scan()
            start: First index to parse
            end: Index to stop before; the whole list when None
            source_file: Used in ParseError messages
            inline_only: Never stop an inline run at a heading opener
        """
        parser = cls("", source_file)
        parser._load(tokens, start, end)
        parser._inline_only = inline_only
        return parser

    def _load(self, tokens: Sequence[Token], start: int, end: int | None) -> None:
        self._tokens = tokens
        self._start = start
        self._end = len(tokens) if end is None else end
        self._delimiters = None
        self._rewind(start)

    @property
    def _config(self) -> ParseConfig:
        return get_parse_config()

    @property
    def _emphasis_enabled(self) -> bool:
        return self._config.emphasis_enabled

    @property
    def _text_transformer(self) -> Callable[[str], str] | None:
        return self._config.text_transformer

    def parse(self) -> tuple[Block, ...]:
        """Parse every block in the range.

        Raises:
            ParseError: A block step consumed no tokens. Each step always
                consumes at least one, so this means the parser has a bug.
        """
        if not self._tokens:
            self._load(scan(self._source, self._source_file), 0, None)

        found: list[Block] = []
        while not self._at_end():
            before = self._pos
            block = self._parse_block()
            if block is not None:
                found.append(block)
            elif self._pos == before:
                token = self._current
                raise ParseError(
                    f"no progress at {token.type.name}",
                    token.lineno,
                    token.col,
                    self._source_file,
                )
        return tuple(found)

    def _parse_inline_range(self, start: int, end: int) -> tuple[Inline, ...]:
        """Inline nodes for ``tokens[start:end]``, parsed by a sub-parser."""
        nested = Parser.from_tokens(
            self._tokens,
            start,
            end,
            source_file=self._source_file,
            inline_only=True,
        )
        return nested._collect_inline()
