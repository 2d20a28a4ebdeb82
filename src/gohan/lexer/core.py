"""Single-pass lexer with O(n) guaranteed performance.

Walks the source one codepoint at a time. Structural symbols and digits
become one-codepoint tokens; every other run of characters is merged into
a single TEXT token. Python strings index by codepoint, so multi-byte
characters can never be split.

No regex in the hot path. There is no error state: every codepoint is
classified by exactly one branch.

Thread Safety:
A Lexer is a one-shot cursor owned by whoever created it.

"""

from __future__ import annotations

from collections.abc import Iterator

from gohan.tokens import DIGITS, SYMBOL_TOKENS, TEXT_BREAKERS, Token, TokenType
from gohan.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer:
    """Position-tracking lexer for the Gohan Markdown dialect.

    Usage:
        >>> for token in Lexer("# Hi").tokenize():
        ...     print(token)
        Token(HASH, '#', 1:1)
        Token(SPACE, ' ', 1:2)
        Token(TEXT, 'Hi', 1:3)
        Token(EOF, '', 1:5)
    """

    __slots__ = (
        "_text",
        "_length",
        "_pos",
        "_lineno",
        "_col",
        "_source_file",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        self._text = source
        self._length = len(source)
        self._pos = 0
        self._lineno = 1
        self._col = 1
        self._source_file = source_file

    def tokenize(self) -> Iterator[Token]:
        """Yield every token, then exactly one EOF at the final position."""
        while self._pos < self._length:
            yield self._next_token()
        yield self._emit(TokenType.EOF, self._pos, self._lineno, self._col)

    def _next_token(self) -> Token:
        start, lineno, col = self._pos, self._lineno, self._col
        char = self._text[start]

        symbol = SYMBOL_TOKENS.get(char)
        if symbol is not None:
            self._step()
            return self._emit(symbol, start, lineno, col)

        if char in DIGITS:
            self._step()
            return self._emit(TokenType.DIGIT, start, lineno, col)

        self._skip_text()
        return self._emit(TokenType.TEXT, start, lineno, col)

    def _skip_text(self) -> None:
        """Move past a run of plain characters.

        Newline is a breaker, so a run stays on one line and only the column
        changes.
        """
        text, length = self._text, self._length
        end = self._pos
        while end < length and text[end] not in TEXT_BREAKERS:
            end += 1
        self._col += end - self._pos
        self._pos = end

    def _step(self) -> None:
        """Consume one codepoint, starting a new line after ``\\n``."""
        if self._text[self._pos] == "\n":
            self._lineno += 1
            self._col = 1
        else:
            self._col += 1
        self._pos += 1

    def _emit(self, token_type: TokenType, start: int, lineno: int, col: int) -> Token:
        """Token for ``source[start:current position]``."""
        return Token(
            token_type,
            self._text[start : self._pos],
            lineno,
            col,
            start,
            self._pos,
            self._source_file,
        )


def scan(source: str, source_file: str | None = None) -> list[Token]:
    """Tokenize source into a list of positioned tokens.

    Args:
        source: Markdown source text
        source_file: Optional source file path recorded on each token

    Returns:
        List of tokens ending with exactly one EOF token

    Example:
        >>> [t.type.name for t in scan("**1**")]
        ['STAR', 'STAR', 'DIGIT', 'STAR', 'STAR', 'EOF']
    """
    tokens = list(Lexer(source, source_file).tokenize())
    logger.debug("Scanned %d tokens from %d characters", len(tokens), len(source))
    return tokens
