"""Cursor over a slice of a shared token list.

A parser only ever sees ``tokens[start:_end]``. Nested constructs get a new
cursor over a narrower slice of the same list instead of a copy, which is
what makes sub-parsing cheap.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gohan.errors import ParseError
from gohan.tokens import Token, TokenType

if TYPE_CHECKING:
    from collections.abc import Sequence


class TokenNavigationMixin:
    """Movement and matching over the host's token range.

    Required Host Attributes:
        - _tokens: Sequence[Token]
        - _end: int (exclusive bound of the parsed range)
        - _pos: int
        - _current: Token | None (None once _pos reaches _end)
        - _source_file: str | None

    """

    _tokens: Sequence[Token]
    _end: int
    _pos: int
    _current: Token | None
    _source_file: str | None

    def _at_end(self) -> bool:
        """True past the range end or on the EOF token."""
        return self._current is None or self._current.type is TokenType.EOF

    def _advance(self) -> Token | None:
        self._rewind(self._pos + 1)
        return self._current

    def _rewind(self, pos: int) -> None:
        """Move to absolute index ``pos``, in either direction."""
        self._pos = pos
        self._current = self._tokens[pos] if pos < self._end else None

    def _peek(self, offset: int = 1) -> Token | None:
        """Token ``offset`` places ahead, or None outside the range."""
        index = self._pos + offset
        return self._tokens[index] if index < self._end else None

    def _check(self, token_type: TokenType, offset: int = 0) -> bool:
        token = self._peek(offset)
        return token is not None and token.type is token_type

    def _match(self, token_type: TokenType) -> bool:
        """Consume the current token when it has ``token_type``."""
        if self._at_end() or not self._check(token_type):
            return False
        self._advance()
        return True

    def _expect(self, token_type: TokenType) -> Token:
        """Consume a token that dispatch has already identified.

        Raises:
            ParseError: The current token has another type. Dispatch and
                _expect disagreeing is a parser bug, not bad input.
        """
        token = self._current
        if token is None:
            raise ParseError(
                f"expected {token_type.name}, found end of range",
                source_file=self._source_file,
            )
        if token.type is not token_type:
            raise ParseError(
                f"expected {token_type.name}, found {token.type.name}",
                token.lineno,
                token.col,
                self._source_file,
            )
        self._advance()
        return token

    def _skip_newlines(self) -> None:
        while self._current is not None and self._current.type is TokenType.NEWLINE:
            self._advance()
