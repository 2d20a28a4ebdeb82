"""Lexical vocabulary of the Gohan dialect.

The alphabet is small: fourteen single-codepoint symbols, one token per ASCII
digit, maximal TEXT runs for everything else, and a closing EOF. A token
keeps plain integers for its position; the SourceLocation object is only
built when someone asks for it, which for most tokens is never.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from gohan.location import SourceLocation


class TokenType(Enum):
    """Kinds of token the lexer emits."""

    EOF = auto()

    HASH = auto()  # #
    STAR = auto()  # *
    BANG = auto()  # !
    UNDERSCORE = auto()  # _
    DASH = auto()  # -
    DOT = auto()  # .
    BACKSLASH = auto()  # \
    LEFT_PAREN = auto()  # (
    RIGHT_PAREN = auto()  # )
    LEFT_BRACKET = auto()  # [
    RIGHT_BRACKET = auto()  # ]

    SPACE = auto()
    TAB = auto()
    NEWLINE = auto()

    DIGIT = auto()  # exactly one of 0-9
    TEXT = auto()


SYMBOL_TOKENS: dict[str, TokenType] = {
    "#": TokenType.HASH,
    "*": TokenType.STAR,
    "!": TokenType.BANG,
    "_": TokenType.UNDERSCORE,
    "-": TokenType.DASH,
    ".": TokenType.DOT,
    "\\": TokenType.BACKSLASH,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "[": TokenType.LEFT_BRACKET,
    "]": TokenType.RIGHT_BRACKET,
    " ": TokenType.SPACE,
    "\t": TokenType.TAB,
    "\n": TokenType.NEWLINE,
}

# Not str.isdigit(): Arabic-Indic and other Unicode digits stay TEXT
DIGITS = frozenset("0123456789")

TEXT_BREAKERS = frozenset(SYMBOL_TOKENS) | DIGITS


@dataclass(frozen=True, slots=True)
class Token:
    """One lexeme: its kind, its text, and where it sits in the source.

    ``_start_offset``/``_end_offset`` delimit ``value`` inside the source
    string, so ``source[t._start_offset:t._end_offset] == t.value``. Line and
    column are 1-based; the column counts codepoints.
    """

    type: TokenType
    value: str
    _lineno: int
    _col: int
    _start_offset: int
    _end_offset: int
    _source_file: str | None = None
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        cached = self._location_cache
        if cached is None:
            cached = SourceLocation(
                self._lineno,
                self._col,
                self._start_offset,
                self._end_offset,
                self._source_file,
            )
            # Every thread computes an equal value, so a racing write is harmless
            object.__setattr__(self, "_location_cache", cached)
        return cached

    @property
    def literal(self) -> str:
        """Text emitted when this token degrades to a Text node."""
        return self.value

    @property
    def lineno(self) -> int:
        return self._lineno

    @property
    def col(self) -> int:
        return self._col

    def __repr__(self) -> str:
        shown = self.value if len(self.value) <= 20 else self.value[:17] + "..."
        return f"Token({self.type.name}, {shown!r}, {self._lineno}:{self._col})"
