"""Lexer for the Gohan Markdown dialect.

Converts raw text into a flat, ordered sequence of positioned tokens.
The lexer knows nothing about grammar: ``#`` is a HASH token whether or
not it starts a heading.

Usage:
    >>> from gohan.lexer import Lexer
    >>> for token in Lexer("a\\n1").tokenize():
    ...     print(token)
Token(TEXT, 'a', 1:1)
Token(NEWLINE, '\\n', 1:2)
Token(DIGIT, '1', 2:1)
Token(EOF, '', 2:2)

"""

from gohan.lexer.core import Lexer, scan

__all__ = ["Lexer", "scan"]
