"""Gohan exceptions.

Markdown input never raises: anything the grammar does not accept becomes
literal text. These exceptions signal a bug in the parser, or a tree that
was assembled by hand with a node in the wrong place.
"""

from __future__ import annotations


class GohanError(Exception):
    """Root of the Gohan exception hierarchy."""


class ParseError(GohanError):
    """The parser broke one of its own invariants.

    Every delimiter is confirmed by a lookahead before it is consumed, so no
    input reaches this. The message is prefixed with ``file:line:col`` for
    whatever parts of the position are known.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        position = [source_file] if source_file else []
        if lineno is not None:
            position.append(str(lineno))
            if col_offset is not None:
                position.append(str(col_offset))
        prefix = ":".join(position)
        super().__init__(f"{prefix} {message}" if prefix else message)


class RenderError(GohanError):
    """A node reached the renderer in a position it cannot occupy.

    Examples: a Heading inside a Paragraph, a Text directly under the
    Document, or a heading level outside 1-6. Parsed trees never contain
    one; hand-built trees can.
    """
