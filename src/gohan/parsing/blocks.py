"""Block-level parsing for Gohan parser.

Handles the two block constructs of the dialect: ATX headings and
paragraphs. Block boundaries are blank lines (two consecutive NEWLINE
tokens) and ``#`` runs at column 1.

Thread Safety:
All methods use instance-local state only.

"""

from __future__ import annotations

from gohan.nodes import Block, Heading, Paragraph
from gohan.tokens import TokenType


class BlockParsingMixin:
    """Block parsing methods.

    Required Host Methods:
        - _at_end(), _match(type), _rewind(pos), _skip_newlines()
        - _collect_inline() -> tuple[Inline, ...]

    """

    def _parse_block(self) -> Block | None:
        """Parse the next block, skipping leading newlines.

        Returns None at the end of input or when no content was found.
        """
        self._skip_newlines()
        if self._at_end():
            return None

        token = self._current
        if token.type is TokenType.HASH and token.col == 1:
            heading = self._maybe_heading()
            if heading is not None:
                return heading

        return self._maybe_paragraph()

    def _maybe_heading(self) -> Heading | None:
        """Parse ``#`` to ``######`` followed by a space as a heading.

        Any other hash run is rewound so it re-enters the stream as literal
        paragraph text.
        """
        location = self._current.location
        heading_level = 0
        while self._match(TokenType.HASH):
            heading_level += 1

        if 1 <= heading_level <= 6 and self._match(TokenType.SPACE):
            return Heading(
                location=location,
                level=heading_level,  # type: ignore[arg-type]
                children=self._collect_inline(),
            )

        self._rewind(self._pos - heading_level)
        return None

    def _maybe_paragraph(self) -> Paragraph | None:
        """Parse inline content up to the next blank line as a paragraph.

        An empty paragraph is never emitted. Only called by _parse_block, which
        has already checked that a token remains.
        """
        self._skip_newlines()
        location = self._current.location
        children = self._collect_inline()
        if not children:
            return None
        return Paragraph(location=location, children=children)
