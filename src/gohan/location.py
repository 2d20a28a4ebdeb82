"""Positions in Markdown source.

Tokens and nodes both carry a SourceLocation. The parser reads only the
column (a heading must start at column 1); offsets exist so callers can slice
the original text back out of a token or node.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Where a token or node begins, plus the offsets it covers.

    ``lineno`` and ``col_offset`` start at 1. The column resets after each
    newline and advances once per codepoint, so ``"👍"`` is one column wide.
    ``offset``/``end_offset`` index into the source string.

    Examples:
            >>> str(SourceLocation(lineno=2, col_offset=5))
            '2:5'
            >>> str(SourceLocation(1, 1, source_file="notes.md"))
            'notes.md:1:1'
    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        position = f"{self.lineno}:{self.col_offset}"
        return f"{self.source_file}:{position}" if self.source_file else position

    def span_to(self, end: SourceLocation) -> SourceLocation:
        """Join this location with ``end`` into one covering both.

        A zero-width ``end`` (such as the EOF token) contributes its start
        offset.
        """
        return SourceLocation(
            self.lineno,
            self.col_offset,
            self.offset,
            end.end_offset or end.offset,
            self.source_file,
        )

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Placeholder (0:0) for nodes built by hand rather than parsed."""
        return cls(0, 0)
