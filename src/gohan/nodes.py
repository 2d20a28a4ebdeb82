"""AST node classes produced by the Gohan parser.

Tree shape::

    Document
    └── Block: Heading | Paragraph
        └── Inline: Text | Digit | Strong | Emphasis | Link | LineBreak
            (Strong, Emphasis and Link nest further Inline nodes)

Only a Document holds blocks, and blocks never nest. A Link carries two
inline sequences: the visible text and the destination.

Every node is a frozen slotted dataclass whose first field is the location
of the token it started at. The parser builds children before parents, so a
finished tree is acyclic and can be shared between threads as-is.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from gohan.location import SourceLocation


@dataclass(frozen=True, slots=True)
class Node:
    """Common base: a position in the source."""

    location: SourceLocation


# Inline nodes


@dataclass(frozen=True, slots=True)
class Text(Node):
    """A run of literal characters.

    Also stands in for any delimiter (``[``, ``*``, ``#``...) that did not
    open a construct.
    """

    content: str


@dataclass(frozen=True, slots=True)
class Digit(Node):
    """One ASCII digit. Consecutive digits render back to back."""

    content: str


@dataclass(frozen=True, slots=True)
class Emphasis(Node):
    """``_body_``, rendered as ``<em>``. Only built when emphasis is enabled."""

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Strong(Node):
    """``**body**``, rendered as ``<strong>``."""

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Link(Node):
    """``[children](url)``, rendered as ``<a href="url">children</a>``."""

    children: tuple[Inline, ...]
    url: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class LineBreak(Node):
    """A lone newline inside a block."""


type Inline = Text | Digit | Emphasis | Strong | Link | LineBreak


# Block nodes


@dataclass(frozen=True, slots=True)
class Heading(Node):
    """``#`` to ``######`` at column 1, a space, then content up to a blank line."""

    level: Literal[1, 2, 3, 4, 5, 6]
    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """Inline content up to a blank line or the next heading."""

    children: tuple[Inline, ...]


type Block = Heading | Paragraph


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root of a parse: the ordered top-level blocks."""

    children: tuple[Block, ...]
