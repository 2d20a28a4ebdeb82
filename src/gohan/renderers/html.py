"""HTML output for a Gohan Document.

Each render() call appends fragments to a fresh list and joins it once at
the end, so output is linear in the size of the tree and nothing is shared
between calls.

Text is written out verbatim; nothing is escaped.
"""

import logging

from gohan.errors import RenderError
from gohan.nodes import (
    Block,
    Digit,
    Document,
    Emphasis,
    Heading,
    Inline,
    LineBreak,
    Link,
    Paragraph,
    Strong,
    Text,
)

logger = logging.getLogger(__name__)


class HtmlRenderer:
    """Render a Document to a single HTML string with no separators.

    Mapping:
        Heading    -> <hN>...</hN>
        Paragraph  -> <p>...</p> (a trailing LineBreak is dropped)
        Strong     -> <strong>...</strong>
        Emphasis   -> <em>...</em>
        Link       -> <a href="url">text</a>
        Text/Digit -> verbatim
        LineBreak  -> <br>

    Usage:
        >>> from gohan import parse
        >>> HtmlRenderer().render(parse("## Title\\n\\nI'm a **paragraph**."))
        "<h2>Title</h2><p>I'm a <strong>paragraph</strong>.</p>"
    """

    __slots__ = ()

    def render(self, node: Document) -> str:
        """HTML for ``node``; the empty string for an empty document.

        Raises:
            RenderError: A hand-built tree has a node where it cannot go, or
                a heading level outside 1-6.
        """
        out: list[str] = []
        for child in node.children:
            self._render_block(child, out)
        return "".join(out)

    def _render_block(self, block: Block, out: list[str]) -> None:
        match block:
            case Heading(level=level) if not 1 <= level <= 6:
                logger.debug("Refusing to render heading level %r", level)
                raise RenderError(f"Heading level {level} is outside 1-6")
            case Heading():
                out.append(f"<h{block.level}>")
                self._render_inlines(block.children, out)
                out.append(f"</h{block.level}>")
            case Paragraph():
                children = block.children
                if children and isinstance(children[-1], LineBreak):
                    children = children[:-1]
                out.append("<p>")
                self._render_inlines(children, out)
                out.append("</p>")
            case _:
                logger.debug("Refusing to render %r as a block", block)
                raise RenderError(f"{type(block).__name__} cannot appear at block level")

    def _render_inlines(self, children: tuple[Inline, ...], out: list[str]) -> None:
        for child in children:
            self._render_inline(child, out)

    def _render_inline(self, node: Inline, out: list[str]) -> None:
        match node:
            case Text() | Digit():
                out.append(node.content)
            case Strong():
                out.append("<strong>")
                self._render_inlines(node.children, out)
                out.append("</strong>")
            case Emphasis():
                out.append("<em>")
                self._render_inlines(node.children, out)
                out.append("</em>")
            case Link():
                out.append('<a href="')
                self._render_inlines(node.url, out)
                out.append('">')
                self._render_inlines(node.children, out)
                out.append("</a>")
            case LineBreak():
                out.append("<br>")
            case _:
                logger.debug("Refusing to render %r inline", node)
                raise RenderError(f"{type(node).__name__} cannot appear in inline content")
