"""Gohan: a small, total Markdown-to-HTML compiler.

The dialect is deliberately narrow: ATX headings, paragraphs, line breaks,
**strong**, [links](url), and _emphasis_ when switched on. Any input is
accepted; a delimiter that never closes is kept as literal text.

Quick Start:
    >>> from gohan import render_html
    >>> render_html("## Title\\n\\nI'm a **paragraph**.")
    "<h2>Title</h2><p>I'm a <strong>paragraph</strong>.</p>"

The three stages are public too:
    >>> from gohan import scan, parse_tokens, parse, render
    >>> parse_tokens(scan("[a](b)")) == parse("[a](b)").children
    True
    >>> render(parse("[a](b)"))
    '<p><a href="b">a</a></p>'

and Markdown bundles settings with both ends:
    >>> Markdown(emphasis_enabled=True)("_hi_")
    '<p><em>hi</em></p>'

Nothing is escaped on the way out, so untrusted input must be escaped by
the caller.
"""

from collections.abc import Callable, Iterable, Sequence

from gohan.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from gohan.errors import GohanError, ParseError, RenderError
from gohan.lexer import Lexer, scan
from gohan.location import SourceLocation
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
from gohan.parser import Parser
from gohan.renderers.html import HtmlRenderer
from gohan.renderers.protocol import ASTRenderer
from gohan.serialization import (
    from_dict,
    from_json,
    to_dict,
    to_json,
    tokens_from_json,
    tokens_to_json,
)
from gohan.tokens import Token, TokenType

__version__ = "0.1.0"


def parse(source: str, *, source_file: str | None = None) -> Document:
    """Scan and parse ``source`` with the settings active in this context.

    The Document's location covers the whole source, from the first token
    to EOF.

    Example:
        >>> parse("# Hello **World**").children[0].level
        1
    """
    tokens = scan(source, source_file)
    blocks = Parser.from_tokens(tokens, source_file=source_file).parse()
    loc = tokens[0].location.span_to(tokens[-1].location)
    return Document(location=loc, children=blocks)


def parse_tokens(tokens: Sequence[Token]) -> tuple[Block, ...]:
    """Blocks for a token list that was scanned earlier (see scan())."""
    return Parser.from_tokens(tokens).parse()


def render(doc: Document) -> str:
    """HTML for a Document, as produced by HtmlRenderer.

    Example:
        >>> render(parse("# Hello"))
        '<h1>Hello</h1>'
    """
    return HtmlRenderer().render(doc)


def render_html(markdown: str) -> str:
    """Markdown text in, HTML text out.

    Defined for every string, including the empty one, and the same input
    always gives the same output.
    """
    return render(parse(markdown))


class Markdown:
    """Parser settings and a renderer, bundled for repeated use.

    Usage:
        >>> md = Markdown()
        >>> md("# Hello **World**")
        '<h1>Hello <strong>World</strong></h1>'
        >>> md.parse("## Heading").children[0].level
        2

    The settings are installed in a ContextVar only for the duration of each
    call, so several instances with different settings can be used from
    different threads at once.
    """

    __slots__ = ("_config", "_renderer")

    def __init__(
        self,
        *,
        emphasis_enabled: bool = False,
        text_transformer: Callable[[str], str] | None = None,
    ) -> None:
        """Build the immutable config once; every call reuses it.

        Args:
            emphasis_enabled: Parse ``_text_`` as Emphasis
            text_transformer: Applied to the content of every Text node
        """
        self._config = ParseConfig(
            emphasis_enabled=emphasis_enabled,
            text_transformer=text_transformer,
        )
        self._renderer = HtmlRenderer()

    def __call__(self, source: str) -> str:
        return self._renderer.render(self.parse(source))

    def parse(self, source: str, *, source_file: str | None = None) -> Document:
        """Document for ``source`` under this instance's settings."""
        with parse_config_context(self._config):
            return parse(source, source_file=source_file)

    def parse_many(
        self,
        sources: Iterable[str],
        *,
        source_file: str | None = None,
    ) -> list[Document]:
        """Documents for several sources, installing the settings once.

        Example:
            >>> [len(d.children) for d in Markdown().parse_many(["# a", "b\\n\\nc"])]
            [1, 2]
        """
        with parse_config_context(self._config):
            return [parse(source, source_file=source_file) for source in sources]

    def render(self, doc: Document) -> str:
        return self._renderer.render(doc)


__all__ = [  # noqa: RUF022
    "__version__",
    # Pipeline functions
    "render_html",
    "scan",
    "parse",
    "parse_tokens",
    "render",
    # Block nodes
    "Block",
    "Document",
    "Heading",
    "Paragraph",
    # Inline nodes
    "Inline",
    "Digit",
    "Emphasis",
    "LineBreak",
    "Link",
    "Strong",
    "Text",
    # Stages as classes
    "Lexer",
    "Parser",
    "HtmlRenderer",
    "ASTRenderer",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    "tokens_to_json",
    "tokens_from_json",
    # Settings
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Errors
    "GohanError",
    "ParseError",
    "RenderError",
    "SourceLocation",
    "Token",
    "TokenType",
    "Markdown",
]
