"""The grammar, split into mixins that the Parser class combines.

- `TokenNavigationMixin`: cursor over a token range
- `InlineParsingMixin`: text, digits, line breaks, links, strong, emphasis
- `BlockParsingMixin`: headings and paragraphs

`gohan.parsing.markers` holds the side-effect-free lookahead the inline
mixin consults before committing to a delimiter.
"""

from gohan.parsing.blocks import BlockParsingMixin
from gohan.parsing.inline import InlineParsingMixin
from gohan.parsing.markers import (
    DelimiterIndex,
    InlineMarker,
    LinkMarker,
    find_emphasis,
    find_heading,
    find_link,
    find_strong,
)
from gohan.parsing.token_nav import TokenNavigationMixin

__all__ = [
    "TokenNavigationMixin",
    "InlineParsingMixin",
    "BlockParsingMixin",
    "DelimiterIndex",
    "InlineMarker",
    "LinkMarker",
    "find_emphasis",
    "find_heading",
    "find_link",
    "find_strong",
]
