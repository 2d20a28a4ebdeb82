"""Backends that turn a Document into text.

HtmlRenderer is the only one shipped. It keeps no state between calls, so
one instance can serve every thread.
"""

from gohan.renderers.html import HtmlRenderer
from gohan.renderers.protocol import ASTRenderer

__all__ = ["ASTRenderer", "HtmlRenderer"]
