"""The interface every Gohan output backend implements.

Code that only needs "some renderer" should annotate with ASTRenderer
instead of HtmlRenderer, so a different backend can be passed in:

    def publish(doc: Document, renderer: ASTRenderer) -> str:
        return renderer.render(doc)

"""

from typing import Protocol, runtime_checkable

from gohan.nodes import Document


@runtime_checkable
class ASTRenderer(Protocol):
    """Anything with ``render(Document) -> str``.

    Runtime checkable, so ``isinstance(obj, ASTRenderer)`` works; only the
    presence of ``render`` is checked.
    """

    def render(self, node: Document) -> str: ...
