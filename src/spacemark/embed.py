# topmark:header:start
#
#   project      : SpaceMark
#   file         : embed.py
#   file_relpath : src/spacemark/embed.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Embedding hook for nested markup.

A printer that meets an element may hand the element's printed children to
an external markup formatter and splice the result back in. SpaceMark does
not format anything itself; the formatter is an opaque collaborator.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Protocol

from spacemark.ast.nodes import Element
from spacemark.config.logging import get_logger

if TYPE_CHECKING:
    from spacemark.ast.nodes import Node
    from spacemark.config.logging import SpacemarkLogger

logger: SpacemarkLogger = get_logger(__name__)

EMBED_PARSER = "html"

PrintChild = Callable[["Node"], str]


class TextToDoc(Protocol):
    """Formatter for an embedded sub-document."""

    def __call__(self, text: str, *, parser: str) -> str:
        """Format ``text`` as the ``parser`` dialect and return the result."""
        ...


def strip_trailing_hardline(doc: str) -> str:
    """Remove the line break(s) a formatter appends after the last line."""
    return doc.rstrip("\r\n")


def embed(node: Node, print_child: PrintChild, text_to_doc: TextToDoc) -> str | None:
    """Format the content of ``node`` through the embedded formatter.

    Args:
        node (Node): The node being printed.
        print_child (PrintChild): Prints one child node to text.
        text_to_doc (TextToDoc): The external formatter.

    Returns:
        str | None: The formatted content of an element, or None for any other
            node (the caller prints it the regular way).
    """
    if not isinstance(node, Element):
        return None
    text: str = "".join(print_child(child) for child in node.children)
    logger.debug("embed: formatting %d char(s) of <%s> as %s", len(text), node.tag, EMBED_PARSER)
    return strip_trailing_hardline(text_to_doc(text, parser=EMBED_PARSER))
