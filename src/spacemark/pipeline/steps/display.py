# topmark:header:start
#
#   project      : SpaceMark
#   file         : display.py
#   file_relpath : src/spacemark/pipeline/steps/display.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Display classification step.

Assigns a CSS-like ``display`` category to every node:

- block statements, comments and mustache expressions → ``block``
  (mustache expressions are also marked whitespace sensitive);
- text → ``inline``;
- body containers (``Template``/``Block``/``Program``) → ``block``;
- elements → comment override, else the whitespace-sensitivity mode, else
  the tag's entry in the display table.

A comment whose value reads ``display: <value>`` (``{{! display: block }}``)
overrides the display of the next element among its siblings. The pending
override is folded through the sibling sequence: whitespace-only text keeps
it, an element consumes it, any other node drops it.

Sets:
  - ``Annotations.display`` on every node
  - ``Annotations.is_whitespace_sensitive`` / ``is_indentation_sensitive`` on
    mustache expressions
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from spacemark.ast.nodes import (
    BlockStatement,
    CommentStatement,
    Element,
    MustacheCommentStatement,
    MustacheExpression,
    Root,
    Text,
)
from spacemark.config.logging import get_logger
from spacemark.config.model import WhitespaceSensitivity
from spacemark.core.errors import UnknownNodeTypeError
from spacemark.css.display import DISPLAY_BLOCK, DISPLAY_INLINE
from spacemark.pipeline.status import Stage
from spacemark.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from spacemark.ast.nodes import Node
    from spacemark.config import Config
    from spacemark.config.logging import SpacemarkLogger
    from spacemark.pipeline.context import PreprocessContext

logger: SpacemarkLogger = get_logger(__name__)

DISPLAY_OVERRIDE_RE: Final[re.Pattern[str]] = re.compile(r"^\s*display:\s*([a-z-]+)\s*$")


def comment_display_override(comment: str | None) -> str | None:
    """Return the display named by a ``display: <value>`` comment, if any."""
    if not comment:
        return None
    match = DISPLAY_OVERRIDE_RE.match(comment)
    return match.group(1) if match else None


def element_css_display(element: Element, comment: str | None, config: Config) -> str:
    """Resolve the display of ``element``.

    Args:
        element (Element): The element to classify.
        comment (str | None): Value of a pending override comment, if any.
        config (Config): Effective configuration.

    Returns:
        str: The override, the mode-forced display, or the table display.
    """
    override: str | None = comment_display_override(comment)
    if override:
        return override

    match config.whitespace_sensitivity:
        case WhitespaceSensitivity.STRICT:
            return DISPLAY_INLINE
        case WhitespaceSensitivity.IGNORE:
            return DISPLAY_BLOCK
        case _:
            return config.display_for_tag(element.tag)


def classify_node(node: Node, pending: str | None, config: Config) -> str | None:
    """Assign the display of one node and return the next pending override.

    Args:
        node (Node): The node to classify.
        pending (str | None): Override comment carried from earlier siblings.
        config (Config): Effective configuration.

    Returns:
        str | None: The override to carry to the next sibling.

    Raises:
        UnknownNodeTypeError: If ``node`` is not one of the template node variants.
    """
    match node:
        case Element():
            node.annotations.display = element_css_display(node, pending, config)
            logger.trace("display: <%s> -> %s", node.tag, node.display)
            return None
        case CommentStatement() | MustacheCommentStatement():
            node.annotations.display = DISPLAY_BLOCK
            return node.value
        case Text():
            node.annotations.display = DISPLAY_INLINE
            return pending if not node.chars.strip() else None
        case MustacheExpression():
            ann = node.annotations
            ann.display = DISPLAY_BLOCK
            ann.is_whitespace_sensitive = True
            ann.is_indentation_sensitive = False
            return None
        case BlockStatement() | Root():
            node.annotations.display = DISPLAY_BLOCK
            return None
        case _:
            raise UnknownNodeTypeError(type(node).__name__)


def classify_children(children: list[Node], config: Config) -> None:
    """Classify one parent's children in order, threading the override accumulator."""
    pending: str | None = None
    for child in children:
        pending = classify_node(child, pending, config)


class DisplayStep(BaseStep):
    """Assign ``display`` to every node of the tree.

    Each node is classified exactly once: the root (and every block body)
    when it is visited, everything else while its parent's children are folded.
    """

    def __init__(self) -> None:
        super().__init__(
            name=self.__class__.__name__,
            requires=Stage.UNCLASSIFIED,
            produces=Stage.DISPLAY_ASSIGNED,
        )

    def visit(self, ctx: PreprocessContext, node: Node, parent: Node | None) -> None:
        """Classify roots and block bodies, then the children of containers."""
        if parent is None or isinstance(node, Root):
            classify_node(node, None, ctx.config)
        if isinstance(node, (Root, Element)):
            classify_children(node.children, ctx.config)
