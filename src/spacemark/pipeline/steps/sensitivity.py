# topmark:header:start
#
#   project      : SpaceMark
#   file         : sensitivity.py
#   file_relpath : src/spacemark/pipeline/steps/sensitivity.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Whitespace sensitivity step.

Decides, for every child of a container, whether whitespace right before
(*leading*) or right after (*trailing*) the child must survive reformatting.
Only the container, the child and the child's immediate siblings are
consulted.

A container whose sole child is a Text node gets a single
``is_dangling_space_sensitive`` flag instead.

Local values are coalesced pairwise: the whitespace between two siblings is
significant only if both of them consider that edge significant.

Sets:
  - ``Annotations.is_leading_space_sensitive`` / ``is_trailing_space_sensitive``
    on container children
  - ``Annotations.is_dangling_space_sensitive`` on containers with a sole Text child
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from spacemark.ast.nodes import Element, Root, Text, is_text_like
from spacemark.config.logging import get_logger
from spacemark.core.errors import MissingAnnotationError
from spacemark.css.display import (
    DISPLAY_NONE,
    is_dangling_space_sensitive_css_display,
    is_first_child_leading_space_sensitive_css_display,
    is_last_child_trailing_space_sensitive_css_display,
    is_next_leading_space_sensitive_css_display,
    is_pre_like_node,
    is_prev_trailing_space_sensitive_css_display,
)
from spacemark.pipeline.status import Stage
from spacemark.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from spacemark.ast.nodes import Container, Node
    from spacemark.config import Config
    from spacemark.config.logging import SpacemarkLogger
    from spacemark.pipeline.context import PreprocessContext

logger: SpacemarkLogger = get_logger(__name__)


def _display_of(node: Node) -> str:
    display: str | None = node.annotations.display
    if display is None:
        raise MissingAnnotationError(
            f"{type(node).__name__} has no display; run the display step first"
        )
    return display


def _index_of(node: Node, parent: Container) -> int:
    for index, child in enumerate(parent.children):
        if child is node:
            return index
    raise ValueError(f"{type(node).__name__} is not a child of the given parent")


def _leading_sensitive(node: Node, prev: Node | None, parent: Container, config: Config) -> bool:
    if is_text_like(node) and is_text_like(prev):
        return True

    parent_display: str = _display_of(parent)
    if parent_display == DISPLAY_NONE:
        return False

    if is_pre_like_node(parent, config):
        return True

    if prev is None:
        return not (
            isinstance(parent, Root)
            or is_pre_like_node(node, config)
            or not is_first_child_leading_space_sensitive_css_display(parent_display)
        )

    return is_next_leading_space_sensitive_css_display(_display_of(prev))


def _trailing_sensitive(node: Node, nxt: Node | None, parent: Container, config: Config) -> bool:
    if is_text_like(node) and is_text_like(nxt):
        return True

    parent_display: str = _display_of(parent)
    if parent_display == DISPLAY_NONE:
        return False

    if is_pre_like_node(parent, config):
        return True

    if nxt is None:
        return not (
            isinstance(parent, Root)
            or is_pre_like_node(node, config)
            or not is_last_child_trailing_space_sensitive_css_display(parent_display)
        )

    return is_prev_trailing_space_sensitive_css_display(_display_of(nxt))


def is_leading_space_sensitive(node: Node, parent: Container, config: Config) -> bool:
    """Return the local leading sensitivity of ``node`` inside ``parent``.

    Args:
        node (Node): A child of ``parent``.
        parent (Container): The element or root owning ``node``.
        config (Config): Effective configuration (white-space table).

    Returns:
        bool: True if whitespace right before ``node`` is significant, before
            coalescing with the previous sibling.

    Raises:
        MissingAnnotationError: If a consulted node has no display yet.
    """
    index: int = _index_of(node, parent)
    prev: Node | None = parent.children[index - 1] if index > 0 else None
    return _leading_sensitive(node, prev, parent, config)


def is_trailing_space_sensitive(node: Node, parent: Container, config: Config) -> bool:
    """Return the local trailing sensitivity of ``node`` inside ``parent``.

    Args:
        node (Node): A child of ``parent``.
        parent (Container): The element or root owning ``node``.
        config (Config): Effective configuration (white-space table).

    Returns:
        bool: True if whitespace right after ``node`` is significant, before
            coalescing with the next sibling.

    Raises:
        MissingAnnotationError: If a consulted node has no display yet.
    """
    index: int = _index_of(node, parent)
    children: list[Node] = parent.children
    nxt: Node | None = children[index + 1] if index + 1 < len(children) else None
    return _trailing_sensitive(node, nxt, parent, config)


def apply_space_sensitivity(container: Container, config: Config) -> None:
    """Annotate the children of ``container`` (or the container itself).

    Args:
        container (Container): The element or root whose children are annotated.
        config (Config): Effective configuration.
    """
    children: list[Node] = container.children
    if not children:
        return

    if len(children) == 1 and isinstance(children[0], Text):
        container.annotations.is_dangling_space_sensitive = (
            is_dangling_space_sensitive_css_display(_display_of(container))
        )
        return

    count: int = len(children)
    leading: list[bool] = [
        _leading_sensitive(child, children[i - 1] if i > 0 else None, container, config)
        for i, child in enumerate(children)
    ]
    trailing: list[bool] = [
        _trailing_sensitive(child, children[i + 1] if i + 1 < count else None, container, config)
        for i, child in enumerate(children)
    ]

    for i, child in enumerate(children):
        ann = child.annotations
        ann.is_leading_space_sensitive = leading[i] if i == 0 else trailing[i - 1] and leading[i]
        ann.is_trailing_space_sensitive = (
            trailing[i] if i == count - 1 else leading[i + 1] and trailing[i]
        )


class SensitivityStep(BaseStep):
    """Assign leading/trailing/dangling sensitivity under every container."""

    def __init__(self) -> None:
        super().__init__(
            name=self.__class__.__name__,
            requires=Stage.DISPLAY_ASSIGNED,
            produces=Stage.SENSITIVITY_ASSIGNED,
        )

    def visit(self, ctx: PreprocessContext, node: Node, parent: Node | None) -> None:
        """Annotate the children of elements and body containers."""
        if isinstance(node, (Root, Element)):
            apply_space_sensitivity(node, ctx.config)
            if isinstance(node, Element):
                logger.trace(
                    "sensitivity: <%s> with %d child(ren), dangling=%s",
                    node.tag,
                    len(node.children),
                    node.annotations.is_dangling_space_sensitive,
                )
