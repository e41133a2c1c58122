# topmark:header:start
#
#   project      : SpaceMark
#   file         : traverse.py
#   file_relpath : src/spacemark/ast/traverse.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Depth-first traversal over template trees.

The walk is pre-order: a node is yielded (or visited) *before* its children
are read, so a visitor may replace ``node.children`` and the walk descends
into the new list. Block statements are entered through their ``program``
and ``inverse`` bodies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from spacemark.ast.nodes import (
    BlockStatement,
    CommentStatement,
    Element,
    MustacheCommentStatement,
    MustacheExpression,
    Root,
    Text,
)
from spacemark.core.errors import UnknownNodeTypeError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from spacemark.ast.nodes import Node

Visitor = Callable[["Node", "Node | None"], None]


def child_nodes(node: Node) -> list[Node]:
    """Return the nodes the traversal descends into from ``node``.

    Args:
        node (Node): The node whose direct descendants are requested.

    Returns:
        list[Node]: A snapshot of the children (containers), the present block
            bodies (block statements) or an empty list (leaves).

    Raises:
        UnknownNodeTypeError: If ``node`` is not one of the template node variants.
    """
    match node:
        case Root() | Element():
            return list(node.children)
        case BlockStatement():
            return [body for body in (node.program, node.inverse) if body is not None]
        case Text() | MustacheExpression() | CommentStatement() | MustacheCommentStatement():
            return []
        case _:
            raise UnknownNodeTypeError(type(node).__name__)


def walk(root: Node) -> Iterator[tuple[Node, Node | None]]:
    """Yield ``(node, parent)`` pairs in depth-first pre-order.

    An explicit stack keeps deep templates clear of the recursion limit.
    """
    stack: list[tuple[Node, Node | None]] = [(root, None)]
    while stack:
        node, parent = stack.pop()
        yield node, parent
        stack.extend((child, node) for child in reversed(child_nodes(node)))


def traverse(root: Node, visit: Visitor) -> int:
    """Call ``visit(node, parent)`` for every node reachable from ``root``.

    Args:
        root (Node): The tree to walk.
        visit (Visitor): Callback invoked once per node, parents before children.

    Returns:
        int: The number of visited nodes.
    """
    count: int = 0
    for node, parent in walk(root):
        visit(node, parent)
        count += 1
    return count
