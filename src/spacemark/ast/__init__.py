# topmark:header:start
#
#   project      : SpaceMark
#   file         : __init__.py
#   file_relpath : src/spacemark/ast/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Template tree model, traversal and JSON codec."""

from __future__ import annotations

from spacemark.ast.nodes import (
    Annotations,
    BlockStatement,
    CommentStatement,
    Element,
    MustacheCommentStatement,
    MustacheExpression,
    Node,
    NodeKind,
    Root,
    TemplateNode,
    Text,
)

__all__: list[str] = [
    "Annotations",
    "BlockStatement",
    "CommentStatement",
    "Element",
    "MustacheCommentStatement",
    "MustacheExpression",
    "Node",
    "NodeKind",
    "Root",
    "TemplateNode",
    "Text",
]
