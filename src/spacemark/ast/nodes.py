# topmark:header:start
#
#   project      : SpaceMark
#   file         : nodes.py
#   file_relpath : src/spacemark/ast/nodes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Template tree node model.

The tree mirrors the Glimmer (Handlebars) AST as produced by an external
parser, restricted to the fields the whitespace inference reads. The set of
variants is closed:

    Root                      Template / Block / Program body containers
    Element                   ElementNode (tag, attributes, children)
    Text                      TextNode (raw character content)
    MustacheExpression        MustacheStatement (``{{expr}}``)
    BlockStatement            ``{{#block}}...{{else}}...{{/block}}``
    CommentStatement          ``<!-- ... -->``
    MustacheCommentStatement  ``{{! ... }}``

Every node owns a mutable [`Annotations`][spacemark.ast.nodes.Annotations]
record which the pipeline steps fill in. Nodes compare by identity: a node
belongs to exactly one ``children`` list and is never shared.

Fields the model does not interpret (source locations, mustache paths and
params, element modifiers, ...) are kept verbatim in ``extras`` so that the
JSON codec can round-trip them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Union


class NodeKind(str, Enum):
    """Node kinds, valued by their Glimmer AST ``type`` name."""

    TEMPLATE = "Template"
    BLOCK = "Block"
    PROGRAM = "Program"
    ELEMENT = "ElementNode"
    TEXT = "TextNode"
    MUSTACHE = "MustacheStatement"
    BLOCK_STATEMENT = "BlockStatement"
    COMMENT = "CommentStatement"
    MUSTACHE_COMMENT = "MustacheCommentStatement"


@dataclass
class Annotations:
    """Layout annotations written by the preprocessing pipeline.

    ``None`` means "not computed" (the step that owns the field has not run,
    or does not apply to this node).

    Attributes:
        display (str | None): CSS display category (``block``, ``inline``,
            ``inline-block``, ``list-item``, ``table*``, ``none``, ...).
        is_whitespace_sensitive (bool | None): Content must be preserved verbatim.
        is_indentation_sensitive (bool | None): Leading indentation of content is significant.
        is_leading_space_sensitive (bool | None): Whitespace right before the node matters.
        is_trailing_space_sensitive (bool | None): Whitespace right after the node matters.
        is_dangling_space_sensitive (bool | None): Whitespace that is the sole
            content of the node matters.
        has_leading_spaces (bool | None): Whitespace was present right before the node.
        has_trailing_spaces (bool | None): Whitespace was present right after the node.
        has_dangling_spaces (bool | None): The node was emptied of whitespace-only content.
    """

    display: str | None = None
    is_whitespace_sensitive: bool | None = None
    is_indentation_sensitive: bool | None = None
    is_leading_space_sensitive: bool | None = None
    is_trailing_space_sensitive: bool | None = None
    is_dangling_space_sensitive: bool | None = None
    has_leading_spaces: bool | None = None
    has_trailing_spaces: bool | None = None
    has_dangling_spaces: bool | None = None


@dataclass(eq=False)
class Node:
    """Common base of all template tree nodes."""

    annotations: Annotations = field(default_factory=Annotations, kw_only=True)
    extras: dict[str, Any] = field(default_factory=lambda: {}, kw_only=True)

    @property
    def display(self) -> str | None:
        """Shortcut for ``annotations.display``."""
        return self.annotations.display


@dataclass(eq=False)
class Root(Node):
    """Top-level or block-body container (``Template``, ``Block``, ``Program``)."""

    children: list[Node] = field(default_factory=lambda: [])
    kind: NodeKind = NodeKind.TEMPLATE


@dataclass(eq=False)
class Element(Node):
    """An HTML element; ``attributes`` are opaque to the inference."""

    tag: str
    children: list[Node] = field(default_factory=lambda: [])
    attributes: list[Any] = field(default_factory=lambda: [])

    kind: ClassVar[NodeKind] = NodeKind.ELEMENT


@dataclass(eq=False)
class Text(Node):
    """A run of literal template text."""

    chars: str

    kind: ClassVar[NodeKind] = NodeKind.TEXT


@dataclass(eq=False)
class MustacheExpression(Node):
    """A ``{{...}}`` placeholder; ``path`` is the opaque expression payload."""

    path: Any = None

    kind: ClassVar[NodeKind] = NodeKind.MUSTACHE


@dataclass(eq=False)
class BlockStatement(Node):
    """A ``{{#...}}`` block with its main and ``{{else}}`` bodies."""

    path: Any = None
    program: Root | None = None
    inverse: Root | None = None

    kind: ClassVar[NodeKind] = NodeKind.BLOCK_STATEMENT


@dataclass(eq=False)
class CommentStatement(Node):
    """An HTML comment."""

    value: str = ""

    kind: ClassVar[NodeKind] = NodeKind.COMMENT


@dataclass(eq=False)
class MustacheCommentStatement(Node):
    """A ``{{! ...}}`` comment."""

    value: str = ""

    kind: ClassVar[NodeKind] = NodeKind.MUSTACHE_COMMENT


TemplateNode = Union[
    Root,
    Element,
    Text,
    MustacheExpression,
    BlockStatement,
    CommentStatement,
    MustacheCommentStatement,
]

# Nodes that own an ordered ``children`` list
Container = Union[Root, Element]


def is_text_like(node: Node | None) -> bool:
    """Return True for the data-producing inline nodes (Text and mustache expressions)."""
    return isinstance(node, (Text, MustacheExpression))
