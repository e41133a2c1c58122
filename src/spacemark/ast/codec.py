# topmark:header:start
#
#   project      : SpaceMark
#   file         : codec.py
#   file_relpath : src/spacemark/ast/codec.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JSON-shaped (de)serialization of template trees.

The accepted shape is the Glimmer AST as emitted by ``@glimmer/syntax``
(``{"type": "ElementNode", "tag": "div", "children": [...]}``). Keys the node
model does not interpret are preserved in ``Node.extras``. Annotation fields
are emitted in camelCase (``isLeadingSpaceSensitive``, ...) next to the node's
own keys. Display and sensitivity annotations are read back when present so
that an annotated dump can be fed through the pipeline again. The
``has*Spaces`` flags describe whitespace the normalizer removed from the
in-memory tree; they are dropped on input and recomputed from ``chars``.

Both directions walk the tree with an explicit stack, so nesting depth is not
bound by the interpreter's recursion limit.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import fields
from typing import TYPE_CHECKING, Any, Final, cast

from spacemark.ast.nodes import (
    Annotations,
    BlockStatement,
    CommentStatement,
    Element,
    MustacheCommentStatement,
    MustacheExpression,
    NodeKind,
    Root,
    Text,
)
from spacemark.core.errors import MalformedNodeError, UnknownNodeTypeError

if TYPE_CHECKING:
    from spacemark.ast.nodes import Node


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


# snake_case attribute -> camelCase JSON key
ANNOTATION_KEYS: Final[dict[str, str]] = {f.name: _camel(f.name) for f in fields(Annotations)}

# Annotations that are never read from input.
RECOMPUTED_ANNOTATIONS: Final[frozenset[str]] = frozenset(
    {"has_leading_spaces", "has_trailing_spaces", "has_dangling_spaces"}
)

BLOCK_BODIES: Final[tuple[str, ...]] = ("program", "inverse")

_NODE_KEYS: Final[dict[NodeKind, tuple[str, ...]]] = {
    NodeKind.TEMPLATE: ("body",),
    NodeKind.BLOCK: ("body",),
    NodeKind.PROGRAM: ("body",),
    NodeKind.ELEMENT: ("tag", "children", "attributes"),
    NodeKind.TEXT: ("chars",),
    NodeKind.MUSTACHE: ("path",),
    NodeKind.BLOCK_STATEMENT: ("path", *BLOCK_BODIES),
    NodeKind.COMMENT: ("value",),
    NodeKind.MUSTACHE_COMMENT: ("value",),
}


def _require_str(data: Mapping[str, Any], key: str, node_type: str) -> str:
    value: Any = data.get(key)
    if not isinstance(value, str):
        raise MalformedNodeError(f"{node_type}: field {key!r} must be a string, got {value!r}")
    return value


def _raw_list(data: Mapping[str, Any], key: str) -> list[Any]:
    raw: Any = data.get(key, [])
    if not isinstance(raw, list):
        raise MalformedNodeError(f"{data.get('type')}: field {key!r} must be a list")
    return cast("list[Any]", raw)


def _read_annotations(data: Mapping[str, Any]) -> Annotations:
    values: dict[str, Any] = {
        attr: data[key]
        for attr, key in ANNOTATION_KEYS.items()
        if attr not in RECOMPUTED_ANNOTATIONS and data.get(key) is not None
    }
    return Annotations(**values)


def _decode_node(data: Any) -> Node:
    """Build a single node from ``data``; containers are returned without children."""
    if not isinstance(data, Mapping):
        raise MalformedNodeError(f"Expected a node object, got {type(data).__name__}")
    raw = cast("Mapping[str, Any]", data)
    node_type: Any = raw.get("type")
    if not isinstance(node_type, str):
        raise MalformedNodeError(f"Node without a 'type' field: {dict(raw)!r}")
    try:
        kind = NodeKind(node_type)
    except ValueError:
        raise UnknownNodeTypeError(node_type) from None

    node: Node
    match kind:
        case NodeKind.TEMPLATE | NodeKind.BLOCK | NodeKind.PROGRAM:
            node = Root(kind=kind)
        case NodeKind.ELEMENT:
            node = Element(
                tag=_require_str(raw, "tag", node_type),
                attributes=_raw_list(raw, "attributes"),
            )
        case NodeKind.TEXT:
            node = Text(chars=_require_str(raw, "chars", node_type))
        case NodeKind.MUSTACHE:
            node = MustacheExpression(path=raw.get("path"))
        case NodeKind.BLOCK_STATEMENT:
            node = BlockStatement(path=raw.get("path"))
        case NodeKind.COMMENT:
            node = CommentStatement(value=_require_str(raw, "value", node_type))
        case NodeKind.MUSTACHE_COMMENT:
            node = MustacheCommentStatement(value=_require_str(raw, "value", node_type))

    consumed: set[str] = {"type", *_NODE_KEYS[kind], *ANNOTATION_KEYS.values()}
    node.annotations = _read_annotations(raw)
    node.extras = {k: v for k, v in raw.items() if k not in consumed}
    return node


def from_dict(data: Mapping[str, Any]) -> Node:
    """Build a node (and its subtree) from a Glimmer-shaped mapping.

    Args:
        data (Mapping[str, Any]): The serialized node.

    Returns:
        Node: The deserialized node.

    Raises:
        MalformedNodeError: If ``data`` is not a mapping, has no ``type``, or a
            required field is missing or ill-typed.
        UnknownNodeTypeError: If ``type`` names a node kind outside the model.
    """
    root: Node = _decode_node(data)
    stack: list[tuple[Node, Mapping[str, Any]]] = [(root, data)]
    while stack:
        node, raw = stack.pop()
        match node:
            case Root() | Element():
                items: list[Any] = _raw_list(raw, "body" if isinstance(node, Root) else "children")
                node.children = [_decode_node(item) for item in items]
                stack.extend(zip(node.children, items))
            case BlockStatement():
                for key in BLOCK_BODIES:
                    raw_body: Any = raw.get(key)
                    if raw_body is None:
                        continue
                    body: Node = _decode_node(raw_body)
                    if not isinstance(body, Root):
                        raise MalformedNodeError(
                            f"{node.kind.value}: field {key!r} must be a Block or Program"
                        )
                    setattr(node, key, body)
                    stack.append((body, raw_body))
            case _:
                pass
    return root


def annotations_to_dict(annotations: Annotations) -> dict[str, Any]:
    """Return the computed (non-``None``) annotation fields keyed in camelCase."""
    return {
        key: getattr(annotations, attr)
        for attr, key in ANNOTATION_KEYS.items()
        if getattr(annotations, attr) is not None
    }


def _encode_node(node: Node) -> dict[str, Any]:
    """Serialize a single node; container and block bodies are left empty."""
    out: dict[str, Any]
    match node:
        case Root():
            out = {"type": node.kind.value, "body": []}
        case Element():
            out = {
                "type": node.kind.value,
                "tag": node.tag,
                "attributes": list(node.attributes),
                "children": [],
            }
        case Text():
            out = {"type": node.kind.value, "chars": node.chars}
        case MustacheExpression():
            out = {"type": node.kind.value, "path": node.path}
        case BlockStatement():
            out = {"type": node.kind.value, "path": node.path, "program": None, "inverse": None}
        case CommentStatement() | MustacheCommentStatement():
            out = {"type": node.kind.value, "value": node.value}
        case _:
            raise UnknownNodeTypeError(type(node).__name__)

    out.update(node.extras)
    out.update(annotations_to_dict(node.annotations))
    return out


def to_dict(node: Node) -> dict[str, Any]:
    """Serialize ``node`` (and its subtree) to a Glimmer-shaped dict.

    Args:
        node (Node): The node to serialize.

    Returns:
        dict[str, Any]: JSON-compatible mapping including ``extras`` and the
            computed annotations.

    Raises:
        UnknownNodeTypeError: If ``node`` is not one of the template node variants.
    """
    root_out: dict[str, Any] = _encode_node(node)
    stack: list[tuple[Node, dict[str, Any]]] = [(node, root_out)]
    while stack:
        current, out = stack.pop()
        match current:
            case Root() | Element():
                key: str = "body" if isinstance(current, Root) else "children"
                for child in current.children:
                    child_out: dict[str, Any] = _encode_node(child)
                    out[key].append(child_out)
                    stack.append((child, child_out))
            case BlockStatement():
                for name in BLOCK_BODIES:
                    body: Root | None = getattr(current, name)
                    if body is not None:
                        out[name] = _encode_node(body)
                        stack.append((body, out[name]))
            case _:
                pass
    return root_out
