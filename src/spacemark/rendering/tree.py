# topmark:header:start
#
#   project      : SpaceMark
#   file         : tree.py
#   file_relpath : src/spacemark/rendering/tree.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Indented text view of an annotated template tree.

Each node is printed on its own line, indented by depth, followed by its
computed annotations (camelCase keys, ``None`` fields omitted)::

    Template display=block
      ElementNode <div> display=block isWhitespaceSensitive=false ...
        TextNode "hello" display=inline hasLeadingSpaces=true ...

Block bodies are labelled ``program:`` / ``inverse:``.
"""

from __future__ import annotations

from typing import Any, Callable, NamedTuple

from spacemark.ast.codec import annotations_to_dict
from spacemark.ast.nodes import (
    BlockStatement,
    CommentStatement,
    Element,
    MustacheCommentStatement,
    MustacheExpression,
    Node,
    Root,
    Text,
)
from spacemark.core.errors import UnknownNodeTypeError

Styler = Callable[..., str]

INDENT = "  "
MAX_CHARS = 40


class _BodyLabel(NamedTuple):
    """A pre-rendered ``program:`` / ``inverse:`` line waiting on the render stack."""

    text: str


def _plain(text: str, **_style: Any) -> str:
    return text


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _label(node: Node) -> str:
    match node:
        case Root():
            return node.kind.value
        case Element():
            return f"{node.kind.value} <{node.tag}>"
        case Text():
            chars: str = node.chars
            if len(chars) > MAX_CHARS:
                chars = chars[: MAX_CHARS - 3] + "..."
            return f"{node.kind.value} {chars!r}"
        case CommentStatement() | MustacheCommentStatement():
            return f"{node.kind.value} {node.value.strip()!r}"
        case BlockStatement() | MustacheExpression():
            return node.kind.value
        case _:
            return type(node).__name__


def _node_line(node: Node, depth: int, style: Styler) -> str:
    if not isinstance(node, Node):
        raise UnknownNodeTypeError(type(node).__name__)
    attrs: str = " ".join(
        f"{style(key, dim=True)}={_format_value(value)}"
        for key, value in annotations_to_dict(node.annotations).items()
    )
    head: str = style(_label(node), fg="cyan", bold=True)
    return f"{INDENT * depth}{head} {attrs}".rstrip()


def render_tree(root: Node, *, styled: Styler | None = None) -> list[str]:
    """Render ``root`` and its subtree as indented lines.

    Nodes are emitted in pre-order from an explicit stack; a stack entry is
    either a node or a ready-made block body label.

    Args:
        root (Node): The tree to render.
        styled (Styler | None): ``console.styled``-compatible callable for
            colored output; plain text when None.

    Returns:
        list[str]: One line per node (plus one per block body label).

    Raises:
        UnknownNodeTypeError: If the tree holds an object that is not a template node.
    """
    style: Styler = styled or _plain
    lines: list[str] = []
    stack: list[tuple[Node | _BodyLabel, int]] = [(root, 0)]

    while stack:
        entry, depth = stack.pop()
        if isinstance(entry, _BodyLabel):
            lines.append(entry.text)
            continue
        lines.append(_node_line(entry, depth, style))

        pending: list[tuple[Node | _BodyLabel, int]] = []
        match entry:
            case Root() | Element():
                pending.extend((child, depth + 1) for child in entry.children)
            case BlockStatement():
                for name, body in (("program", entry.program), ("inverse", entry.inverse)):
                    if body is not None:
                        label: str = f"{INDENT * (depth + 1)}{style(name + ':', fg='magenta')}"
                        pending.extend(((_BodyLabel(label), depth + 1), (body, depth + 2)))
            case _:
                pass
        stack.extend(reversed(pending))

    return lines
