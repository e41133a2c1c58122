# topmark:header:start
#
#   project      : SpaceMark
#   file         : display.py
#   file_relpath : src/spacemark/css/display.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Predicates over CSS display categories and node white-space.

The display categories group as follows:

- *block-like*: ``block``, ``list-item`` and every ``table*`` value. Whitespace
  abutting a block-like box never renders.
- ``inline-block``: behaves like a block on the inside (its first/last child
  edge collapses) and like inline text on the outside.
- everything else (``inline``, ``ruby``, override words, ...) is inline.

``none`` is handled by the callers: content of a ``display: none`` node does
not render at all.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from spacemark.ast.nodes import Element, MustacheExpression

if TYPE_CHECKING:
    from spacemark.ast.nodes import Node
    from spacemark.config import Config

DISPLAY_NONE = "none"
DISPLAY_BLOCK = "block"
DISPLAY_INLINE = "inline"
DISPLAY_INLINE_BLOCK = "inline-block"


def is_block_like_css_display(css_display: str) -> bool:
    """Return True for ``block``, ``list-item`` and ``table*`` displays."""
    return (
        css_display == DISPLAY_BLOCK
        or css_display == "list-item"
        or css_display.startswith("table")
    )


def is_first_child_leading_space_sensitive_css_display(css_display: str) -> bool:
    """Whitespace before the first child matters inside a parent with this display."""
    return not is_block_like_css_display(css_display) and css_display != DISPLAY_INLINE_BLOCK


def is_last_child_trailing_space_sensitive_css_display(css_display: str) -> bool:
    """Whitespace after the last child matters inside a parent with this display."""
    return not is_block_like_css_display(css_display) and css_display != DISPLAY_INLINE_BLOCK


def is_prev_trailing_space_sensitive_css_display(css_display: str) -> bool:
    """Whitespace before a sibling with this display matters."""
    return not is_block_like_css_display(css_display)


def is_next_leading_space_sensitive_css_display(css_display: str) -> bool:
    """Whitespace after a sibling with this display matters."""
    return not is_block_like_css_display(css_display)


def is_dangling_space_sensitive_css_display(css_display: str) -> bool:
    """Whitespace that is the only content of a node with this display matters."""
    return (
        css_display != DISPLAY_NONE
        and not is_block_like_css_display(css_display)
        and css_display != DISPLAY_INLINE_BLOCK
    )


def node_css_white_space(node: Node, config: Config) -> str:
    """Return the CSS white-space category of ``node``.

    Only elements have a tag-specific value; every other node uses the default.
    """
    if isinstance(node, Element):
        return config.white_space_for_tag(node.tag)
    return config.white_space_default


def is_pre_like_node(node: Node, config: Config) -> bool:
    """Return True if ``node`` keeps its content verbatim (``white-space: pre*``)."""
    return node_css_white_space(node, config).startswith("pre")


def is_indentation_sensitive_node(node: Node, config: Config) -> bool:
    """Return True if leading indentation inside ``node`` is significant."""
    return node_css_white_space(node, config).startswith("pre")


def is_whitespace_sensitive_node(node: Node, config: Config) -> bool:
    """Return True if all whitespace inside ``node`` must be preserved."""
    return isinstance(node, MustacheExpression) or is_indentation_sensitive_node(node, config)
