# topmark:header:start
#
#   project      : SpaceMark
#   file         : strategies_spacemark.py
#   file_relpath : tests/strategies_spacemark.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for generating Glimmer-like template trees.

The trees mix block, inline, inline-block, pre-like and ``display: none``
elements with text runs (often padded with whitespace, sometimes blank),
mustache expressions, comments (some of them display overrides) and block
statements, bounded in depth and width so property tests stay fast.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from hypothesis import strategies as st

from spacemark.ast.nodes import (
    BlockStatement,
    CommentStatement,
    Element,
    MustacheCommentStatement,
    MustacheExpression,
    Node,
    NodeKind,
    Root,
    Text,
)

Draw = Callable[[st.SearchStrategy[Any]], Any]

TAGS: tuple[str, ...] = (
    "div",
    "p",
    "li",
    "td",
    "span",
    "b",
    "a",
    "button",
    "pre",
    "textarea",
    "style",
    "custom-tag",
)

WHITESPACE_CHARS: tuple[str, ...] = (" ", "\n", "\t", "\r\n")

COMMENT_VALUES: tuple[str, ...] = (
    " display: block ",
    "display: inline",
    " display: inline-block ",
    " display: none ",
    " a note ",
)


def s_chars() -> st.SearchStrategy[str]:
    """Text content: blank, padded words, or arbitrary whitespace/letter mixes."""
    whitespace: st.SearchStrategy[str] = st.lists(
        st.sampled_from(WHITESPACE_CHARS), max_size=3
    ).map("".join)
    word: st.SearchStrategy[str] = st.text(alphabet="abcé.", min_size=1, max_size=5)
    padded: st.SearchStrategy[str] = st.tuples(whitespace, word, whitespace).map("".join)
    mixed: st.SearchStrategy[str] = st.text(alphabet=" \n\tab", max_size=8)
    return st.one_of(whitespace, padded, mixed)


def s_leaf() -> st.SearchStrategy[Node]:
    """Leaf nodes: text, mustache expressions and comments."""
    return st.one_of(
        st.builds(Text, chars=s_chars()),
        st.builds(Text, chars=s_chars()),
        st.builds(MustacheExpression, path=st.just({"original": "value"})),
        st.builds(MustacheCommentStatement, value=st.sampled_from(COMMENT_VALUES)),
        st.builds(CommentStatement, value=st.sampled_from(COMMENT_VALUES)),
    )


def _body(children: list[Node]) -> Root:
    return Root(children=children, kind=NodeKind.BLOCK)


def _template(children: list[Node]) -> Root:
    return Root(children=children, kind=NodeKind.TEMPLATE)


def _extend(children: st.SearchStrategy[Node]) -> st.SearchStrategy[Node]:
    child_lists: st.SearchStrategy[list[Node]] = st.lists(children, max_size=4)
    return st.one_of(
        st.builds(Element, tag=st.sampled_from(TAGS), children=child_lists),
        st.builds(
            BlockStatement,
            path=st.just({"original": "if"}),
            program=st.builds(_body, child_lists),
            inverse=st.none() | st.builds(_body, child_lists),
        ),
    )


def s_node() -> st.SearchStrategy[Node]:
    """Any template node, nested a few levels deep."""
    return st.recursive(s_leaf(), _extend, max_leaves=12)


def s_template() -> st.SearchStrategy[Root]:
    """A ``Template`` root with a handful of top-level nodes."""
    return st.builds(_template, st.lists(s_node(), min_size=1, max_size=4))
