# topmark:header:start
#
#   project      : SpaceMark
#   file         : test_preprocess_properties.py
#   file_relpath : tests/pipeline/test_preprocess_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for the preprocessing pipeline over random template trees.

Checked properties:
1) every node carries a display once the display step has run,
2) children of ``display: none`` elements have insensitive edges, except the
   edge shared by two adjacent text/mustache siblings,
3) adjacent text/mustache siblings are always mutually sensitive,
4) splitting text reconstructs the original characters,
5) normalized element bodies hold only trimmed, non-empty text,
6) a second run changes neither the tree shape nor the display/adjacency flags.
"""

from __future__ import annotations

from typing import Any

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from spacemark.ast.nodes import Element, Node, Root, Text, is_text_like
from spacemark.ast.traverse import walk
from spacemark.pipeline.pipelines import Pipeline
from spacemark.pipeline.steps.whitespace import split_whitespace
from tests.conftest import run_pipeline
from tests.strategies_spacemark import s_chars, s_template

# Mark the entire test module
pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow

PROPERTY_SETTINGS = settings(
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
    max_examples=150,
)


def _containers(root: Node) -> list[Root | Element]:
    return [node for node, _ in walk(root) if isinstance(node, (Root, Element))]


def _signature(node: Node) -> tuple[Any, ...]:
    # Leading/trailing sensitivity is left out: removed whitespace Text can
    # change the sibling an edge is measured against (see test_idempotence.py).
    ann = node.annotations
    own: tuple[Any, ...] = (
        type(node).__name__,
        getattr(node, "tag", None),
        getattr(node, "chars", None),
        ann.display,
        ann.is_whitespace_sensitive,
        ann.is_indentation_sensitive,
        bool(ann.has_leading_spaces),
        bool(ann.has_trailing_spaces),
        bool(ann.has_dangling_spaces),
    )
    kids: list[Node] = []
    if isinstance(node, (Root, Element)):
        kids = node.children
    return own + tuple(_signature(child) for child in kids) + (
        tuple(_signature(body) for body in _bodies(node)),
    )


def _bodies(node: Node) -> list[Root]:
    program: Root | None = getattr(node, "program", None)
    inverse: Root | None = getattr(node, "inverse", None)
    return [b for b in (program, inverse) if b is not None]


@PROPERTY_SETTINGS
@given(root=s_template())
def test_every_node_gets_a_display(root: Root) -> None:
    """Display classification covers the whole tree."""
    run_pipeline(root, pipeline=Pipeline.CLASSIFY)

    for node, _ in walk(root):
        assert node.display is not None


@PROPERTY_SETTINGS
@given(root=s_template())
def test_display_none_children_are_insensitive(root: Root) -> None:
    """Nothing inside a display:none element is whitespace significant."""
    run_pipeline(root, pipeline=Pipeline.ANNOTATE)

    for container in _containers(root):
        if container.display != "none" or not container.children:
            continue
        children: list[Node] = container.children
        if len(children) == 1 and isinstance(children[0], Text):
            assert container.annotations.is_dangling_space_sensitive is False
            continue
        for i, child in enumerate(children):
            prev: Node | None = children[i - 1] if i > 0 else None
            nxt: Node | None = children[i + 1] if i + 1 < len(children) else None
            ann = child.annotations
            assert ann.is_leading_space_sensitive is (is_text_like(child) and is_text_like(prev))
            assert ann.is_trailing_space_sensitive is (is_text_like(child) and is_text_like(nxt))


@PROPERTY_SETTINGS
@given(root=s_template())
def test_adjacent_text_like_siblings_are_sensitive(root: Root) -> None:
    """The edge between two text/mustache siblings is never collapsible."""
    run_pipeline(root, pipeline=Pipeline.ANNOTATE)

    for container in _containers(root):
        children: list[Node] = container.children
        for left, right in zip(children, children[1:]):
            if is_text_like(left) and is_text_like(right):
                assert left.annotations.is_trailing_space_sensitive is True
                assert right.annotations.is_leading_space_sensitive is True


@given(chars=st.one_of(s_chars(), st.text(max_size=20)))
def test_split_reconstructs_the_original(chars: str) -> None:
    """leading + content + trailing == chars, with whitespace only at the ends."""
    leading, content, trailing = split_whitespace(chars)

    assert leading + content + trailing == chars
    assert leading.strip() == ""
    assert trailing.strip() == ""
    assert content == content.strip()
    if not chars.strip():
        assert (leading, content, trailing) == (chars, "", "")


@PROPERTY_SETTINGS
@given(root=s_template())
def test_normalized_bodies_hold_trimmed_text(root: Root) -> None:
    """Outside verbatim elements, text keeps a single trimmed content run."""
    run_pipeline(root)

    for node, _ in walk(root):
        if not isinstance(node, Element):
            continue
        if node.annotations.has_dangling_spaces:
            assert node.children == []
        if node.annotations.is_whitespace_sensitive:
            continue
        for child in node.children:
            if isinstance(child, Text):
                assert child.chars
                assert child.chars == child.chars.strip()


@PROPERTY_SETTINGS
@given(root=s_template())
def test_second_run_is_structurally_idempotent(root: Root) -> None:
    """A second run extracts nothing and keeps display, white-space and has-spaces flags."""
    run_pipeline(root)
    first: tuple[Any, ...] = _signature(root)

    run_pipeline(root)

    assert _signature(root) == first
