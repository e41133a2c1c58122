# topmark:header:start
#
#   project      : SpaceMark
#   file         : test_sensitivity_step.py
#   file_relpath : tests/pipeline/steps/test_sensitivity_step.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the `sensitivity` pipeline step.

The step derives leading/trailing sensitivity of container children from the
child's display, its parent's and its immediate siblings', then coalesces the
two sides of every shared edge.
"""

from __future__ import annotations

import logging

import pytest

from spacemark.core.errors import MissingAnnotationError
from spacemark.pipeline.context import PreprocessContext
from spacemark.pipeline.pipelines import Pipeline
from spacemark.pipeline.runner import run
from spacemark.pipeline.status import Stage
from spacemark.pipeline.steps.sensitivity import (
    SensitivityStep,
    is_leading_space_sensitive,
    is_trailing_space_sensitive,
)
from tests.conftest import block, el, make_config, mustache, run_pipeline, template, txt

pytestmark = pytest.mark.pipeline


def _flags(node: object) -> tuple[bool | None, bool | None]:
    ann = node.annotations  # type: ignore[attr-defined]
    return ann.is_leading_space_sensitive, ann.is_trailing_space_sensitive


def test_block_sibling_suppresses_inner_edges() -> None:
    """Whitespace touching a block-level sibling is never significant."""
    a = txt("a ")
    b = el("b", txt("bold"))
    c = txt(" c")
    span = el("span", a, b, c)
    cfg = make_config(display_tags={"b": "block"})

    run_pipeline(template(span), cfg, Pipeline.ANNOTATE)

    assert _flags(a) == (True, False)
    assert _flags(b) == (False, False)
    assert _flags(c) == (False, True)


def test_adjacent_text_and_mustache_are_mutually_sensitive() -> None:
    """The edge shared by two data-producing inline nodes is always kept."""
    first = txt("Hello ")
    expr = mustache("name")
    last = txt("!")
    p = el("p", first, expr, last)

    run_pipeline(template(el("div", p)), pipeline=Pipeline.ANNOTATE)

    assert _flags(first) == (False, True)
    assert _flags(expr) == (True, True)
    assert _flags(last) == (True, False)


def test_display_none_parent_makes_every_edge_insensitive() -> None:
    """Content of a display:none element is not rendered."""
    x = txt("x")
    inner = el("span")
    y = txt("y")
    style = el("style", x, inner, y)

    run_pipeline(template(style), pipeline=Pipeline.ANNOTATE)

    assert _flags(x) == (False, False)
    assert _flags(inner) == (False, False)
    assert _flags(y) == (False, False)


def test_display_none_keeps_the_text_mustache_edge() -> None:
    """Adjacency of text-like siblings wins over display:none."""
    x = txt("x")
    expr = mustache()
    head = el("head", x, expr)

    run_pipeline(template(head), pipeline=Pipeline.ANNOTATE)

    assert _flags(x) == (False, True)
    assert _flags(expr) == (True, False)


def test_pre_parent_makes_every_edge_sensitive() -> None:
    """Inside a pre-like element all whitespace is verbatim."""
    a = txt("a")
    b = el("div")
    c = txt("c")

    run_pipeline(template(el("pre", a, b, c)), pipeline=Pipeline.ANNOTATE)

    assert _flags(a) == (True, True)
    assert _flags(b) == (True, True)
    assert _flags(c) == (True, True)


def test_root_edges_are_insensitive() -> None:
    """Whitespace at the start or end of a template body never matters."""
    span = el("span")
    x = txt("x")

    run_pipeline(template(span, x), pipeline=Pipeline.ANNOTATE)

    assert _flags(span) == (False, True)
    assert _flags(x) == (True, False)


def test_block_bodies_are_roots_too() -> None:
    """The program of a block statement is a body container."""
    span = el("span")
    x = txt("x")

    run_pipeline(template(block(program=[span, x])), pipeline=Pipeline.ANNOTATE)

    assert span.annotations.is_leading_space_sensitive is False
    assert x.annotations.is_trailing_space_sensitive is False


def test_inline_block_parent_collapses_its_edges() -> None:
    """First and last child edges of an inline-block collapse."""
    a = txt("a")
    span = el("span")

    run_pipeline(template(el("p", el("button", a, span))), pipeline=Pipeline.ANNOTATE)

    assert a.annotations.is_leading_space_sensitive is False
    assert span.annotations.is_trailing_space_sensitive is False
    assert a.annotations.is_trailing_space_sensitive is True


def test_pre_like_child_at_an_edge_is_insensitive() -> None:
    """A pre-like first child does not keep whitespace before it."""
    pre = el("pre", txt("code"))
    x = txt("x")

    run_pipeline(template(el("span", pre, x)), pipeline=Pipeline.ANNOTATE)

    assert pre.annotations.is_leading_space_sensitive is False


@pytest.mark.parametrize(
    ("tag", "expected"),
    [("span", True), ("div", False), ("button", False), ("title", False), ("li", False)],
)
def test_sole_text_child_gets_a_dangling_flag(tag: str, expected: bool) -> None:
    """An element whose only child is text gets dangling sensitivity instead."""
    text = txt("  ")
    node = el(tag, text)

    run_pipeline(template(el("div", node, el("br"))), pipeline=Pipeline.ANNOTATE)

    assert node.annotations.is_dangling_space_sensitive is expected
    assert _flags(text) == (None, None)


def test_empty_elements_are_left_alone() -> None:
    """Childless elements get no dangling flag from this step."""
    br = el("br")
    run_pipeline(template(el("p", br, txt("x"))), pipeline=Pipeline.ANNOTATE)
    assert br.annotations.is_dangling_space_sensitive is None


def test_local_predicates_do_not_coalesce() -> None:
    """The public predicates report one side of an edge only."""
    a = txt("a ")
    b = el("div")
    span = el("span", a, b)
    run_pipeline(template(span), pipeline=Pipeline.CLASSIFY)
    cfg = make_config()

    assert is_leading_space_sensitive(b, span, cfg) is True
    assert is_trailing_space_sensitive(a, span, cfg) is False
    assert is_trailing_space_sensitive(b, span, cfg) is True


def test_predicates_require_display() -> None:
    """Sensitivity cannot be computed before display classification."""
    a = txt("a")
    span = el("span", a, el("b"))

    with pytest.raises(MissingAnnotationError):
        is_leading_space_sensitive(a, span, make_config())


def test_step_is_skipped_before_display(caplog: pytest.LogCaptureFixture) -> None:
    """Running the step on an unclassified tree is a logged no-op."""
    a = txt("a")
    root = template(el("span", a, el("b")))
    ctx = PreprocessContext.bootstrap(root)

    with caplog.at_level(logging.WARNING):
        ctx = run(ctx, (SensitivityStep(),))

    assert ctx.stage is Stage.UNCLASSIFIED
    assert a.annotations.is_leading_space_sensitive is None
    assert "skipped" in caplog.text
