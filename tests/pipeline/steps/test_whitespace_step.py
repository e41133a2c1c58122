# topmark:header:start
#
#   project      : SpaceMark
#   file         : test_whitespace_step.py
#   file_relpath : tests/pipeline/steps/test_whitespace_step.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the `whitespace` pipeline step.

The step empties whitespace-only element bodies, keeps pre-like bodies
verbatim and otherwise splits text children into leading whitespace, content
and trailing whitespace, keeping only the content and adjacency flags.
"""

from __future__ import annotations

import pytest

from spacemark.ast.nodes import Element, Text
from spacemark.pipeline.status import Stage
from spacemark.pipeline.steps.whitespace import extract_whitespaces, split_whitespace
from tests.conftest import el, make_config, mustache, run_pipeline, template, txt

pytestmark = pytest.mark.pipeline


@pytest.mark.parametrize(
    ("chars", "expected"),
    [
        ("  a b  ", ("  ", "a b", "  ")),
        ("   ", ("   ", "", "")),
        ("", ("", "", "")),
        ("x", ("", "x", "")),
        ("\n\tx\ny \n", ("\n\t", "x\ny", " \n")),
        (" x ", (" ", "x", " ")),
    ],
)
def test_split_whitespace(chars: str, expected: tuple[str, str, str]) -> None:
    """Greedy leading run, minimal content, trailing run."""
    assert split_whitespace(chars) == expected


def test_whitespace_only_body_becomes_dangling() -> None:
    """A div holding only spaces ends up empty with has_dangling_spaces set."""
    div = el("div", txt("   "))

    ctx = run_pipeline(template(div))

    assert ctx.stage is Stage.NORMALIZED
    assert div.children == []
    assert div.annotations.has_dangling_spaces is True
    assert div.annotations.is_dangling_space_sensitive is False


def test_empty_body_has_no_dangling_spaces() -> None:
    """A childless element never had whitespace."""
    br = el("br")
    run_pipeline(template(el("p", br, txt("x"))))
    assert br.annotations.has_dangling_spaces is False
    assert br.children == []


def test_pre_body_is_kept_verbatim() -> None:
    """pre keeps its text byte for byte and is whitespace/indentation sensitive."""
    text = txt("  a\n  b  ")
    pre = el("pre", text)

    run_pipeline(template(pre))

    assert pre.annotations.is_whitespace_sensitive is True
    assert pre.annotations.is_indentation_sensitive is True
    assert pre.children == [text]
    assert text.chars == "  a\n  b  "
    assert text.annotations.has_leading_spaces is None


def test_configured_pre_like_tag_is_kept_verbatim() -> None:
    """Tags declared pre-like through configuration behave like pre."""
    text = txt(" keep ")
    code = el("code-block", text, el("span"))

    run_pipeline(template(code), make_config(white_space_tags={"code-block": "pre"}))

    assert code.annotations.is_whitespace_sensitive is True
    assert text.chars == " keep "


def test_text_is_split_and_adjacency_recorded() -> None:
    """Whitespace runs are dropped; neighbours remember they were there."""
    head = txt("  hello  world \n")
    bold = el("b", txt("x"))
    tail = txt(" tail")
    p = el("p", head, bold, tail)

    run_pipeline(template(p))

    assert p.annotations.is_whitespace_sensitive is False
    assert p.annotations.is_indentation_sensitive is False
    assert p.children == [head, bold, tail]
    assert head.chars == "hello  world"
    assert tail.chars == "tail"

    def adjacency(node: object) -> tuple[bool | None, bool | None]:
        ann = node.annotations  # type: ignore[attr-defined]
        return ann.has_leading_spaces, ann.has_trailing_spaces

    assert adjacency(head) == (True, True)
    assert adjacency(bold) == (True, True)
    assert adjacency(tail) == (True, False)


def test_whitespace_text_between_elements_is_removed() -> None:
    """A whitespace-only text sibling disappears entirely."""
    first = el("span")
    second = el("span")
    div = el("div", first, txt(" \n "), second)

    run_pipeline(template(div))

    assert div.children == [first, second]
    assert first.annotations.has_leading_spaces is False
    assert first.annotations.has_trailing_spaces is True
    assert second.annotations.has_leading_spaces is True
    assert second.annotations.has_trailing_spaces is False


def test_mustache_children_pass_through() -> None:
    """Non-text children are kept and get adjacency flags."""
    greeting = txt("Hi ")
    expr = mustache("name")
    p = el("p", greeting, expr)

    run_pipeline(template(p))

    assert p.children == [greeting, expr]
    assert greeting.chars == "Hi"
    assert greeting.annotations.has_trailing_spaces is True
    assert expr.annotations.has_leading_spaces is True
    assert expr.annotations.has_trailing_spaces is False


def test_single_padded_text_keeps_its_content() -> None:
    """A sole text child with content is trimmed, not emptied."""
    text = txt("  x  ")
    p = el("p", text)

    run_pipeline(template(p))

    assert p.children == [text]
    assert text.chars == "x"
    assert text.annotations.has_leading_spaces is True
    assert text.annotations.has_trailing_spaces is True
    assert p.annotations.has_dangling_spaces is None


def test_template_body_is_not_normalized() -> None:
    """Only elements are normalized; body containers keep their text."""
    pad = txt("\n")
    root = template(el("div"), pad)

    run_pipeline(root)

    assert root.children[1] is pad
    assert pad.chars == "\n"


def test_extract_whitespaces_directly() -> None:
    """The per-element function can be used without the pipeline."""
    node: Element = el("li", txt(" one "), txt(""))

    extract_whitespaces(node, make_config())

    assert len(node.children) == 1
    only = node.children[0]
    assert isinstance(only, Text) and only.chars == "one"
