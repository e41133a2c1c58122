# topmark:header:start
#
#   project      : SpaceMark
#   file         : whitespace.py
#   file_relpath : src/spacemark/pipeline/steps/whitespace.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Whitespace extraction step.

For every element:

- a body that is empty or a single whitespace-only Text is dropped, and
  ``has_dangling_spaces`` remembers whether there was whitespace;
- otherwise the element's whitespace/indentation sensitivity is recorded and,
  unless the element is whitespace sensitive, every Text child is split into
  leading whitespace, content and trailing whitespace. Whitespace runs are
  discarded; the surviving nodes record whether whitespace was adjacent.

Sets:
  - ``Annotations.has_dangling_spaces`` on emptied elements
  - ``Annotations.is_whitespace_sensitive`` / ``is_indentation_sensitive`` on elements
  - ``Annotations.has_leading_spaces`` / ``has_trailing_spaces`` on element children
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, Union

from spacemark.ast.nodes import Element, Text
from spacemark.config.logging import get_logger
from spacemark.css.display import is_indentation_sensitive_node, is_whitespace_sensitive_node
from spacemark.pipeline.status import Stage
from spacemark.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from spacemark.ast.nodes import Node
    from spacemark.config import Config
    from spacemark.config.logging import SpacemarkLogger
    from spacemark.pipeline.context import PreprocessContext

logger: SpacemarkLogger = get_logger(__name__)

SPLIT_RE: Final[re.Pattern[str]] = re.compile(r"(\s*)(.*?)(\s*)", re.DOTALL)


@dataclass(frozen=True)
class WhitespaceRun:
    """Transient marker standing for a discarded run of whitespace."""

    chars: str


Item = Union[WhitespaceRun, "Node"]


def split_whitespace(chars: str) -> tuple[str, str, str]:
    """Split ``chars`` into leading whitespace, content and trailing whitespace.

    The leading run is greedy, so a whitespace-only string yields
    ``(chars, "", "")``. Concatenating the three parts gives back ``chars``.

    Args:
        chars (str): Raw text content.

    Returns:
        tuple[str, str, str]: ``(leading, content, trailing)``.
    """
    match = SPLIT_RE.fullmatch(chars)
    assert match is not None  # every string matches
    leading, content, trailing = match.groups()
    return leading, content, trailing


def _explode(child: Node) -> list[Item]:
    if not isinstance(child, Text):
        return [child]

    leading, content, trailing = split_whitespace(child.chars)
    items: list[Item] = []
    if leading:
        items.append(WhitespaceRun(leading))
    if content:
        child.chars = content
        items.append(child)
    if trailing:
        items.append(WhitespaceRun(trailing))
    return items


def _is_dangling_body(children: list[Node]) -> bool:
    if not children:
        return True
    return (
        len(children) == 1
        and isinstance(children[0], Text)
        and not children[0].chars.strip()
    )


def extract_whitespaces(element: Element, config: Config) -> None:
    """Normalize the direct children of ``element`` in place.

    Args:
        element (Element): The element whose children are normalized.
        config (Config): Effective configuration (white-space table).
    """
    ann = element.annotations
    children: list[Node] = element.children

    if _is_dangling_body(children):
        ann.has_dangling_spaces = bool(children) or bool(ann.has_dangling_spaces)
        element.children = []
        logger.trace("whitespace: <%s> emptied, dangling=%s", element.tag, ann.has_dangling_spaces)
        return

    ann.is_whitespace_sensitive = is_whitespace_sensitive_node(element, config)
    ann.is_indentation_sensitive = is_indentation_sensitive_node(element, config)
    if ann.is_whitespace_sensitive:
        logger.trace("whitespace: <%s> is whitespace sensitive, kept verbatim", element.tag)
        return

    items: list[Item] = [item for child in children for item in _explode(child)]
    kept: list[Node] = []
    for i, item in enumerate(items):
        if isinstance(item, WhitespaceRun):
            continue
        item_ann = item.annotations
        item_ann.has_leading_spaces = bool(item_ann.has_leading_spaces) or (
            i > 0 and isinstance(items[i - 1], WhitespaceRun)
        )
        item_ann.has_trailing_spaces = bool(item_ann.has_trailing_spaces) or (
            i < len(items) - 1 and isinstance(items[i + 1], WhitespaceRun)
        )
        kept.append(item)

    element.children = kept


class WhitespaceStep(BaseStep):
    """Extract insignificant whitespace from every element's children."""

    def __init__(self) -> None:
        super().__init__(
            name=self.__class__.__name__,
            requires=Stage.SENSITIVITY_ASSIGNED,
            produces=Stage.NORMALIZED,
        )

    def visit(self, ctx: PreprocessContext, node: Node, parent: Node | None) -> None:
        """Normalize the children of each element."""
        if isinstance(node, Element):
            extract_whitespaces(node, ctx.config)
