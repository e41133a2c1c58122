# topmark:header:start
#
#   project      : SpaceMark
#   file         : protocols.py
#   file_relpath : src/spacemark/pipeline/protocols.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Structural protocol implemented by pipeline steps."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from spacemark.pipeline.context import PreprocessContext


class Step(Protocol):
    """A pipeline step: a named callable that mutates and returns the context."""

    name: str

    def __call__(self, ctx: PreprocessContext) -> PreprocessContext:
        """Run the step against ``ctx``."""
        ...
