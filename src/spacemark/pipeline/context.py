# topmark:header:start
#
#   project      : SpaceMark
#   file         : context.py
#   file_relpath : src/spacemark/pipeline/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Processing context for the SpaceMark preprocessing pipeline.

A [`PreprocessContext`][spacemark.pipeline.context.PreprocessContext] carries
the tree being annotated, the frozen configuration and per-step bookkeeping
from one step to the next. The tree is owned by the context for the duration
of the run and mutated in place.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from spacemark.config import Config
from spacemark.pipeline.status import Stage

if TYPE_CHECKING:
    from spacemark.ast.nodes import Node
    from spacemark.pipeline.protocols import Step

__all__: list[str] = [
    "PreprocessContext",
]


@dataclass
class PreprocessContext:
    """State of one template tree flowing through the pipeline.

    Attributes:
        root (Node): The tree being annotated (usually a ``Template`` root).
        config (Config): Effective configuration for this run.
        stage (Stage): Last stage reached by ``root``.
        steps (list[Step]): Steps that have been invoked, in order.
        visits (dict[str, int]): Number of nodes visited, per step name.
    """

    root: Node
    config: Config
    stage: Stage = Stage.UNCLASSIFIED
    steps: list[Step] = field(default_factory=lambda: [])
    visits: dict[str, int] = field(default_factory=lambda: {})

    @classmethod
    def bootstrap(cls, root: Node, config: Config | None = None) -> PreprocessContext:
        """Create a fresh context; a missing config means the defaults (``css`` mode)."""
        return cls(root=root, config=config if config is not None else Config())
