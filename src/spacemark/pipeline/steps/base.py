# topmark:header:start
#
#   project      : SpaceMark
#   file         : base.py
#   file_relpath : src/spacemark/pipeline/steps/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Base class for class-based pipeline steps.

The runner invokes steps as *callables*. `BaseStep` implements the common
lifecycle:

    ctx = step(ctx)  # internally: may_proceed → run → advance stage

The default ``run()`` performs one full depth-first traversal of the tree and
calls ``visit()`` for every node, parents before children.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from spacemark.ast.traverse import traverse
from spacemark.config.logging import get_logger
from spacemark.pipeline.status import Stage

if TYPE_CHECKING:
    from spacemark.ast.nodes import Node
    from spacemark.config.logging import SpacemarkLogger
    from spacemark.pipeline.context import PreprocessContext

logger: SpacemarkLogger = get_logger(__name__)


@dataclass
class BaseStep:
    """Reusable foundation for pipeline steps.

    Subclass this and override ``visit()`` (or ``run()`` for steps that do not
    walk the tree node by node).

    Attributes:
        name (str): Stable step identifier for logs and bookkeeping.
        requires (Stage): Stage the tree must have reached for the step to run.
        produces (Stage): Stage the tree reaches once the step has run.
    """

    name: str
    requires: Stage = Stage.UNCLASSIFIED
    produces: Stage = Stage.UNCLASSIFIED

    def __call__(self, ctx: PreprocessContext) -> PreprocessContext:
        """Invoke the step lifecycle: gate → run (if allowed) → advance stage.

        Args:
            ctx (PreprocessContext): The processing context of the current tree.

        Returns:
            PreprocessContext: The same context instance after mutation.
        """
        ctx.steps.append(self)

        if not self.may_proceed(ctx):
            logger.warning(
                "BaseStep: Pipeline step %s skipped: requires stage %s, tree is at %s",
                self.name,
                self.requires.name,
                ctx.stage.name,
            )
            return ctx

        logger.info("BaseStep: Pipeline step %s - running", self.name)
        self.run(ctx)
        ctx.stage = max(ctx.stage, self.produces)
        logger.debug("BaseStep: %s visited %d node(s)", self.name, ctx.visits.get(self.name, 0))
        return ctx

    def may_proceed(self, ctx: PreprocessContext) -> bool:
        """Return whether the step should run given the current context.

        Args:
            ctx (PreprocessContext): The processing context.

        Returns:
            bool: True when the tree has reached the ``requires`` stage.
        """
        return ctx.stage >= self.requires

    def run(self, ctx: PreprocessContext) -> None:
        """Walk the tree once, calling ``visit()`` for each node.

        Args:
            ctx (PreprocessContext): The processing context.
        """
        ctx.visits[self.name] = traverse(
            ctx.root, lambda node, parent: self.visit(ctx, node, parent)
        )

    def visit(self, ctx: PreprocessContext, node: Node, parent: Node | None) -> None:
        """Handle a single node (no-op by default).

        Args:
            ctx (PreprocessContext): The processing context.
            node (Node): The node being visited.
            parent (Node | None): Its parent, or None for the root.
        """
        pass
