# topmark:header:start
#
#   project      : SpaceMark
#   file         : runner.py
#   file_relpath : src/spacemark/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run the SpaceMark preprocessing pipeline over one template tree."""

from __future__ import annotations

from typing import TYPE_CHECKING

from spacemark.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from spacemark.config.logging import SpacemarkLogger

    from .context import PreprocessContext
    from .protocols import Step

logger: SpacemarkLogger = get_logger(__name__)


def run(ctx: PreprocessContext, steps: Sequence[Step]) -> PreprocessContext:
    """Execute the pipeline sequentially.

    Args:
        ctx (PreprocessContext): Mutable processing context.
        steps (Sequence[Step]): Ordered sequence of pipeline steps.
            Each step takes and returns a context.

    Returns:
        PreprocessContext: The final processing context after all steps have run.
    """
    logger.info("whitespace_sensitivity: %s", ctx.config.whitespace_sensitivity.key)
    for step in steps:
        ctx = step(ctx)
    logger.debug("pipeline finished at stage %s", ctx.stage.name)
    return ctx
