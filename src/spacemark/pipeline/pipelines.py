# topmark:header:start
#
#   project      : SpaceMark
#   file         : pipelines.py
#   file_relpath : src/spacemark/pipeline/pipelines.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Named pipeline variants for SpaceMark (immutable, typed step sequences).

Pipelines are built from class-based steps that implement the
[`Step`][spacemark.pipeline.protocols.Step] protocol.

Overview
--------
- ``CLASSIFY``: display
- ``ANNOTATE``: display → sensitivity (annotations only, tree shape untouched)
- ``PREPROCESS``: display → sensitivity → whitespace (the full preprocessing)

Notes:
* Pipelines are immutable (Final[tuple[Step, ...]]) and steps are
  instantiated objects (not functions).
* Each step performs one complete depth-first traversal before the next starts.
"""

from __future__ import annotations

from enum import Enum
from typing import Final

from spacemark.pipeline.protocols import Step

from .steps import display, sensitivity, whitespace

CLASSIFY_PIPELINE: Final[tuple[Step, ...]] = (
    display.DisplayStep(),  # Assign display to every node
)

ANNOTATE_PIPELINE: Final[tuple[Step, ...]] = CLASSIFY_PIPELINE + (
    sensitivity.SensitivityStep(),  # Leading/trailing/dangling sensitivity
)

PREPROCESS_PIPELINE: Final[tuple[Step, ...]] = ANNOTATE_PIPELINE + (
    whitespace.WhitespaceStep(),  # Drop insignificant whitespace, record adjacency
)


class Pipeline(tuple[Step, ...], Enum):
    """Available preprocessing pipelines, mapped to their step sequences."""

    CLASSIFY = CLASSIFY_PIPELINE
    ANNOTATE = ANNOTATE_PIPELINE
    PREPROCESS = PREPROCESS_PIPELINE

    @property
    def steps(self) -> tuple[Step, ...]:
        """Return the instantiated, ordered step sequence for this pipeline.

        Returns:
            tuple[Step, ...]: An immutable tuple of step *instances*; the runner
            invokes them as callables in order.
        """
        return self.value
