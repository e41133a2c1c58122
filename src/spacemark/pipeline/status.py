# topmark:header:start
#
#   project      : SpaceMark
#   file         : status.py
#   file_relpath : src/spacemark/pipeline/status.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pipeline progress states.

A tree moves through the stages in order; each step requires one stage and
produces the next:

    UNCLASSIFIED → DISPLAY_ASSIGNED → SENSITIVITY_ASSIGNED → NORMALIZED
"""

from __future__ import annotations

from enum import IntEnum


class Stage(IntEnum):
    """Annotation stage reached by the tree held in a context."""

    UNCLASSIFIED = 0
    DISPLAY_ASSIGNED = 1
    SENSITIVITY_ASSIGNED = 2
    NORMALIZED = 3
