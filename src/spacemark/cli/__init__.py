# topmark:header:start
#
#   project      : SpaceMark
#   file         : __init__.py
#   file_relpath : src/spacemark/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SpaceMark command-line interface (Click)."""

from __future__ import annotations
