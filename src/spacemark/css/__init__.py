# topmark:header:start
#
#   project      : SpaceMark
#   file         : __init__.py
#   file_relpath : src/spacemark/css/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CSS layout approximations used by the whitespace inference passes.

- [`spacemark.css.tables`][spacemark.css.tables]: default tag → display and
  tag → white-space tables.
- [`spacemark.css.display`][spacemark.css.display]: predicates over display
  categories and white-space lookups for nodes.
"""

from __future__ import annotations
