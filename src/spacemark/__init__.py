# topmark:header:start
#
#   project      : SpaceMark
#   file         : __init__.py
#   file_relpath : src/spacemark/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SpaceMark package.

SpaceMark infers where whitespace is significant in Handlebars/Glimmer template
trees. It annotates a parsed template with CSS-like display categories and
leading/trailing/dangling whitespace sensitivity so that a pretty-printer can
reflow markup without changing what a browser renders.
"""

from __future__ import annotations
