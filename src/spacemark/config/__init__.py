# topmark:header:start
#
#   project      : SpaceMark
#   file         : __init__.py
#   file_relpath : src/spacemark/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SpaceMark configuration layer.

Build a [`MutableConfig`][spacemark.config.model.MutableConfig] (defaults,
discovered files, overrides), then ``freeze()`` it into the immutable
[`Config`][spacemark.config.model.Config] consumed by the pipeline.
"""

from __future__ import annotations

from spacemark.config.model import Config, MutableConfig, WhitespaceSensitivity

__all__: list[str] = [
    "Config",
    "MutableConfig",
    "WhitespaceSensitivity",
]
