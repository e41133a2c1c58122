# topmark:header:start
#
#   project      : SpaceMark
#   file         : keys.py
#   file_relpath : src/spacemark/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML key names for SpaceMark configuration.

These constants are the external configuration schema as it appears in
``spacemark.toml`` and in ``[tool.spacemark]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by SpaceMark configuration."""

    # Root / discovery
    KEY_ROOT: Final[str] = "root"

    # pyproject.toml nesting: [tool.spacemark]
    SECTION_TOOL: Final[str] = "tool"
    SECTION_TOOL_SPACEMARK: Final[str] = "spacemark"

    # Top-level keys
    KEY_WHITESPACE_SENSITIVITY: Final[str] = "whitespace_sensitivity"
    KEY_DISPLAY_DEFAULT: Final[str] = "display_default"
    KEY_WHITE_SPACE_DEFAULT: Final[str] = "white_space_default"

    # [display] tag -> CSS display
    SECTION_DISPLAY: Final[str] = "display"

    # [white_space] tag -> CSS white-space
    SECTION_WHITE_SPACE: Final[str] = "white_space"


KNOWN_KEYS: Final[frozenset[str]] = frozenset(
    {
        Toml.KEY_ROOT,
        Toml.KEY_WHITESPACE_SENSITIVITY,
        Toml.KEY_DISPLAY_DEFAULT,
        Toml.KEY_WHITE_SPACE_DEFAULT,
        Toml.SECTION_DISPLAY,
        Toml.SECTION_WHITE_SPACE,
    }
)
