# topmark:header:start
#
#   project      : SpaceMark
#   file         : constants.py
#   file_relpath : src/spacemark/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SpaceMark Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

SPACEMARK_VERSION: str = get_version("spacemark")

# Config file names looked up during discovery
SPACEMARK_TOML_NAME: str = "spacemark.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"

# Environment variable consulted by `setup_logging()`
LOG_LEVEL_ENV_VAR: str = "SPACEMARK_LOG_LEVEL"
