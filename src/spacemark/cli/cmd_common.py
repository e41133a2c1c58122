# topmark:header:start
#
#   project      : SpaceMark
#   file         : cmd_common.py
#   file_relpath : src/spacemark/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by SpaceMark CLI commands.

Builds the effective configuration from discovered/explicit config files
and CLI overrides, and reads template trees from files or STDIN, translating
core errors into [`spacemark.cli.errors`][spacemark.cli.errors] exceptions.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from spacemark.ast.codec import from_dict
from spacemark.cli.errors import (
    SpacemarkConfigError,
    SpacemarkFileNotFoundError,
    SpacemarkInputError,
    SpacemarkIOError,
)
from spacemark.config import MutableConfig
from spacemark.config.keys import Toml
from spacemark.config.logging import get_logger
from spacemark.core.errors import ConfigError, MalformedNodeError, UnknownNodeTypeError

if TYPE_CHECKING:
    from spacemark.ast.nodes import Node
    from spacemark.config import Config, WhitespaceSensitivity
    from spacemark.config.logging import SpacemarkLogger

logger: SpacemarkLogger = get_logger(__name__)

STDIN_SENTINEL = "-"


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored by the group (0 if absent)."""
    obj: Any = ctx.obj or {}
    return int(obj.get("verbosity_level", 0))


def build_config_common(
    *,
    no_config: bool,
    config_paths: tuple[str, ...] | list[str],
    whitespace_sensitivity: WhitespaceSensitivity | None,
    start: Path | None = None,
) -> Config:
    """Build the frozen configuration for a command.

    Layers: defaults → discovered config files (unless ``no_config``) →
    ``--config`` files → CLI overrides.

    Args:
        no_config (bool): Skip discovery of local config files.
        config_paths (tuple[str, ...] | list[str]): Explicit config files.
        whitespace_sensitivity (WhitespaceSensitivity | None): CLI override of the mode.
        start (Path | None): Discovery anchor (defaults to the working directory).

    Returns:
        Config: The effective configuration.

    Raises:
        SpacemarkConfigError: If a configuration value is invalid.
    """
    try:
        draft: MutableConfig = MutableConfig.load_merged(
            start=start,
            extra_config_files=[Path(p) for p in config_paths],
            no_config=no_config,
        )
        draft.apply_overrides({Toml.KEY_WHITESPACE_SENSITIVITY: whitespace_sensitivity})
    except ConfigError as exc:
        raise SpacemarkConfigError(str(exc)) from exc

    config: Config = draft.freeze()
    logger.debug("Effective config: %s", config)
    return config


def read_input_text(source: str) -> str:
    """Return the text of ``source`` (a path, or ``-`` for STDIN).

    Raises:
        SpacemarkFileNotFoundError: If the path does not exist.
        SpacemarkIOError: If the file cannot be read.
    """
    if source == STDIN_SENTINEL:
        with click.open_file(STDIN_SENTINEL) as stream:
            return stream.read()

    path = Path(source)
    if not path.exists():
        raise SpacemarkFileNotFoundError(f"No such file: {source}")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SpacemarkIOError(f"Cannot read {source}: {exc}") from exc


def load_tree(source: str) -> Node:
    """Read and deserialize a JSON template tree from ``source``.

    Args:
        source (str): File path, or ``-`` for STDIN.

    Returns:
        Node: The deserialized tree.

    Raises:
        SpacemarkInputError: If the input is not JSON or not a well-formed tree.
    """
    text: str = read_input_text(source)
    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SpacemarkInputError(f"{source}: invalid JSON: {exc}") from exc
    except RecursionError as exc:
        raise SpacemarkInputError(f"{source}: JSON nesting is too deep to decode") from exc
    try:
        return from_dict(data)
    except (MalformedNodeError, UnknownNodeTypeError) as exc:
        raise SpacemarkInputError(f"{source}: {exc}") from exc
