# topmark:header:start
#
#   project      : SpaceMark
#   file         : options.py
#   file_relpath : src/spacemark/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the SpaceMark CLI.

This module centralizes reusable options (verbosity, color, configuration,
output format) and their resolution logic, so commands and groups can stay
thin. The helpers here are Click-aware.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from spacemark.cli.cli_types import EnumChoiceParam
from spacemark.cli.errors import SpacemarkUsageError
from spacemark.config.logging import TRACE_LEVEL
from spacemark.config.model import WhitespaceSensitivity

P = ParamSpec("P")
R = TypeVar("R")

# Verbosity levels, mapped to standard logging levels
LOG_LEVELS = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

#: Click context settings shared by all commands.
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Members:
      DEFAULT: Human-friendly text output; may include ANSI color if enabled.
      JSON: Machine-readable JSON (never colored).
    """

    DEFAULT = "default"
    JSON = "json"


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the final logging level based on verbose and quiet counts.

    Args:
        verbose_count (int): Number of times the verbose flag (-v) is passed.
        quiet_count (int): Number of times the quiet flag (-q) is passed.

    Returns:
        int: The logging level.

    Raises:
        SpacemarkUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE level, two set DEBUG, one sets INFO.
        One or more -q flags set ERROR level. Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise SpacemarkUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return LOG_LEVELS["TRACE"]
    if verbose_count == 2:  # -vv
        return LOG_LEVELS["DEBUG"]
    if verbose_count == 1:  # -v
        return LOG_LEVELS["INFO"]

    if quiet_count >= 1:  # -q
        return LOG_LEVELS["ERROR"]

    return LOG_LEVELS["WARNING"]


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    output_format: str | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Args:
        cli_mode (ColorMode | None): Explicit color mode from CLI options.
        output_format (str | None): Output format string, e.g. "json".
        stdout_isatty (bool | None): Whether stdout is a TTY; if None, auto-detected.

    Returns:
        bool: True if color output should be enabled, False otherwise.

    Behavior:
        Disables color for JSON output. Honors ``--color``/``--no-color``, then
        the FORCE_COLOR and NO_COLOR environment variables. Defaults to enabling
        color if stdout is a TTY.
    """
    if output_format and output_format.lower() == OutputFormat.JSON.value:
        return False
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` (counted, mutually exclusive)."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress output.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` (auto, always, never) and ``--no-color``."""
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--no-config``, ``--config`` and ``--whitespace-sensitivity``.

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function.
    """
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore local project config files (only use defaults).",
    )(f)
    f = click.option(
        "--config",
        "config_paths",
        multiple=True,
        metavar="FILE",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True),
        help="Additional config file(s) to load and merge.",
    )(f)
    f = click.option(
        "--whitespace-sensitivity",
        "whitespace_sensitivity",
        type=EnumChoiceParam(WhitespaceSensitivity),
        default=None,
        help=(
            "How element display is resolved: "
            f"{', '.join(m.value for m in WhitespaceSensitivity)} (default: css)."
        ),
    )(f)
    return f


def output_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--format`` (default, json)."""
    return click.option(
        "--format",
        "output_format",
        type=EnumChoiceParam(OutputFormat),
        default=None,
        help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
    )(f)
