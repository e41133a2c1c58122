# topmark:header:start
#
#   project      : SpaceMark
#   file         : errors.py
#   file_relpath : src/spacemark/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the SpaceMark CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Core errors
    ([`spacemark.core.errors`][spacemark.core.errors]) are translated here.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from spacemark.cli.exit_codes import ExitCode


class SpacemarkCliError(click.ClickException):
    """Base class for all SpaceMark CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class SpacemarkUsageError(SpacemarkCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class SpacemarkConfigError(SpacemarkCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class SpacemarkInputError(SpacemarkCliError):
    """Error for input that is not a well-formed template tree."""

    exit_code = ExitCode.INPUT_ERROR


class SpacemarkFileNotFoundError(SpacemarkCliError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class SpacemarkIOError(SpacemarkCliError):
    """Error for I/O errors reading files."""

    exit_code = ExitCode.IO_ERROR


class SpacemarkPipelineError(SpacemarkCliError):
    """Error for internal pipeline failures (step contract violation)."""

    exit_code = ExitCode.PIPELINE_ERROR
