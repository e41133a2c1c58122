# topmark:header:start
#
#   project      : SpaceMark
#   file         : console.py
#   file_relpath : src/spacemark/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console abstraction for user-facing program output.

This module provides a `ClickConsole` class that separates CLI output from
internal logging. Use this for messages intended for end users, while
reserving `logging` for diagnostics.
"""

from __future__ import annotations

import sys
from typing import Any, Protocol, TextIO, TypedDict

import click


class ConsoleLike(Protocol):
    """Minimal interface for a console used by CLI commands."""

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        ...

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        ...

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return a styled string (no-op if styling is disabled)."""
        ...


# This TypedDict is for documentation and type-checking on the *caller* side.
class StyleKwargs(TypedDict, total=False):
    """Keyword arguments accepted by click.style()."""

    fg: str
    bg: str
    bold: bool
    dim: bool
    underline: bool


class ClickConsole(ConsoleLike):
    """Program-output console, independent from the logger.

    Args:
        enable_color (bool): If True, enables ANSI color codes in the output.
        out (TextIO | None): Stream for standard output. Defaults to `sys.stdout`.
        err (TextIO | None): Stream for error output. Defaults to `sys.stderr`.

    Attributes:
        enable_color (bool): Whether to emit ANSI color codes.
        out (TextIO): Stream for standard output.
        err (TextIO): Stream for error output.
    """

    enable_color: bool
    out: TextIO
    err: TextIO

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr."""
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="yellow")

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="bright_red")

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return a styled string using click.style.

        Args:
            text (str): Text to style.
            **style_kwargs (Any): Subset of keyword arguments supported by click.style
                (see `StyleKwargs`).

        Returns:
            str: The styled text (or plain text if color is disabled).
        """
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)
