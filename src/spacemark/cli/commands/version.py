# topmark:header:start
#
#   project      : SpaceMark
#   file         : version.py
#   file_relpath : src/spacemark/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SpaceMark `version` command.

Prints the current SpaceMark version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from spacemark.cli.cmd_common import get_effective_verbosity
from spacemark.cli.options import OutputFormat, output_format_option
from spacemark.constants import SPACEMARK_VERSION

if TYPE_CHECKING:
    from spacemark.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of SpaceMark.",
)
@output_format_option
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of SpaceMark.

    Args:
        output_format (OutputFormat | None): Optional output format (plain text or JSON).
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt == OutputFormat.JSON:
        console.print(json.dumps({"version": SPACEMARK_VERSION}))
    elif get_effective_verbosity(ctx) > 0:
        console.print(console.styled("SpaceMark version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(SPACEMARK_VERSION, bold=True)}")
    else:
        console.print(console.styled(SPACEMARK_VERSION, bold=True))
