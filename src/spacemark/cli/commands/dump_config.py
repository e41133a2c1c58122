# topmark:header:start
#
#   project      : SpaceMark
#   file         : dump_config.py
#   file_relpath : src/spacemark/cli/commands/dump_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SpaceMark `dump-config` command.

Emits the effective SpaceMark configuration as TOML after applying defaults,
discovered config files, explicit ``--config`` files and CLI overrides. The
output is wrapped between `# === BEGIN ===` and `# === END ===` markers for
easy parsing in tests or tooling.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from spacemark.cli.cmd_common import build_config_common
from spacemark.cli.options import CONTEXT_SETTINGS, common_config_options
from spacemark.config.io import nest_under_tool_section, to_toml
from spacemark.config.keys import Toml
from spacemark.config.logging import get_logger

if TYPE_CHECKING:
    from spacemark.cli.console import ConsoleLike
    from spacemark.config import Config, WhitespaceSensitivity
    from spacemark.config.logging import SpacemarkLogger

logger: SpacemarkLogger = get_logger(__name__)

BEGIN_MARKER = "# === BEGIN ==="
END_MARKER = "# === END ==="


@click.command(
    name="dump-config",
    help="Dump the final merged SpaceMark configuration as TOML.",
    epilog=(
        "Notes:\n"
        "  • Only tags that differ from the built-in tables are listed.\n"
        "  • Output is wrapped between '# === BEGIN ===' and '# === END ===' markers."
    ),
    context_settings=CONTEXT_SETTINGS,
)
@common_config_options
@click.option(
    "--pyproject",
    "as_pyproject",
    is_flag=True,
    help="Nest the output under [tool.spacemark] for pasting into pyproject.toml.",
)
def dump_config_command(
    *,
    no_config: bool,
    config_paths: tuple[str, ...],
    whitespace_sensitivity: WhitespaceSensitivity | None,
    as_pyproject: bool,
) -> None:
    """Dump the final merged configuration as TOML.

    Args:
        no_config (bool): If True, skip loading project config files.
        config_paths (tuple[str, ...]): Additional TOML config files to merge.
        whitespace_sensitivity (WhitespaceSensitivity | None): Mode override.
        as_pyproject (bool): Nest the table under ``[tool.spacemark]``.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    config: Config = build_config_common(
        no_config=no_config,
        config_paths=config_paths,
        whitespace_sensitivity=whitespace_sensitivity,
    )
    logger.trace("Config after merging CLI and discovered config: %s", config)

    table = config.to_toml_dict()
    if as_pyproject:
        table = nest_under_tool_section(table, Toml.SECTION_TOOL_SPACEMARK)

    for path in config.config_files:
        console.print(f"# source: {path}")
    console.print(BEGIN_MARKER)
    console.print(to_toml(table).rstrip("\n"))
    console.print(END_MARKER)
