# topmark:header:start
#
#   project      : SpaceMark
#   file         : annotate.py
#   file_relpath : src/spacemark/cli/commands/annotate.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SpaceMark `annotate` command.

Reads a template tree in the JSON Glimmer AST shape, runs the whitespace
inference pipeline over it and prints the annotated tree.

Input modes:
  * ``spacemark annotate tree.json``: read the tree from a file.
  * ``spacemark annotate -`` (or no argument): read the tree from STDIN.

Examples:
  Print an indented, annotated view of a tree:

    $ spacemark annotate tree.json

  Emit the annotated tree as JSON, with display forced to ``inline``:

    $ spacemark annotate --format json --whitespace-sensitivity strict tree.json
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from spacemark.api import preprocess
from spacemark.ast.codec import to_dict
from spacemark.cli.cmd_common import (
    STDIN_SENTINEL,
    build_config_common,
    get_effective_verbosity,
    load_tree,
)
from spacemark.cli.errors import SpacemarkPipelineError
from spacemark.cli.options import (
    CONTEXT_SETTINGS,
    OutputFormat,
    common_config_options,
    output_format_option,
)
from spacemark.config.logging import get_logger
from spacemark.core.errors import SpacemarkError
from spacemark.pipeline.pipelines import Pipeline
from spacemark.rendering.tree import render_tree

if TYPE_CHECKING:
    from spacemark.ast.nodes import Node
    from spacemark.cli.console import ConsoleLike
    from spacemark.config import Config, WhitespaceSensitivity
    from spacemark.config.logging import SpacemarkLogger

logger: SpacemarkLogger = get_logger(__name__)


@click.command(
    name="annotate",
    help="Annotate a JSON template tree with whitespace-significance flags.",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("source", required=False, default=STDIN_SENTINEL, metavar="[FILE|-]")
@common_config_options
@output_format_option
@click.option(
    "--pipeline",
    "pipeline_name",
    type=click.Choice([p.name.lower() for p in Pipeline]),
    default=Pipeline.PREPROCESS.name.lower(),
    show_default=True,
    help="Steps to run: classify (display only), annotate (no tree changes) or preprocess.",
)
def annotate_command(
    *,
    source: str,
    no_config: bool,
    config_paths: tuple[str, ...],
    whitespace_sensitivity: WhitespaceSensitivity | None,
    output_format: OutputFormat | None,
    pipeline_name: str,
) -> None:
    """Annotate a template tree and print it.

    Args:
        source (str): Input file path, or ``-`` for STDIN.
        no_config (bool): If True, skip loading project config files.
        config_paths (tuple[str, ...]): Additional TOML config files to merge.
        whitespace_sensitivity (WhitespaceSensitivity | None): Mode override.
        output_format (OutputFormat | None): ``default`` (tree view) or ``json``.
        pipeline_name (str): Name of the pipeline to run.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    config: Config = build_config_common(
        no_config=no_config,
        config_paths=config_paths,
        whitespace_sensitivity=whitespace_sensitivity,
    )
    root: Node = load_tree(source)

    try:
        preprocess(root, config, pipeline=Pipeline[pipeline_name.upper()])
    except SpacemarkError as exc:
        raise SpacemarkPipelineError(f"{source}: {exc}") from exc

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt == OutputFormat.JSON:
        console.print(json.dumps(to_dict(root), indent=2))
        return

    if get_effective_verbosity(ctx) > 0:
        label: str = "<stdin>" if source == STDIN_SENTINEL else source
        console.print(console.styled(f"SpaceMark annotations for {label}:\n", bold=True))
    for line in render_tree(root, styled=console.styled):
        console.print(line)
