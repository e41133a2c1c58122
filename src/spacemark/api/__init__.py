# topmark:header:start
#
#   project      : SpaceMark
#   file         : __init__.py
#   file_relpath : src/spacemark/api/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public SpaceMark API (stable surface).

A small, typed API for integrations (formatters, editors, tests) that want to
run the whitespace inference programmatically without going through the CLI.

Notes:
-----
- ``preprocess()`` annotates a [`Node`][spacemark.ast.nodes.Node] tree **in
  place** and returns it; ``preprocess_dict()`` does the same for the
  JSON-shaped Glimmer AST and returns a new annotated mapping.
- No configuration files are read here. The ``config`` parameter accepts a
  frozen [`Config`][spacemark.config.Config], a plain mapping mirroring the
  TOML shape, or ``None`` (``css`` mode with the built-in tables).

```python
from spacemark import api

tree = api.preprocess_dict(
    {"type": "Template", "body": [...]},
    config={"whitespace_sensitivity": "strict", "display": {"my-card": "block"}},
)
```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from spacemark.ast.codec import from_dict, to_dict
from spacemark.config import Config, MutableConfig
from spacemark.config.logging import get_logger
from spacemark.constants import SPACEMARK_VERSION
from spacemark.pipeline.context import PreprocessContext
from spacemark.pipeline.pipelines import Pipeline
from spacemark.pipeline.runner import run

if TYPE_CHECKING:
    from collections.abc import Mapping

    from spacemark.ast.nodes import Node
    from spacemark.config.logging import SpacemarkLogger

__all__: list[str] = [
    "Pipeline",
    "get_version",
    "preprocess",
    "preprocess_dict",
    "resolve_config",
]

logger: SpacemarkLogger = get_logger(__name__)


def get_version() -> str:
    """Return the installed SpaceMark version."""
    return SPACEMARK_VERSION


def resolve_config(config: Config | Mapping[str, Any] | None = None) -> Config:
    """Normalize the ``config`` argument of the public functions.

    Args:
        config (Config | Mapping[str, Any] | None): A frozen config, a mapping
            in the TOML shape, or None for the defaults.

    Returns:
        Config: The frozen configuration to run with.

    Raises:
        ConfigError: If the mapping holds an invalid value.
    """
    if isinstance(config, Config):
        return config
    draft: MutableConfig = MutableConfig.from_defaults()
    if config is not None:
        draft = draft.merge_with(MutableConfig.from_toml_dict(dict(config)))
    return draft.freeze()


def preprocess(
    root: Node,
    config: Config | Mapping[str, Any] | None = None,
    *,
    pipeline: Pipeline = Pipeline.PREPROCESS,
) -> Node:
    """Annotate ``root`` in place.

    Args:
        root (Node): The template tree (normally a ``Template`` root).
        config (Config | Mapping[str, Any] | None): Configuration, see
            [`resolve_config`][spacemark.api.resolve_config].
        pipeline (Pipeline): Steps to run; defaults to the full preprocessing.

    Returns:
        Node: ``root``, annotated (and normalized by the whitespace step).

    Raises:
        UnknownNodeTypeError: If the tree holds an object that is not a template node.
    """
    ctx: PreprocessContext = PreprocessContext.bootstrap(root, resolve_config(config))
    ctx = run(ctx, pipeline.steps)
    return ctx.root


def preprocess_dict(
    data: Mapping[str, Any],
    config: Config | Mapping[str, Any] | None = None,
    *,
    pipeline: Pipeline = Pipeline.PREPROCESS,
) -> dict[str, Any]:
    """Annotate a JSON-shaped Glimmer AST.

    Args:
        data (Mapping[str, Any]): The serialized tree.
        config (Config | Mapping[str, Any] | None): Configuration.
        pipeline (Pipeline): Steps to run.

    Returns:
        dict[str, Any]: The annotated tree, serialized back to the Glimmer shape.

    Raises:
        MalformedNodeError: If ``data`` is not a well-formed tree.
        UnknownNodeTypeError: If ``data`` holds an unknown node type.
    """
    return to_dict(preprocess(from_dict(data), config, pipeline=pipeline))
