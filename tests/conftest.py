# topmark:header:start
#
#   project      : SpaceMark
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the SpaceMark test suite.

This file sets up global fixtures, tree-building helpers and the logging
configuration for test runs.

Notes:
    Tests should respect the immutable/mutable configuration split:

    - Build configs using `spacemark.config.MutableConfig` (mutable), then
      `freeze()` into a `spacemark.config.Config` for pipeline and API calls.
    - Do **not** mutate a frozen `Config`. If you need to tweak one,
      call `Config.thaw()`, edit the returned `MutableConfig`,
      then `freeze()` again.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from spacemark.ast.nodes import (
    BlockStatement,
    CommentStatement,
    Element,
    MustacheCommentStatement,
    MustacheExpression,
    NodeKind,
    Root,
    Text,
)
from spacemark.config import MutableConfig, logging
from spacemark.pipeline.context import PreprocessContext
from spacemark.pipeline.pipelines import Pipeline
from spacemark.pipeline.runner import run

if TYPE_CHECKING:
    from pathlib import Path

    from spacemark.ast.nodes import Node
    from spacemark.config import Config

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.pipeline`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_spacemark_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure SpaceMark's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("SPACEMARK_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test from an isolated project directory marked as config root.

    The directory holds a ``spacemark.toml`` with ``root = true`` so that config
    discovery never escapes into the developer's checkout.

    Args:
        tmp_path (Path): The pytest-provided temporary directory for the test.
        monkeypatch (pytest.MonkeyPatch): Fixture to change the working directory.

    Returns:
        Path: The isolated working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    (cwd / "spacemark.toml").write_text("root = true\n", encoding="utf-8")
    monkeypatch.chdir(cwd)
    return cwd


# --- Config helpers ---


def make_mutable_config(**overrides: Any) -> MutableConfig:
    """Return a mutable builder from the defaults, with attributes overridden verbatim."""
    m: MutableConfig = MutableConfig.from_defaults()
    for k, v in overrides.items():
        setattr(m, k, v)
    return m


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and overrides."""
    return make_mutable_config(**overrides).freeze()


# --- Tree builders ---


def el(tag: str, *children: Node) -> Element:
    """Build an element with the given children."""
    return Element(tag=tag, children=list(children))


def txt(chars: str) -> Text:
    """Build a text node."""
    return Text(chars=chars)


def mustache(name: str = "value") -> MustacheExpression:
    """Build a ``{{name}}`` mustache expression."""
    return MustacheExpression(path={"type": "PathExpression", "original": name})


def comment(value: str) -> CommentStatement:
    """Build an HTML comment."""
    return CommentStatement(value=value)


def mcomment(value: str) -> MustacheCommentStatement:
    """Build a ``{{! value }}`` comment."""
    return MustacheCommentStatement(value=value)


def template(*children: Node) -> Root:
    """Build a ``Template`` root."""
    return Root(children=list(children), kind=NodeKind.TEMPLATE)


def block(
    program: list[Node] | None = None,
    inverse: list[Node] | None = None,
) -> BlockStatement:
    """Build a ``{{#if}}...{{else}}...{{/if}}`` block statement."""
    return BlockStatement(
        path={"type": "PathExpression", "original": "if"},
        program=Root(children=program or [], kind=NodeKind.BLOCK),
        inverse=Root(children=inverse, kind=NodeKind.BLOCK) if inverse is not None else None,
    )


def run_pipeline(
    root: Node,
    config: Config | None = None,
    pipeline: Pipeline = Pipeline.PREPROCESS,
) -> PreprocessContext:
    """Run ``pipeline`` over ``root`` and return the final context."""
    ctx: PreprocessContext = PreprocessContext.bootstrap(root, config)
    return run(ctx, pipeline.steps)
