# topmark:header:start
#
#   project      : SpaceMark
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running SpaceMark in a controlled working directory.

`run_cli_in()` changes the process working directory to the given directory
before invoking the Click CLI, so that config discovery starts there.
"""

from __future__ import annotations

import json
import os
from typing import IO, TYPE_CHECKING, Any, Sequence

from click.testing import CliRunner, Result

from spacemark.cli.exit_codes import ExitCode
from spacemark.cli.main import cli

if TYPE_CHECKING:
    from pathlib import Path

# Keep program output free of ANSI codes regardless of the caller's environment
_ENV: dict[str, str | None] = {"FORCE_COLOR": None, "NO_COLOR": "1"}

TREE: dict[str, Any] = {
    "type": "Template",
    "body": [
        {
            "type": "ElementNode",
            "tag": "div",
            "attributes": [],
            "children": [{"type": "TextNode", "chars": " hi "}],
        },
    ],
}


def tree_json(tree: dict[str, Any] | None = None) -> str:
    """Return ``tree`` (default: a div holding padded text) as JSON text."""
    return json.dumps(tree if tree is not None else TREE)


def run_cli_in(
    cwd: Path,
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
    env: dict[str, str | None] | None = None,
) -> Result:
    """Invoke the CLI with ``cwd`` as the working directory.

    Args:
        cwd (Path): Directory used as the CWD for the command invocation.
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["annotate", "t.json"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.
        env (dict[str, str | None] | None): Extra environment overrides
            (``None`` unsets a variable).

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.
    """
    old: str = os.getcwd()
    try:
        os.chdir(cwd)
        return run_cli(argv, input_text=input_text, env=env)
    finally:
        os.chdir(old)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
    env: dict[str, str | None] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["--help"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.
        env (dict[str, str | None] | None): Extra environment overrides.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text, env={**_ENV, **(env or {})})


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli` or `run_cli_in`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert that the command exited with ``code``.

    Args:
        result (Result): The Result object returned by `run_cli` or `run_cli_in`.
        code (ExitCode): Expected exit code.
    """
    assert result.exit_code == code, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64).

    Args:
        result (Result): The Result object returned by `run_cli` or `run_cli_in`.
    """
    assert_exit(result, ExitCode.USAGE_ERROR)
