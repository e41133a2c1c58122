# topmark:header:start
#
#   project      : SpaceMark
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SpaceMark project automation via Nox.

Sessions:
  - `lint`: Ruff lint on the repository.
  - `lint_fixall`: Ruff lint autofix.
  - `format_check`: Verify formatting (ruff).
  - `format`: Apply formatting (ruff).
  - `qa`: Per-Python session that runs pytest and pyright.
  - `property_test`: Long-running property tests (opt-in).
  - `package_check`: Build sdist/wheel and validate metadata (twine).

Common invocations:
  - `nox -s lint`
  - `nox -s qa` (runs for all configured Python versions)
"""

from __future__ import annotations

import pathlib
import sys
import warnings
from typing import TYPE_CHECKING, Any, cast

import nox

if TYPE_CHECKING:
    from collections.abc import Callable

# Handle TOML parsing based on Python version or available libraries

if sys.version_info >= (3, 11):
    # tomllib is available since Python version 3.11
    import tomllib

    _toml_loads = cast("Callable[[str], dict[str, Any]]", tomllib.loads)  # type: ignore[assignment]
else:
    import toml

    _toml_loads = cast("Callable[[str], dict[str, Any]]", toml.loads)  # type: ignore[assignment]

CURRENT_PYTHON_VERSION: str = f"{sys.version_info[0]}.{sys.version_info[1]}"

# --- Dynamic Python Version Resolution ---


def _parse_pyproject_toml() -> dict[str, Any]:
    """Parse `pyproject.toml` using stdlib TOML parsing.

    This runs at **noxfile import time**, so it must not depend on project
    runtime dependencies.

    Returns:
        dict[str, Any]: Parsed TOML document (top-level table).
    """
    path: pathlib.Path = pathlib.Path(__file__).parent / "pyproject.toml"
    if not path.exists():
        return {}
    return _toml_loads(path.read_text(encoding="utf-8"))


def get_supported_pythons() -> list[str]:
    """Resolve supported Python versions from `pyproject.toml` classifiers.

    Returns:
        list[str]: Supported versions like ["3.10", "3.11", ...], sorted.
    """
    project: Any = _parse_pyproject_toml().get("project")
    classifiers: Any = project.get("classifiers") if isinstance(project, dict) else None
    if not isinstance(classifiers, list):
        warnings.warn(
            "Could not find 'classifiers' in pyproject.toml. "
            f"Falling back to Python {CURRENT_PYTHON_VERSION}.",
            RuntimeWarning,
            stacklevel=2,
        )
        return [CURRENT_PYTHON_VERSION]

    prefix = "Programming Language :: Python :: "
    versions: list[str] = []
    for c in cast("list[str]", classifiers):
        if not c.startswith(prefix):
            continue
        parts: list[str] = c.removeprefix(prefix).strip().split(".")
        # Accept only X.Y numeric versions.
        if len(parts) != 2 or not all(p.isdigit() for p in parts):
            continue
        versions.append(f"{int(parts[0])}.{int(parts[1])}")

    # Sort numerically ("3.10" after "3.9", etc.)
    def _key(s: str) -> tuple[int, int]:
        major_s, minor_s = s.split(".")
        return int(major_s), int(minor_s)

    return sorted(set(versions), key=_key) or [CURRENT_PYTHON_VERSION]


# Resolve versions once at startup
PYTHONS: list[str] = get_supported_pythons()

# Keep defaults fast; run QA (multi-Python) explicitly or in CI.
nox.options.sessions = ["lint", "format_check"]


@nox.session(python=PYTHONS)
def qa(session: nox.Session) -> None:
    """Run tests + pyright (per Python version)."""
    session.log("Supported Python versions: " + ", ".join(PYTHONS))

    session.install("-e", ".[dev]")

    # We add *session.posargs to the end of the command
    session.run("pytest", "-q", "tests", "-m", "not hypothesis_slow", *session.posargs)

    py_ver = session.python
    if not isinstance(py_ver, str) or not py_ver:
        raise RuntimeError(f"Unexpected session.python value: {py_ver!r}")

    session.run("pyright", "--pythonversion", py_ver)


@nox.session
def lint(session: nox.Session) -> None:
    """Static analysis."""
    session.install("-e", ".[dev]")

    session.run("ruff", "check", ".")


@nox.session
def lint_fixall(session: nox.Session) -> None:
    """Run ruff with --fix (auto-fix lint issues)."""
    session.install("-e", ".[dev]")

    session.run("ruff", "check", "--fix", ".")


@nox.session
def format_check(session: nox.Session) -> None:
    """Check formatting."""
    session.install("-e", ".[dev]")

    session.run("ruff", "format", "--check", ".")


@nox.session
def format(session: nox.Session) -> None:
    """Format code (auto-fix)."""
    session.install("-e", ".[dev]")

    session.run("ruff", "format", ".")


@nox.session
def property_test(session: nox.Session) -> None:
    """Run the long-running property tests (developer only)."""
    session.install("-e", ".[test]")

    session.run("pytest", "-vv", "-m", "hypothesis_slow", "tests/pipeline", *session.posargs)


@nox.session(python=CURRENT_PYTHON_VERSION)
def package_check(session: nox.Session) -> None:
    """Build sdist/wheel and validate distribution metadata (twine)."""
    session.install("build", "twine")

    # Ensure a clean dist/ to avoid stale artifacts influencing checks.
    session.run(
        "python",
        "-c",
        "import shutil; shutil.rmtree('dist', ignore_errors=True)",
    )

    session.run("python", "-m", "build", "--sdist", "--wheel")
    session.run("twine", "check", "dist/*")
