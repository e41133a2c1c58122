# topmark:header:start
#
#   project      : SpaceMark
#   file         : io.py
#   file_relpath : src/spacemark/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load and render TOML configuration sources.

Parsing and rendering are done with `tomlkit`; callers work with plain
``dict`` structures (`TomlTable`).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from spacemark.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from spacemark.config.logging import SpacemarkLogger

TomlTable = dict[str, Any]

logger: SpacemarkLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``spacemark.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def _strip_none_for_toml(value: object) -> object:
    """Remove TOML-incompatible `None` from mappings (TOML has no `null`)."""
    if isinstance(value, Mapping):
        m: Mapping[object, object] = cast("Mapping[object, object]", value)
        return {str(k): _strip_none_for_toml(v) for k, v in m.items() if v is not None}
    return value


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML mapping to a string.

    Args:
        toml_dict (TomlTable): TOML mapping to render.

    Returns:
        str: The rendered TOML document as a string.
    """
    cleaned: Any = _strip_none_for_toml(toml_dict)
    return cast("str", cast("Any", tomlkit).dumps(cast("Mapping[str, Any]", cleaned)))


def nest_under_tool_section(toml_dict: TomlTable, name: str) -> TomlTable:
    """Wrap ``toml_dict`` as ``[tool.<name>]`` for inclusion in ``pyproject.toml``."""
    return {"tool": {name: toml_dict}}
