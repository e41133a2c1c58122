# topmark:header:start
#
#   project      : SpaceMark
#   file         : test_config_toml_io.py
#   file_relpath : tests/config/test_config_toml_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for TOML rendering and loading helpers in `spacemark.config.io`."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import tomlkit

from spacemark.config import Config, MutableConfig
from spacemark.config.io import load_toml_dict, nest_under_tool_section, to_toml
from tests.conftest import make_config

if TYPE_CHECKING:
    from pathlib import Path


def test_to_toml_drops_none_values() -> None:
    """TOML has no null; None entries are omitted."""
    text: str = to_toml({"a": 1, "b": None, "t": {"x": "y", "z": None}})
    parsed: Any = tomlkit.parse(text).unwrap()
    assert parsed == {"a": 1, "t": {"x": "y"}}


def test_nest_under_tool_section() -> None:
    """The table is wrapped as [tool.<name>]."""
    nested = nest_under_tool_section({"whitespace_sensitivity": "css"}, "spacemark")
    text: str = to_toml(nested)

    assert "[tool.spacemark]" in text
    assert tomlkit.parse(text).unwrap() == {"tool": {"spacemark": {"whitespace_sensitivity": "css"}}}


def test_config_survives_a_toml_round_trip(tmp_path: Path) -> None:
    """Dumping a config and loading the dump yields an equivalent config."""
    cfg: Config = make_config(
        display_tags={"my-card": "block", "div": "inline"},
        white_space_tags={"code-sample": "pre"},
    )
    path: Path = tmp_path / "spacemark.toml"
    path.write_text(to_toml(cfg.to_toml_dict()), encoding="utf-8")

    loaded: MutableConfig | None = MutableConfig.from_toml_file(path)

    assert loaded is not None
    again: Config = MutableConfig.from_defaults().merge_with(loaded).freeze()
    assert again.display_tags == cfg.display_tags
    assert again.white_space_tags == cfg.white_space_tags
    assert again.whitespace_sensitivity is cfg.whitespace_sensitivity


def test_to_toml_dict_lists_only_overrides() -> None:
    """Built-in table entries are not repeated in the dump."""
    data = make_config(display_tags={"my-card": "block"}).to_toml_dict()
    assert data["display"] == {"my-card": "block"}
    assert data["white_space"] == {}
    assert data["whitespace_sensitivity"] == "css"


def test_load_toml_dict_missing_file_returns_empty(tmp_path: Path) -> None:
    """I/O errors are logged and yield an empty table."""
    assert load_toml_dict(tmp_path / "missing.toml") == {}
