# topmark:header:start
#
#   project      : SpaceMark
#   file         : model.py
#   file_relpath : src/spacemark/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model for SpaceMark.

Two classes implement the immutable/mutable split:

- [`Config`][spacemark.config.model.Config]: frozen snapshot consumed by the
  pipeline. Tag tables are read-only mappings.
- [`MutableConfig`][spacemark.config.model.MutableConfig]: builder used while
  discovering and merging layered sources (defaults → discovered config files
  → explicit files → overrides). Call ``freeze()`` right before running the
  pipeline; ``Config.thaw()`` goes the other way.

TOML shape (``spacemark.toml``, or ``[tool.spacemark]`` in ``pyproject.toml``):

```toml
whitespace_sensitivity = "css"   # css | strict | ignore

[display]
my-card = "block"

[white_space]
code-sample = "pre"
```
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping, cast

from spacemark.config.io import load_toml_dict
from spacemark.config.keys import KNOWN_KEYS, Toml
from spacemark.config.logging import get_logger
from spacemark.constants import PYPROJECT_TOML_NAME, SPACEMARK_TOML_NAME
from spacemark.core.enum_mixins import KeyedStrEnum
from spacemark.core.errors import ConfigError
from spacemark.css.tables import (
    CSS_DISPLAY_DEFAULT,
    CSS_DISPLAY_TAGS,
    CSS_WHITE_SPACE_DEFAULT,
    CSS_WHITE_SPACE_TAGS,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from spacemark.config.io import TomlTable
    from spacemark.config.logging import SpacemarkLogger

logger: SpacemarkLogger = get_logger(__name__)


class WhitespaceSensitivity(KeyedStrEnum):
    """How element display categories are resolved.

    Members:
        CSS: Look the tag up in the display table (default).
        STRICT: Treat every element as ``inline``; all surrounding whitespace matters.
        IGNORE: Treat every element as ``block``; surrounding whitespace never matters.
    """

    CSS = ("css", "Respect the default CSS display value of each tag", ("default",))
    STRICT = ("strict", "Whitespace around every element is significant")
    IGNORE = ("ignore", "Whitespace around every element is insignificant")


def _tag_table(value: Any, section: str, source: str) -> dict[str, str]:
    if not isinstance(value, dict):
        raise ConfigError(f"[{section}] must be a table of tag = value entries ({source})")
    table: dict[str, str] = {}
    for tag, css_value in cast("dict[Any, Any]", value).items():
        if not isinstance(css_value, str) or not css_value.strip():
            raise ConfigError(f"[{section}] {tag!r} must be a non-empty string ({source})")
        table[str(tag).lower()] = css_value.strip().lower()
    return table


def _css_value(value: Any, key: str, source: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{key!r} must be a non-empty string ({source})")
    return value.strip().lower()


def parse_whitespace_sensitivity(raw: Any, source: str = "<override>") -> WhitespaceSensitivity:
    """Parse a whitespace-sensitivity token, raising ``ConfigError`` on bad input.

    Args:
        raw (Any): The configured value (``"css"``, ``"strict"``, ``"ignore"``).
        source (str): Where the value came from, used in the error message.

    Returns:
        WhitespaceSensitivity: The matching mode.

    Raises:
        ConfigError: If ``raw`` is not a recognized mode.
    """
    mode: WhitespaceSensitivity | None = (
        WhitespaceSensitivity.parse(raw) if isinstance(raw, str) else None
    )
    if mode is None:
        choices: str = ", ".join(m.value for m in WhitespaceSensitivity)
        raise ConfigError(
            f"Invalid {Toml.KEY_WHITESPACE_SENSITIVITY} {raw!r} ({source}); "
            f"expected one of: {choices}"
        )
    return mode


@dataclass(frozen=True)
class Config:
    """Immutable runtime configuration for the preprocessing pipeline.

    Attributes:
        whitespace_sensitivity (WhitespaceSensitivity): Display resolution mode.
        display_tags (Mapping[str, str]): Effective tag → display table.
        white_space_tags (Mapping[str, str]): Effective tag → white-space table.
        display_default (str): Display of tags missing from ``display_tags``.
        white_space_default (str): White-space of tags missing from ``white_space_tags``.
        config_files (tuple[Path, ...]): Config files that contributed, in merge order.
    """

    whitespace_sensitivity: WhitespaceSensitivity = WhitespaceSensitivity.CSS
    display_tags: Mapping[str, str] = field(default_factory=lambda: CSS_DISPLAY_TAGS)
    white_space_tags: Mapping[str, str] = field(default_factory=lambda: CSS_WHITE_SPACE_TAGS)
    display_default: str = CSS_DISPLAY_DEFAULT
    white_space_default: str = CSS_WHITE_SPACE_DEFAULT
    config_files: tuple[Path, ...] = ()

    def display_for_tag(self, tag: str) -> str:
        """Return the table display for ``tag``, or the default category."""
        return self.display_tags.get(tag.lower(), self.display_default)

    def white_space_for_tag(self, tag: str) -> str:
        """Return the table white-space for ``tag``, or the default category."""
        return self.white_space_tags.get(tag.lower(), self.white_space_default)

    def to_toml_dict(self) -> TomlTable:
        """Return the configuration as a TOML-ready dict.

        Only tags that differ from the built-in tables are emitted under
        ``[display]`` and ``[white_space]``, so the result loads back into an
        equivalent configuration.
        """
        return {
            Toml.KEY_WHITESPACE_SENSITIVITY: self.whitespace_sensitivity.value,
            Toml.KEY_DISPLAY_DEFAULT: self.display_default,
            Toml.KEY_WHITE_SPACE_DEFAULT: self.white_space_default,
            Toml.SECTION_DISPLAY: {
                tag: value
                for tag, value in sorted(self.display_tags.items())
                if CSS_DISPLAY_TAGS.get(tag) != value
            },
            Toml.SECTION_WHITE_SPACE: {
                tag: value
                for tag, value in sorted(self.white_space_tags.items())
                if CSS_WHITE_SPACE_TAGS.get(tag) != value
            },
        }

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this configuration."""
        return MutableConfig(
            whitespace_sensitivity=self.whitespace_sensitivity,
            display_tags={
                tag: value
                for tag, value in self.display_tags.items()
                if CSS_DISPLAY_TAGS.get(tag) != value
            },
            white_space_tags={
                tag: value
                for tag, value in self.white_space_tags.items()
                if CSS_WHITE_SPACE_TAGS.get(tag) != value
            },
            display_default=self.display_default,
            white_space_default=self.white_space_default,
            config_files=list(self.config_files),
        )


@dataclass
class MutableConfig:
    """Mutable configuration builder.

    Unset scalar values are ``None`` so that a merge can tell "not configured"
    from "configured to the default". Tag tables only hold *overrides* of the
    built-in tables.
    """

    whitespace_sensitivity: WhitespaceSensitivity | None = None
    display_tags: dict[str, str] = field(default_factory=lambda: {})
    white_space_tags: dict[str, str] = field(default_factory=lambda: {})
    display_default: str | None = None
    white_space_default: str | None = None
    config_files: list[Path] = field(default_factory=lambda: [])

    def freeze(self) -> Config:
        """Return an immutable ``Config`` with the built-in tables layered under the overrides."""
        display_tags: dict[str, str] = dict(CSS_DISPLAY_TAGS)
        display_tags.update(self.display_tags)
        white_space_tags: dict[str, str] = dict(CSS_WHITE_SPACE_TAGS)
        white_space_tags.update(self.white_space_tags)
        return Config(
            whitespace_sensitivity=self.whitespace_sensitivity or WhitespaceSensitivity.CSS,
            display_tags=MappingProxyType(display_tags),
            white_space_tags=MappingProxyType(white_space_tags),
            display_default=self.display_default or CSS_DISPLAY_DEFAULT,
            white_space_default=self.white_space_default or CSS_WHITE_SPACE_DEFAULT,
            config_files=tuple(self.config_files),
        )

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a draft holding the runtime defaults."""
        return cls(
            whitespace_sensitivity=WhitespaceSensitivity.CSS,
            display_default=CSS_DISPLAY_DEFAULT,
            white_space_default=CSS_WHITE_SPACE_DEFAULT,
        )

    @classmethod
    def from_toml_dict(cls, data: TomlTable, config_file: Path | None = None) -> MutableConfig:
        """Create a draft config from a parsed TOML table.

        Args:
            data (TomlTable): The SpaceMark table (top level of ``spacemark.toml``
                or ``[tool.spacemark]``).
            config_file (Path | None): Optional path of the source file, for messages.

        Returns:
            MutableConfig: The resulting draft.

        Raises:
            ConfigError: If a value has the wrong type or an unknown mode.
        """
        source: str = str(config_file) if config_file else "<dict>"
        draft = cls()

        for key in data:
            if key not in KNOWN_KEYS:
                logger.warning("Ignoring unknown config key %r in %s", key, source)

        if Toml.KEY_WHITESPACE_SENSITIVITY in data:
            draft.whitespace_sensitivity = parse_whitespace_sensitivity(
                data[Toml.KEY_WHITESPACE_SENSITIVITY], source
            )
        if Toml.KEY_DISPLAY_DEFAULT in data:
            draft.display_default = _css_value(
                data[Toml.KEY_DISPLAY_DEFAULT], Toml.KEY_DISPLAY_DEFAULT, source
            )
        if Toml.KEY_WHITE_SPACE_DEFAULT in data:
            draft.white_space_default = _css_value(
                data[Toml.KEY_WHITE_SPACE_DEFAULT], Toml.KEY_WHITE_SPACE_DEFAULT, source
            )
        if Toml.SECTION_DISPLAY in data:
            draft.display_tags = _tag_table(data[Toml.SECTION_DISPLAY], Toml.SECTION_DISPLAY, source)
        if Toml.SECTION_WHITE_SPACE in data:
            draft.white_space_tags = _tag_table(
                data[Toml.SECTION_WHITE_SPACE], Toml.SECTION_WHITE_SPACE, source
            )
        if config_file is not None:
            draft.config_files = [config_file]
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``spacemark.toml`` and ``pyproject.toml``; for the latter
        the ``[tool.spacemark]`` table is used.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The draft config, or None if ``pyproject.toml``
                has no ``[tool.spacemark]`` table.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        toml_data: TomlTable = load_toml_dict(path)

        if path.name == PYPROJECT_TOML_NAME:
            tool_section: Any = toml_data.get(Toml.SECTION_TOOL, {}).get(
                Toml.SECTION_TOOL_SPACEMARK
            )
            if not isinstance(tool_section, dict):
                logger.debug("No [tool.spacemark] section in %s", path)
                return None
            toml_data = cast("TomlTable", tool_section)

        return cls.from_toml_dict(toml_data, config_file=path)

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files found by walking upward from ``start``.

        Files are ordered root-most first and nearest last, so that a
        left-to-right merge gives the nearest file precedence. Within one
        directory ``pyproject.toml`` comes before ``spacemark.toml``. A file
        that sets ``root = true`` stops the upward walk after its directory.

        Args:
            start (Path): The file or directory where discovery starts.

        Returns:
            list[Path]: Discovered config file paths in merge order.
        """
        per_dir: list[list[Path]] = []
        cur: Path = start.resolve()
        if cur.is_file():
            cur = cur.parent

        while True:
            root_stop_here = False
            dir_entries: list[Path] = []
            for name in (PYPROJECT_TOML_NAME, SPACEMARK_TOML_NAME):
                p: Path = cur / name
                if not p.is_file():
                    continue
                data: TomlTable = load_toml_dict(p)
                if name == PYPROJECT_TOML_NAME:
                    tool: Any = data.get(Toml.SECTION_TOOL, {}).get(Toml.SECTION_TOOL_SPACEMARK)
                    if not isinstance(tool, dict):
                        continue
                    data = cast("TomlTable", tool)
                dir_entries.append(p)
                logger.debug("Discovered config file: %s", p)
                if bool(data.get(Toml.KEY_ROOT, False)):
                    root_stop_here = True

            if dir_entries:
                per_dir.append(dir_entries)

            parent: Path = cur.parent
            if parent == cur:
                break
            if root_stop_here:
                logger.debug("Stopping upward config discovery at %s due to root=true", cur)
                break
            cur = parent

        ordered: list[Path] = []
        for dir_list in reversed(per_dir):
            ordered.extend(dir_list)
        return ordered

    @classmethod
    def load_merged(
        cls,
        *,
        start: Path | None = None,
        extra_config_files: Iterable[Path] = (),
        no_config: bool = False,
    ) -> MutableConfig:
        """Build the layered configuration: defaults → discovered → explicit files.

        Args:
            start (Path | None): Discovery anchor (defaults to the working directory).
            extra_config_files (Iterable[Path]): Explicit config files merged last.
            no_config (bool): Skip discovery of local config files.

        Returns:
            MutableConfig: The merged draft.
        """
        draft: MutableConfig = cls.from_defaults()
        discovered: list[Path] = (
            [] if no_config else cls.discover_local_config_files(start or Path.cwd())
        )
        for path in (*discovered, *extra_config_files):
            layer: MutableConfig | None = cls.from_toml_file(path)
            if layer is not None:
                draft = draft.merge_with(layer)
        logger.info("Merged config from %d file(s)", len(draft.config_files))
        return draft

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` take precedence.

        Tag tables are merged key by key; ``config_files`` are concatenated.
        """
        return MutableConfig(
            whitespace_sensitivity=other.whitespace_sensitivity or self.whitespace_sensitivity,
            display_tags={**self.display_tags, **other.display_tags},
            white_space_tags={**self.white_space_tags, **other.white_space_tags},
            display_default=other.display_default or self.display_default,
            white_space_default=other.white_space_default or self.white_space_default,
            config_files=[*self.config_files, *other.config_files],
        )

    def apply_overrides(self, overrides: Mapping[str, Any]) -> MutableConfig:
        """Apply CLI/API overrides in place and return ``self``.

        Recognized keys mirror the TOML keys; ``None`` values are ignored.

        Raises:
            ConfigError: If an override has an invalid value.
        """
        mode: Any = overrides.get(Toml.KEY_WHITESPACE_SENSITIVITY)
        if isinstance(mode, WhitespaceSensitivity):
            self.whitespace_sensitivity = mode
        elif mode is not None:
            self.whitespace_sensitivity = parse_whitespace_sensitivity(mode)
        for key, table in (
            (Toml.SECTION_DISPLAY, self.display_tags),
            (Toml.SECTION_WHITE_SPACE, self.white_space_tags),
        ):
            value: Any = overrides.get(key)
            if value is not None:
                table.update(_tag_table(value, key, "<override>"))
        return self
