# topmark:header:start
#
#   project      : SpaceMark
#   file         : tables.py
#   file_relpath : src/spacemark/css/tables.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Default CSS `display` and `white-space` values per HTML tag name.

The values approximate the user-agent stylesheet of the HTML standard, with a
few adjustments for elements whose rendering is not expressed through
`display` alone (form controls, media elements, `<details>`). Both tables are
read-only; configuration may layer additional tags on top of them (see
[`spacemark.config.model.MutableConfig`][spacemark.config.model.MutableConfig]).
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, Mapping

CSS_DISPLAY_DEFAULT: Final[str] = "inline"
CSS_WHITE_SPACE_DEFAULT: Final[str] = "normal"

_BLOCK_TAGS: Final[tuple[str, ...]] = (
    "html",
    "body",
    "address",
    "blockquote",
    "center",
    "div",
    "figure",
    "figcaption",
    "footer",
    "form",
    "header",
    "hr",
    "legend",
    "listing",
    "main",
    "p",
    "plaintext",
    "pre",
    "xmp",
    "article",
    "aside",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "hgroup",
    "nav",
    "section",
    "dir",
    "dd",
    "dl",
    "dt",
    "menu",
    "ol",
    "ul",
    "fieldset",
    "frameset",
    "frame",
    "details",
    "summary",
    "dialog",
    "option",
    "optgroup",
    "source",
    "track",
    "script",
    "param",
)

_NONE_TAGS: Final[tuple[str, ...]] = (
    "area",
    "base",
    "basefont",
    "datalist",
    "head",
    "link",
    "meta",
    "noembed",
    "noframes",
    "rp",
    "style",
    "title",
)

_INLINE_BLOCK_TAGS: Final[tuple[str, ...]] = (
    "button",
    "input",
    "marquee",
    "meter",
    "progress",
    "object",
    "video",
    "audio",
    "select",
)

_OTHER_TAGS: Final[dict[str, str]] = {
    "li": "list-item",
    "table": "table",
    "caption": "table-caption",
    "colgroup": "table-column-group",
    "col": "table-column",
    "thead": "table-header-group",
    "tbody": "table-row-group",
    "tfoot": "table-footer-group",
    "tr": "table-row",
    "td": "table-cell",
    "th": "table-cell",
    "ruby": "ruby",
    "rt": "ruby-text",
    "template": "inline",
}


def _build_display_tags() -> dict[str, str]:
    tags: dict[str, str] = {}
    tags.update(dict.fromkeys(_NONE_TAGS, "none"))
    tags.update(dict.fromkeys(_BLOCK_TAGS, "block"))
    tags.update(dict.fromkeys(_INLINE_BLOCK_TAGS, "inline-block"))
    tags.update(_OTHER_TAGS)
    return tags


CSS_DISPLAY_TAGS: Final[Mapping[str, str]] = MappingProxyType(_build_display_tags())

CSS_WHITE_SPACE_TAGS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "listing": "pre",
        "plaintext": "pre-wrap",
        "pre": "pre",
        "xmp": "pre",
        "textarea": "pre-wrap",
        "nobr": "nowrap",
        "table": "initial",
    }
)
