# topmark:header:start
#
#   project      : SpaceMark
#   file         : errors.py
#   file_relpath : src/spacemark/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the SpaceMark core.

These errors are UI-agnostic. The CLI translates them into
[`spacemark.cli.errors`][spacemark.cli.errors] exceptions with exit codes.

Hierarchy:
    SpacemarkError
      ├── UnknownNodeTypeError  (also a ``TypeError``)
      ├── MalformedNodeError    (also a ``ValueError``)
      ├── ConfigError           (also a ``ValueError``)
      └── MissingAnnotationError (also a ``RuntimeError``)
"""

from __future__ import annotations


class SpacemarkError(Exception):
    """Base class for all SpaceMark core errors."""


class UnknownNodeTypeError(SpacemarkError, TypeError):
    """A node kind the traversal or the codec does not recognize.

    Attributes:
        node_type (str): The offending type name (glimmer ``type`` or Python class name).
    """

    def __init__(self, node_type: str) -> None:
        super().__init__(f"Unknown template node type: {node_type!r}")
        self.node_type = node_type


class MalformedNodeError(SpacemarkError, ValueError):
    """A serialized node is missing a required field or has an ill-typed one."""


class ConfigError(SpacemarkError, ValueError):
    """Invalid configuration value or unreadable configuration file."""


class MissingAnnotationError(SpacemarkError, RuntimeError):
    """A step read an annotation that an earlier step should have written.

    Typically raised when the sensitivity predicates are called on a tree
    that has not been through display classification.
    """
