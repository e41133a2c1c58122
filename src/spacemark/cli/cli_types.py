# topmark:header:start
#
#   project      : SpaceMark
#   file         : cli_types.py
#   file_relpath : src/spacemark/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Custom Click parameter types for the SpaceMark CLI."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Generic, Iterable, NoReturn, Protocol, TypeVar, cast

import click

from spacemark.core.enum_mixins import KeyedStrEnum

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem as ClickCompletionItem

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    # At runtime, subclass the real Click type
    ParamTypeBase = click.ParamType  # type: ignore[assignment]

# Type variable bounded to Enum for generic EnumChoiceParam
E = TypeVar("E", bound=Enum)


class EnumChoiceParam(ParamTypeBase, Generic[E]):
    """A Click parameter type that converts a string to a member of a given Enum.

    For [`KeyedStrEnum`][spacemark.core.enum_mixins.KeyedStrEnum] subclasses the
    member aliases are accepted too.
    """

    enum_cls: type[E]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        self.choices = [cast("str", getattr(e, "value", str(e))) for e in self.enum_cls]

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        """Raise a BadParameter with a NoReturn signature (clear to type checkers)."""
        raise click.BadParameter(message, param=param, ctx=ctx)

    def convert(
        self,
        value: str | E | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Convert a string to a member of the Enum."""
        if value is None or isinstance(value, self.enum_cls):
            return value

        raw: str = str(value)
        if issubclass(self.enum_cls, KeyedStrEnum):
            parsed = self.enum_cls.parse(raw)
            if parsed is not None:
                return cast("E", parsed)
        else:
            lookup: dict[str, E] = {
                cast("str", getattr(choice, "value", str(choice))).lower(): choice
                for choice in cast("Iterable[E]", self.enum_cls)
            }
            if raw.lower() in lookup:
                return lookup[raw.lower()]

        self._fail_noreturn(
            f"Invalid value '{raw}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )

    def shell_complete(
        self,
        ctx: click.Context,
        param: click.Parameter,
        incomplete: str,
    ) -> list[ClickCompletionItem]:
        """Tab completion for Click.

        Bash: `eval "$(_SPACEMARK_COMPLETE=bash_source spacemark)"`
        """
        from click.shell_completion import CompletionItem as RuntimeCompletionItem

        prefix = (incomplete or "").lower()
        return [RuntimeCompletionItem(val) for val in self.choices if val.lower().startswith(prefix)]

    def __repr__(self) -> str:
        """Return a string representation."""
        return f"EnumChoiceParam({self.enum_cls.__name__})"
