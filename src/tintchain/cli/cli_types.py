# topmark:header:start
#
#   project      : TintChain
#   file         : cli_types.py
#   file_relpath : src/tintchain/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 TintChain Authors
#
# topmark:header:end

"""Shared CLI parameter types for TintChain."""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn, Protocol

import click

from tintchain.core.levels import ColorLevel
from tintchain.errors import InvalidColorLevelError

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem as ClickCompletionItem

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    # At runtime, subclass the real Click type
    ParamTypeBase = click.ParamType  # type: ignore[assignment]


class ColorLevelParam(ParamTypeBase):
    """A Click parameter type that converts a name or digit to a `ColorLevel`."""

    name: str = "level"
    choices: list[str] = [level.name.lower() for level in ColorLevel]

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
        value: ColorLevel | str | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> ColorLevel | None:
        """Convert ``value`` to a `ColorLevel` (case-insensitive names or 0-3)."""
        if value is None:
            return None
        try:
            return ColorLevel.parse(value)
        except InvalidColorLevelError as exc:
            self._fail_noreturn(str(exc), param, ctx)

    def shell_complete(
        self,
        ctx: click.Context,  # pylint: disable=unused-argument
        param: click.Parameter,  # pylint: disable=unused-argument
        incomplete: str,
    ) -> list[ClickCompletionItem]:
        """Tab completion for Click."""
        from click.shell_completion import CompletionItem

        return [CompletionItem(c) for c in self.choices if c.startswith(incomplete.lower())]
