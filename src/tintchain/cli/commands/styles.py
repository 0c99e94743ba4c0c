# topmark:header:start
#
#   project      : TintChain
#   file         : styles.py
#   file_relpath : src/tintchain/cli/commands/styles.py
#   license      : MIT
#   copyright    : (c) 2025 TintChain Authors
#
# topmark:header:end

"""TintChain `styles` command.

Lists every style name, each rendered in its own style.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tintchain.styles import BACKGROUND, FOREGROUND, MODIFIERS

if TYPE_CHECKING:
    from collections.abc import Mapping

    from tintchain.cli.console import ClickConsole
    from tintchain.styles import StyleCodes

_GROUPS: dict[str, Mapping[str, StyleCodes]] = {
    "modifiers": MODIFIERS,
    "foreground": FOREGROUND,
    "background": BACKGROUND,
}


@click.command(
    name="styles",
    help="List the available style names.",
)
@click.option(
    "--group",
    "groups",
    type=click.Choice(list(_GROUPS)),
    multiple=True,
    help="Only list styles from this group (repeatable).",
)
def styles_command(*, groups: tuple[str, ...]) -> None:
    """List style names, one per line, each shown in its own style.

    Args:
        groups (tuple[str, ...]): Groups to list; all groups when empty.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    for group in groups or tuple(_GROUPS):
        for name in _GROUPS[group]:
            console.print(console.styled(name, name))
