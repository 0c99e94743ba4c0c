# topmark:header:start
#
#   project      : TintChain
#   file         : level.py
#   file_relpath : src/tintchain/cli/commands/level.py
#   license      : MIT
#   copyright    : (c) 2025 TintChain Authors
#
# topmark:header:end

"""TintChain `level` command.

Prints the color level TintChain would use for stdout (or stderr), after the
``--color`` / ``--no-color`` group options are applied.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click

from tintchain.cli.options import resolve_color_level

if TYPE_CHECKING:
    from tintchain.cli.console import ClickConsole
    from tintchain.cli.options import ColorMode
    from tintchain.core.levels import ColorLevel


@click.command(
    name="level",
    help="Show the effective color level for stdout or stderr.",
)
@click.option(
    "--stderr",
    "use_stderr",
    is_flag=True,
    default=False,
    help="Detect for stderr instead of stdout.",
)
def level_command(*, use_stderr: bool) -> None:
    """Print the effective color level name (``none``, ``basic``, ...).

    Args:
        use_stderr (bool): Detect for stderr instead of stdout.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    if use_stderr:
        mode: ColorMode = ctx.obj["color_mode"]
        level: ColorLevel = resolve_color_level(mode, stream=sys.stderr)
    else:
        level = console.palette.level

    console.print(console.styled(level.name.lower(), "bold"))
