# topmark:header:start
#
#   project      : TintChain
#   file         : main.py
#   file_relpath : src/tintchain/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 TintChain Authors
#
# topmark:header:end

"""TintChain Click CLI: group-level options plus subcommands.

Key ideas:
- Group-level options (verbosity, color) are resolved once and placed into ``ctx.obj``.
- The resolved color level lives in one root `Chalk` (``ctx.obj["palette"]``);
  subcommands derive their styles from it, so a per-command ``--level``
  override is seen by the console as well.
"""

from __future__ import annotations

import sys

import click

from tintchain.chalk import Chalk
from tintchain.cli.commands.level import level_command
from tintchain.cli.commands.render import render_command
from tintchain.cli.commands.styles import styles_command
from tintchain.cli.commands.version import version_command
from tintchain.cli.console import ClickConsole
from tintchain.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_level,
    resolve_verbosity,
)
from tintchain.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Initialize shared state (logging & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (str | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    # Internal logging: TINTCHAIN_LOG_LEVEL wins, then -v/-q
    level_cli: int = resolve_verbosity(verbose, quiet)
    level_log: int | None = resolve_env_log_level()
    if level_log is None and (verbose or quiet):
        level_log = level_cli
    setup_logging(level=level_log)

    effective_mode: ColorMode = (
        ColorMode.NEVER if no_color else ColorMode(color_mode or ColorMode.AUTO)
    )
    color_level = resolve_color_level(effective_mode, stream=sys.stdout)
    logger.debug("Color mode %s resolved to level %s", effective_mode.value, color_level.name)

    palette = Chalk(color_level)
    ctx.obj["color_mode"] = effective_mode
    ctx.obj["palette"] = palette
    ctx.obj["console"] = ClickConsole(palette)
    ctx.color = palette.level.enabled


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="TintChain: nested ANSI styling for terminal text.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the TintChain CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'tintchain render -s STYLE TEXT...' to style text.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(render_command)

cli.add_command(styles_command)

cli.add_command(level_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
