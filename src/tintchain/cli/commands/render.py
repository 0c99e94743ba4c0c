# topmark:header:start
#
#   project      : TintChain
#   file         : render.py
#   file_relpath : src/tintchain/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 TintChain Authors
#
# topmark:header:end

"""TintChain `render` command.

Styles the space-joined TEXT arguments with a chain of styles. Styles are
applied in the order given, so the first ``--style`` is the outermost layer.
A single ``-`` reads the text from STDIN; line breaks in it are wrapped so
every line carries the full style.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click

from tintchain.cli.cli_types import ColorLevelParam
from tintchain.cli.errors import TintchainUsageError
from tintchain.cli.options import ColorMode
from tintchain.config.logging import get_logger
from tintchain.errors import UnknownStyleError

if TYPE_CHECKING:
    from typing import TextIO

    from tintchain.chalk import Chalk
    from tintchain.cli.console import ClickConsole
    from tintchain.core.levels import ColorLevel

logger = get_logger(__name__)


def read_stdin_text(stream: TextIO) -> str:
    """Read ``stream`` to the end, dropping trailing line breaks (LF or CRLF)."""
    return stream.read().rstrip("\r\n")


@click.command(
    name="render",
    help="Render TEXT through a chain of styles (first --style is outermost).",
)
@click.option(
    "-s",
    "--style",
    "styles",
    multiple=True,
    metavar="STYLE",
    help="Style to apply (repeatable). See 'tintchain styles'.",
)
@click.option(
    "--level",
    "level",
    type=ColorLevelParam(),
    default=None,
    help="Override the color level: none, basic, ansi256, truecolor (or 0-3).",
)
@click.argument("text", nargs=-1, required=True)
def render_command(
    *,
    styles: tuple[str, ...],
    level: ColorLevel | None,
    text: tuple[str, ...],
) -> None:
    """Render TEXT through the given styles.

    Args:
        styles (tuple[str, ...]): Style names, outermost first.
        level (ColorLevel | None): Optional color level override.
        text (tuple[str, ...]): Text fragments, or a single ``-`` for STDIN.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]
    palette: Chalk = ctx.obj["palette"]

    if level is not None:
        if level.enabled and ctx.obj.get("color_mode") is ColorMode.NEVER:
            console.warn(
                f"Warning: --level {level.name.lower()} overrides the disabled color mode."
            )
        # Shared config: the console follows the override too
        palette.set_level(level)

    values: list[str] = list(text)
    if values == ["-"]:
        values = [read_stdin_text(sys.stdin)]

    chalk: Chalk = palette
    try:
        for name in styles:
            chalk = chalk.with_style(name)
    except UnknownStyleError as exc:
        raise TintchainUsageError(
            f"{exc}. Run 'tintchain styles' to list available styles."
        ) from exc

    logger.trace("Rendering %d fragment(s) through %r", len(values), chalk)
    console.print(chalk(*values))
