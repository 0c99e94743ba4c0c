# topmark:header:start
#
#   project      : TintChain
#   file         : version.py
#   file_relpath : src/tintchain/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 TintChain Authors
#
# topmark:header:end

"""TintChain `version` command.

Prints the current TintChain version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from tintchain.constants import TINTCHAIN_VERSION

if TYPE_CHECKING:
    from tintchain.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of TintChain.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (text, json).",
)
def version_command(*, output_format: str = "text") -> None:
    """Show the current version of TintChain.

    Args:
        output_format (str): ``text`` (default) or ``json``.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    if output_format == "json":
        console.print(json.dumps({"version": TINTCHAIN_VERSION}))
    else:
        console.print(console.styled(TINTCHAIN_VERSION, "bold"))
