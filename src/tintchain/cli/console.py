# topmark:header:start
#
#   project      : TintChain
#   file         : console.py
#   file_relpath : src/tintchain/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 TintChain Authors
#
# topmark:header:end

"""Console abstraction for user-facing program output.

This module provides a `ClickConsole` class that separates CLI output from
internal logging. Use this for messages intended for end users, while
reserving `logging` for diagnostics.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Protocol, TextIO

import click

from tintchain.core.levels import ColorLevel

if TYPE_CHECKING:
    from tintchain.chalk import Chalk


class ConsoleLike(Protocol):
    """Minimal interface for a console used by CLI commands."""

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        ...

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        ...

    def styled(self, text: str, *styles: str) -> str:
        """Return a styled string (no-op if styling is disabled)."""
        ...


class ClickConsole(ConsoleLike):
    """Program-output console, independent from the logger.

    Args:
        palette (Chalk): Root builder used for styling; its level decides
            whether ANSI codes are emitted.
        out (TextIO | None): The text stream to use for standard output.
            Defaults to `sys.stdout`.
        err (TextIO | None): The text stream to use for error output.
            Defaults to `sys.stderr`.
    """

    palette: Chalk
    out: TextIO | None
    err: TextIO | None

    def __init__(
        self,
        palette: Chalk,
        *,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.palette = palette
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    @property
    def enable_color(self) -> bool:
        """Return True if the palette currently emits ANSI codes."""
        return self.palette.level > ColorLevel.NONE

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout.

        Args:
            text (str): Message text.
            nl (bool): If True, append a newline.
        """
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr.

        Args:
            text (str): Warning text.
            nl (bool): If True, append a newline.
        """
        click.echo(self.styled(text, "yellow"), nl=nl, file=self.err, color=self.enable_color)

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr.

        Args:
            text (str): Error text.
            nl (bool): If True, append a newline.
        """
        click.echo(text, nl=nl, file=self.err, color=self.enable_color)

    def styled(self, text: str, *styles: str) -> str:
        """Return ``text`` rendered through the named styles (outermost first).

        Args:
            text (str): Text to style.
            *styles (str): Style names from `tintchain.styles`.

        Returns:
            str: The styled text (or plain text if color is disabled).
        """
        chalk = self.palette
        for name in styles:
            chalk = chalk.with_style(name)
        return chalk(text)
