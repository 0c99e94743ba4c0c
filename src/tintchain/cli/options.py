# topmark:header:start
#
#   project      : TintChain
#   file         : options.py
#   file_relpath : src/tintchain/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 TintChain Authors
#
# topmark:header:end

"""Common CLI option utilities for the TintChain CLI.

This module centralizes reusable options (verbosity, color) and their
resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Callable, ParamSpec, TypeVar

import click

from tintchain.cli.errors import TintchainUsageError
from tintchain.config.logging import TRACE_LEVEL
from tintchain.core.levels import ColorLevel
from tintchain.detection import detect_color_level

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import TextIO

P = ParamSpec("P")
R = TypeVar("R")


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Use the level detected for the output stream.
        ALWAYS: Force color; the detected level is raised to at least BASIC.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_level(
    color_mode: ColorMode | None,
    *,
    stream: TextIO | None = None,
    env: Mapping[str, str] | None = None,
    isatty: bool | None = None,
) -> ColorLevel:
    """Turn the ``--color`` intent into a concrete `ColorLevel`.

    Args:
        color_mode (ColorMode | None): Parsed ``--color`` value; ``None`` means AUTO.
        stream (TextIO | None): Stream used for detection (defaults to stdout).
        env (Mapping[str, str] | None): Environment override for detection.
        isatty (bool | None): TTY override for detection.

    Returns:
        ColorLevel: The level to use for program output.
    """
    if color_mode == ColorMode.NEVER:
        return ColorLevel.NONE
    detected: ColorLevel = detect_color_level(stream, env=env, isatty=isatty)
    if color_mode == ColorMode.ALWAYS:
        return max(detected, ColorLevel.BASIC)
    return detected


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the final logging level based on verbose and quiet counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The logging level as an integer.

    Raises:
        TintchainUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE level, two set DEBUG, one sets INFO.
        One or more -q flags set ERROR level. Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise TintchainUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return TRACE_LEVEL
    if verbose_count == 2:  # -vv
        return logging.DEBUG
    if verbose_count == 1:  # -v
        return logging.INFO
    if quiet_count >= 1:  # -q
        return logging.ERROR
    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only log errors.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with color options added.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f
