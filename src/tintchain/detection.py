# topmark:header:start
#
#   project      : TintChain
#   file         : detection.py
#   file_relpath : src/tintchain/detection.py
#   license      : MIT
#   copyright    : (c) 2025 TintChain Authors
#
# topmark:header:end

"""Environment-based color level detection.

This is a conventional heuristic, not a terminal database. Decision precedence:
    1. **FORCE_COLOR**: ``0``/``false`` disables color; ``1``-``3`` sets a
       minimum level; an empty value or ``true`` sets a BASIC minimum.
    2. **NO_COLOR** (set to any value, unless forced) disables color.
    3. **TTY**: a stream that is not a terminal gets no color unless forced.
    4. **TERM / COLORTERM**: ``TERM=dumb`` yields the minimum;
       ``COLORTERM=truecolor|24bit`` yields TRUECOLOR; a ``TERM`` containing
       ``256`` yields ANSI256; a color-capable ``TERM`` or any ``COLORTERM``
       yields BASIC.
    5. Otherwise the minimum (NONE unless forced).
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING, Final

from tintchain.config.logging import get_logger
from tintchain.core.levels import ColorLevel

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import TextIO

    from tintchain.config.logging import TintchainLogger

logger: TintchainLogger = get_logger(__name__)

_COLOR_TERM_PREFIXES: Final[tuple[str, ...]] = (
    "screen",
    "xterm",
    "vt100",
    "vt220",
    "rxvt",
    "tmux",
    "linux",
    "cygwin",
    "ansi",
    "color",
    "konsole",
    "alacritty",
    "kitty",
    "wezterm",
)


def resolve_force_color(env: Mapping[str, str]) -> ColorLevel | None:
    """Interpret ``FORCE_COLOR``.

    Args:
        env (Mapping[str, str]): Environment to consult.

    Returns:
        ColorLevel | None: The forced level, or ``None`` if not forced or unparsable.
    """
    if "FORCE_COLOR" not in env:
        return None
    value: str = env["FORCE_COLOR"].strip().lower()
    if value in ("", "true"):
        return ColorLevel.BASIC
    if value == "false":
        return ColorLevel.NONE
    if value.isdigit():
        return ColorLevel(min(int(value), ColorLevel.TRUECOLOR))
    logger.debug("Ignoring unrecognized FORCE_COLOR=%r", value)
    return None


def _stream_isatty(stream: TextIO | None) -> bool:
    if stream is None:
        return False
    try:
        return bool(stream.isatty())
    except (AttributeError, OSError, ValueError):
        # Detached or closed streams
        return False


def detect_color_level(
    stream: TextIO | None = None,
    *,
    env: Mapping[str, str] | None = None,
    isatty: bool | None = None,
) -> ColorLevel:
    """Determine the color level supported by an output stream.

    Args:
        stream (TextIO | None): Destination stream; defaults to `sys.stdout`.
        env (Mapping[str, str] | None): Environment mapping; defaults to `os.environ`.
        isatty (bool | None): Override for TTY detection. When ``None`` the
            stream's ``isatty()`` is used.

    Returns:
        ColorLevel: The detected level.
    """
    if env is None:
        env = os.environ
    if isatty is None:
        isatty = _stream_isatty(sys.stdout if stream is None else stream)

    forced: ColorLevel | None = resolve_force_color(env)
    if forced is ColorLevel.NONE:
        return ColorLevel.NONE
    if forced is None:
        if "NO_COLOR" in env:
            return ColorLevel.NONE
        if not isatty:
            return ColorLevel.NONE

    minimum: ColorLevel = forced or ColorLevel.NONE
    term: str = env.get("TERM", "").lower()
    colorterm: str = env.get("COLORTERM", "").lower()

    if term == "dumb":
        return minimum
    if colorterm in ("truecolor", "24bit"):
        return ColorLevel.TRUECOLOR
    if "256" in term:
        return max(ColorLevel.ANSI256, minimum)
    if term.startswith(_COLOR_TERM_PREFIXES) or "COLORTERM" in env:
        return max(ColorLevel.BASIC, minimum)
    return minimum
