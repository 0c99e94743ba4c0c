# topmark:header:start
#
#   project      : TintChain
#   file         : styles.py
#   file_relpath : src/tintchain/styles.py
#   license      : MIT
#   copyright    : (c) 2025 TintChain Authors
#
# topmark:header:end

"""ANSI SGR style table.

Maps snake_case style names to their ``(open, close)`` escape sequence pairs.
The composition engine treats these strings as opaque; this module is the only
place that knows their bytes.

Key types:
    - `StyleCodes`: named ``(open, close)`` pair.
    - `MODIFIERS`, `FOREGROUND`, `BACKGROUND`: read-only tables per group.
    - `ALL_STYLES`: union of the three groups.

The intensity attributes ``bold`` and ``dim`` share one close code (``22``).
`INTENSITY_CLOSE_CODES` exposes it so the renderer can special-case it without
hard-coding escape bytes.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import TYPE_CHECKING, Final, NamedTuple

from tintchain.errors import UnknownStyleError

if TYPE_CHECKING:
    from collections.abc import Mapping

ESC: Final[str] = "\x1b"

_SGR_RE: Final[re.Pattern[str]] = re.compile(r"\x1b\[[0-9;]*m")


class StyleCodes(NamedTuple):
    """Escape sequence pair for one style."""

    open: str
    close: str


def sgr(open_code: int, close_code: int) -> StyleCodes:
    """Build a `StyleCodes` pair from numeric SGR parameters.

    Args:
        open_code (int): SGR parameter that enables the style.
        close_code (int): SGR parameter that disables it.

    Returns:
        StyleCodes: The ``ESC[<n>m`` pair.
    """
    return StyleCodes(f"{ESC}[{open_code}m", f"{ESC}[{close_code}m")


_MODIFIER_CODES: Final[dict[str, tuple[int, int]]] = {
    "reset": (0, 0),
    "bold": (1, 22),
    "dim": (2, 22),
    "italic": (3, 23),
    "underline": (4, 24),
    "overline": (53, 55),
    "inverse": (7, 27),
    "hidden": (8, 28),
    "strikethrough": (9, 29),
}

_COLOR_OFFSETS: Final[dict[str, int]] = {
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "magenta": 5,
    "cyan": 6,
    "white": 7,
}

FOREGROUND_CLOSE: Final[int] = 39
BACKGROUND_CLOSE: Final[int] = 49


def _build_colors(base: int, bright_base: int, close: int, prefix: str) -> dict[str, StyleCodes]:
    table: dict[str, StyleCodes] = {}
    for name, offset in _COLOR_OFFSETS.items():
        table[f"{prefix}{name}"] = sgr(base + offset, close)
        table[f"{prefix}{name}_bright"] = sgr(bright_base + offset, close)
    # Bright black is conventionally called gray
    table[f"{prefix}gray"] = table[f"{prefix}black_bright"]
    table[f"{prefix}grey"] = table[f"{prefix}black_bright"]
    return table


MODIFIERS: Final[Mapping[str, StyleCodes]] = MappingProxyType(
    {name: sgr(*codes) for name, codes in _MODIFIER_CODES.items()}
)
FOREGROUND: Final[Mapping[str, StyleCodes]] = MappingProxyType(
    _build_colors(30, 90, FOREGROUND_CLOSE, "")
)
BACKGROUND: Final[Mapping[str, StyleCodes]] = MappingProxyType(
    _build_colors(40, 100, BACKGROUND_CLOSE, "bg_")
)
ALL_STYLES: Final[Mapping[str, StyleCodes]] = MappingProxyType(
    {**MODIFIERS, **FOREGROUND, **BACKGROUND}
)

INTENSITY_CLOSE_CODES: Final[frozenset[str]] = frozenset(
    {MODIFIERS["bold"].close, MODIFIERS["dim"].close}
)


def lookup_style(name: str) -> StyleCodes:
    """Return the escape pair for a style name.

    Args:
        name (str): A style name such as ``"red_bright"`` or ``"bg_blue"``.

    Returns:
        StyleCodes: The style's open/close pair.

    Raises:
        UnknownStyleError: If ``name`` is not in `ALL_STYLES`.
    """
    try:
        return ALL_STYLES[name]
    except KeyError:
        raise UnknownStyleError(name) from None


def style_names() -> tuple[str, ...]:
    """Return all style names in table order (modifiers, colors, backgrounds)."""
    return tuple(ALL_STYLES)


def strip_ansi(text: str) -> str:
    """Remove SGR escape sequences from ``text``."""
    return _SGR_RE.sub("", text)
