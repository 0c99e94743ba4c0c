# topmark:header:start
#
#   project      : TintChain
#   file         : levels.py
#   file_relpath : src/tintchain/core/levels.py
#   license      : MIT
#   copyright    : (c) 2025 TintChain Authors
#
# topmark:header:end

"""Color capability levels and the configuration object that carries them.

`ColorLevel` is ordered: any level ``<= ColorLevel.NONE`` disables styling,
anything higher enables it.

`CapabilityConfig` is the single mutable object in the engine. One instance is
created per root builder and shared *by reference* with every chain derived
from it, so an override made through any of them is seen by all of them.
"""

from __future__ import annotations

from enum import IntEnum
from threading import Lock

from tintchain.errors import InvalidColorLevelError


class ColorLevel(IntEnum):
    """Degree of color support of an output destination.

    Attributes:
        NONE: No styling at all.
        BASIC: 16 basic ANSI colors and text attributes.
        ANSI256: 256-color palette.
        TRUECOLOR: 24-bit RGB colors.
    """

    NONE = 0
    BASIC = 1
    ANSI256 = 2
    TRUECOLOR = 3

    @classmethod
    def parse(cls, value: ColorLevel | int | str) -> ColorLevel:
        """Convert a name, digit or integer into a `ColorLevel`.

        Names are matched case-insensitively (``"truecolor"``, ``"ANSI256"``).

        Args:
            value (ColorLevel | int | str): The value to convert.

        Returns:
            ColorLevel: The matching level.

        Raises:
            InvalidColorLevelError: If ``value`` does not denote a level.
        """
        if isinstance(value, ColorLevel):
            return value
        if isinstance(value, str):
            text: str = value.strip()
            if text.isdigit():
                value = int(text)
            else:
                member: ColorLevel | None = cls.__members__.get(text.upper())
                if member is None:
                    raise InvalidColorLevelError(value)
                return member
        try:
            return cls(value)
        except ValueError as exc:
            raise InvalidColorLevelError(value) from exc

    @property
    def enabled(self) -> bool:
        """Return True if this level emits any escape codes."""
        return self > ColorLevel.NONE


class CapabilityConfig:
    """Shared, lock-protected holder of the active `ColorLevel`.

    Args:
        level (ColorLevel): Initial level, usually resolved by the detector.
    """

    __slots__ = ("_level", "_lock")

    def __init__(self, level: ColorLevel = ColorLevel.NONE) -> None:
        self._lock = Lock()
        self._level: ColorLevel = level

    @property
    def level(self) -> ColorLevel:
        """Return the current level."""
        with self._lock:
            return self._level

    @level.setter
    def level(self, level: ColorLevel) -> None:
        with self._lock:
            self._level = level

    def __repr__(self) -> str:
        return f"CapabilityConfig(level={self.level!r})"
