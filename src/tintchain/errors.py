# topmark:header:start
#
#   project      : TintChain
#   file         : errors.py
#   file_relpath : src/tintchain/errors.py
#   license      : MIT
#   copyright    : (c) 2025 TintChain Authors
#
# topmark:header:end

"""Exceptions raised by the TintChain builder surface.

The composition engine itself is total; these errors only come from looking up
style names and parsing color levels supplied by callers.
"""

from __future__ import annotations


class TintchainError(Exception):
    """Base class for all TintChain errors."""


class UnknownStyleError(TintchainError, AttributeError):
    """Raised when a style name is not present in the style table.

    Subclasses `AttributeError` so attribute-style chaining (``chalk.nope``)
    behaves like a missing attribute for `hasattr` and `getattr` defaults.
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown style: {name!r}")
        self.style_name: str = name


class InvalidColorLevelError(TintchainError, ValueError):
    """Raised when a color level cannot be parsed from user input."""

    def __init__(self, value: object) -> None:
        super().__init__(
            f"Invalid color level {value!r}. Must be one of: none, basic, ansi256, truecolor "
            "(or 0-3)"
        )
        self.value: object = value
