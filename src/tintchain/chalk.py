# topmark:header:start
#
#   project      : TintChain
#   file         : chalk.py
#   file_relpath : src/tintchain/chalk.py
#   license      : MIT
#   copyright    : (c) 2025 TintChain Authors
#
# topmark:header:end

"""Chainable style builder.

A `Chalk` couples a style chain (`StyleNode`, or ``None`` when unstyled) with a
`CapabilityConfig`. Adding a style returns a *new* builder that shares the
config and extends the chain by one node; calling a builder renders text.

Example:
    ```python
    from tintchain import Chalk, ColorLevel

    chalk = Chalk(ColorLevel.BASIC)
    warn = chalk.bold.yellow
    print(warn("careful:", "disk", "almost", "full"))

    err = Chalk.for_stderr()
    sys.stderr.write(err.red("Ohs noes!\\n"))
    ```

Config sharing:
    `set_level` on any builder changes the level for the root it was derived
    from and for every other builder derived from that root. Strings rendered
    earlier are plain data and are not affected.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from tintchain.config.logging import get_logger
from tintchain.core.composer import render
from tintchain.core.levels import CapabilityConfig, ColorLevel
from tintchain.core.node import StyleNode, extend
from tintchain.detection import detect_color_level
from tintchain.styles import lookup_style

if TYPE_CHECKING:
    from typing import TextIO

    from tintchain.config.logging import TintchainLogger

logger: TintchainLogger = get_logger(__name__)


class Chalk:
    """Builder for styled strings.

    Args:
        level (ColorLevel | int | str | None): Forced color level. When ``None``
            the level is detected once for ``stream``.
        stream (TextIO | None): Destination the instance renders for; only used
            for detection. Defaults to `sys.stdout`.
    """

    __slots__ = ("_chain", "_config")

    _chain: StyleNode | None
    _config: CapabilityConfig

    def __init__(
        self,
        level: ColorLevel | int | str | None = None,
        *,
        stream: TextIO | None = None,
    ) -> None:
        if level is None:
            resolved: ColorLevel = detect_color_level(stream)
            logger.debug("Detected color level %s", resolved.name)
        else:
            resolved = ColorLevel.parse(level)
            logger.trace("Using forced color level %s", resolved.name)
        self._config = CapabilityConfig(resolved)
        self._chain = None

    @classmethod
    def for_stderr(cls, level: ColorLevel | int | str | None = None) -> Chalk:
        """Return a root builder whose level is detected for `sys.stderr`."""
        return cls(level, stream=sys.stderr)

    @classmethod
    def _derive(cls, config: CapabilityConfig, chain: StyleNode) -> Chalk:
        child: Chalk = object.__new__(cls)
        child._config = config
        child._chain = chain
        return child

    # --- chaining ---

    def with_codes(self, open: str, close: str) -> Chalk:
        """Return a builder with a raw ``open``/``close`` pair applied on top.

        Args:
            open (str): Opening escape sequence.
            close (str): Closing escape sequence.

        Returns:
            Chalk: A new builder sharing this builder's config.
        """
        return self._derive(self._config, extend(self._chain, open, close))

    def with_style(self, name: str) -> Chalk:
        """Return a builder with the named style applied on top.

        Args:
            name (str): Style name from `tintchain.styles.ALL_STYLES`.

        Returns:
            Chalk: A new builder sharing this builder's config.

        Raises:
            UnknownStyleError: If ``name`` is not a known style.
        """
        codes = lookup_style(name)
        return self.with_codes(codes.open, codes.close)

    def __getattr__(self, name: str) -> Chalk:
        # Only reached for names that are not regular attributes
        if name.startswith("_"):
            raise AttributeError(name)
        return self.with_style(name)

    # --- rendering ---

    def __call__(self, *values: object) -> str:
        """Render ``values`` joined by single spaces through this builder's chain.

        Non-string values are converted with `str`, as `print` would.
        """
        return render(
            self._chain,
            self._config.level,
            [v if isinstance(v, str) else str(v) for v in values],
        )

    # --- level ---

    @property
    def level(self) -> ColorLevel:
        """Return the color level shared by this builder's family."""
        return self._config.level

    @level.setter
    def level(self, level: ColorLevel | int | str) -> None:
        self.set_level(level)

    def get_level(self) -> ColorLevel:
        """Return the color level shared by this builder's family."""
        return self._config.level

    def set_level(self, level: ColorLevel | int | str) -> None:
        """Override the color level for every builder sharing this config.

        Args:
            level (ColorLevel | int | str): New level.

        Raises:
            InvalidColorLevelError: If ``level`` does not denote a level.
        """
        resolved: ColorLevel = ColorLevel.parse(level)
        logger.debug("Color level override: %s -> %s", self._config.level.name, resolved.name)
        self._config.level = resolved

    @property
    def chain(self) -> StyleNode | None:
        """Return the innermost style node, or ``None`` if unstyled."""
        return self._chain

    @property
    def config(self) -> CapabilityConfig:
        """Return the shared capability config."""
        return self._config

    def __repr__(self) -> str:
        depth: int = 0 if self._chain is None else self._chain.depth
        return f"Chalk(level={self.level.name}, depth={depth})"
