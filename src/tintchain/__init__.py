# topmark:header:start
#
#   project      : TintChain
#   file         : __init__.py
#   file_relpath : src/tintchain/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 TintChain Authors
#
# topmark:header:end

"""TintChain package.

TintChain applies nested, composable ANSI styles to strings. Styles are chained
on a builder (``Chalk(...).green.bold``) and rendered once text is supplied;
nested renders keep the outer style alive after an inner style closes, and
styling is closed around every line break.

Example:
    ```python
    from tintchain import Chalk, ColorLevel

    chalk = Chalk(ColorLevel.BASIC)
    print(chalk.green("green " + chalk.blue.underline("blue") + " green again"))
    ```
"""

from __future__ import annotations

from tintchain.chalk import Chalk
from tintchain.core.levels import CapabilityConfig, ColorLevel
from tintchain.core.node import StyleNode, extend
from tintchain.errors import InvalidColorLevelError, TintchainError, UnknownStyleError

__all__ = [
    "CapabilityConfig",
    "Chalk",
    "ColorLevel",
    "InvalidColorLevelError",
    "StyleNode",
    "TintchainError",
    "UnknownStyleError",
    "extend",
]
