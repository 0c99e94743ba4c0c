# topmark:header:start
#
#   project      : TintChain
#   file         : node.py
#   file_relpath : src/tintchain/core/node.py
#   license      : MIT
#   copyright    : (c) 2025 TintChain Authors
#
# topmark:header:end

"""Immutable style chains.

A chain is a path of `StyleNode` objects from the innermost (most recently
applied) style up to the root. Each node records its own open/close pair and
the cumulative pair for the whole path, so rendering never has to walk the
chain to wrap text.

Nodes are never mutated and parents are shared, so one base chain can be
extended by any number of independent children:

    ```python
    base = extend(None, "\\x1b[1m", "\\x1b[22m")
    blue = extend(base, "\\x1b[34m", "\\x1b[39m")
    red = extend(base, "\\x1b[31m", "\\x1b[39m")  # `base` and `blue` are untouched
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass(frozen=True, slots=True)
class StyleNode:
    """One applied style layer.

    Attributes:
        open: Escape sequence opening this layer only.
        close: Escape sequence closing this layer only.
        open_all: Opening sequences of every layer from the root to this one.
        close_all: Closing sequences from this layer back to the root
            (innermost closes first).
        parent: The enclosing layer, or ``None`` for a root layer.
    """

    open: str
    close: str
    open_all: str
    close_all: str
    parent: StyleNode | None = None

    def lineage(self) -> Iterator[StyleNode]:
        """Iterate this node and its ancestors, innermost first.

        Yields:
            StyleNode: ``self``, then its parent, up to the root.
        """
        node: StyleNode | None = self
        while node is not None:
            yield node
            node = node.parent

    @property
    def depth(self) -> int:
        """Return the number of layers in this chain."""
        return sum(1 for _ in self.lineage())


def extend(chain: StyleNode | None, open: str, close: str) -> StyleNode:
    """Return a new node applying ``open``/``close`` on top of ``chain``.

    Args:
        chain (StyleNode | None): Current chain, or ``None`` when no style has
            been applied yet.
        open (str): Opening escape sequence of the new layer.
        close (str): Closing escape sequence of the new layer.

    Returns:
        StyleNode: The new innermost node; ``chain`` is left unchanged.
    """
    if chain is None:
        return StyleNode(open=open, close=close, open_all=open, close_all=close)
    return StyleNode(
        open=open,
        close=close,
        open_all=chain.open_all + open,
        close_all=close + chain.close_all,
        parent=chain,
    )
