# topmark:header:start
#
#   project      : TintChain
#   file         : __init__.py
#   file_relpath : src/tintchain/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 TintChain Authors
#
# topmark:header:end

"""Style-composition engine.

Public modules:
    - tintchain.core.levels: `ColorLevel` and the shared `CapabilityConfig`.
    - tintchain.core.node: immutable `StyleNode` chains.
    - tintchain.core.composer: the `render` algorithm.

Nothing in this package performs I/O or logging.
"""

from __future__ import annotations
