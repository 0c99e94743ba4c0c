# topmark:header:start
#
#   project      : TintChain
#   file         : __init__.py
#   file_relpath : src/tintchain/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 TintChain Authors
#
# topmark:header:end

"""Runtime configuration helpers for TintChain (logging setup)."""

from __future__ import annotations
