# topmark:header:start
#
#   project      : TintChain
#   file         : __init__.py
#   file_relpath : src/tintchain/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 TintChain Authors
#
# topmark:header:end

"""Click-based command line interface for TintChain."""

from __future__ import annotations
