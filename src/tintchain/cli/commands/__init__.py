# topmark:header:start
#
#   project      : TintChain
#   file         : __init__.py
#   file_relpath : src/tintchain/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 TintChain Authors
#
# topmark:header:end

"""TintChain CLI subcommands."""

from __future__ import annotations
