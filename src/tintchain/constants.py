# topmark:header:start
#
#   project      : TintChain
#   file         : constants.py
#   file_relpath : src/tintchain/constants.py
#   license      : MIT
#   copyright    : (c) 2025 TintChain Authors
#
# topmark:header:end

"""TintChain Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

TINTCHAIN_VERSION: str = get_version("tintchain")
