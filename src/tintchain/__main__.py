# topmark:header:start
#
#   project      : TintChain
#   file         : __main__.py
#   file_relpath : src/tintchain/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 TintChain Authors
#
# topmark:header:end

"""Module entry point for running TintChain via ``python -m tintchain``.

It delegates directly to :func:`tintchain.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how TintChain is launched.

Examples:
    Render a styled string::

        python -m tintchain --color always render -s green -s bold "Hello"
"""

from __future__ import annotations

from tintchain.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
