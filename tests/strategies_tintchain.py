# topmark:header:start
#
#   project      : TintChain
#   file         : strategies_tintchain.py
#   file_relpath : tests/strategies_tintchain.py
#   license      : MIT
#   copyright    : (c) 2025 TintChain Authors
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for style chains and plain text."""

from __future__ import annotations

from functools import reduce

from hypothesis import strategies as st

from tintchain.core.levels import ColorLevel
from tintchain.core.node import StyleNode, extend
from tintchain.styles import lookup_style, style_names

# Text without escape characters (and without surrogates, which cannot be encoded)
s_plain_text: st.SearchStrategy[str] = st.text(
    alphabet=st.characters(exclude_characters="\x1b", exclude_categories=("Cs",)),
)

# Plain text that also has no line breaks
s_single_line_text: st.SearchStrategy[str] = st.text(
    alphabet=st.characters(exclude_characters="\x1b\r\n", exclude_categories=("Cs",)),
    min_size=1,
)

s_style_names: st.SearchStrategy[list[str]] = st.lists(
    st.sampled_from(style_names()), min_size=1, max_size=6
)

s_enabled_level: st.SearchStrategy[ColorLevel] = st.sampled_from(
    [ColorLevel.BASIC, ColorLevel.ANSI256, ColorLevel.TRUECOLOR]
)


def build_chain(names: list[str]) -> StyleNode:
    """Fold style names into a chain, first name outermost."""
    root = lookup_style(names[0])
    first: StyleNode = extend(None, root.open, root.close)
    return reduce(
        lambda chain, name: extend(chain, *lookup_style(name)),
        names[1:],
        first,
    )


s_chain: st.SearchStrategy[StyleNode] = s_style_names.map(build_chain)
