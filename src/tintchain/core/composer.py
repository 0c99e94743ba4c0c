# topmark:header:start
#
#   project      : TintChain
#   file         : composer.py
#   file_relpath : src/tintchain/core/composer.py
#   license      : MIT
#   copyright    : (c) 2025 TintChain Authors
#
# topmark:header:end

"""Render text through a style chain.

`render` is a pure function of its inputs. Its steps, in order:

1. Join the input strings with single spaces (``""`` for no input).
2. Return the joined text untouched when styling is disabled, the text is
   empty, or no style is applied.
3. Re-open fix-up: when the text already contains escape codes (output of a
   nested render), every close code of a layer in the chain is replaced by that
   layer's open code, walking from the innermost layer to the root. Without it
   an inner close would leave the rest of the outer text unstyled.
4. Close all layers before each line break and re-open them after it.
5. Wrap the result in the chain's cumulative open/close codes.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from tintchain.core.levels import ColorLevel
from tintchain.styles import ESC, INTENSITY_CLOSE_CODES

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tintchain.core.node import StyleNode

_LINE_BREAK_RE: Final[re.Pattern[str]] = re.compile(r"\r?\n")


def reopen_embedded(text: str, chain: StyleNode) -> str:
    """Replace embedded close codes of ``chain``'s layers with re-open codes.

    Layers are processed innermost first; each replacement sees the output of
    the previous one. Layers with an empty close code are skipped.

    Bold and dim share a close code but can be active at the same time. For
    that code the close is kept in front of the re-open, so a dim segment
    nested in bold text ends dim instead of turning the rest bold *and* dim.

    Args:
        text (str): Text that may contain escape codes from nested renders.
        chain (StyleNode): Innermost node of the chain being rendered.

    Returns:
        str: The fixed-up text.
    """
    for node in chain.lineage():
        if not node.close:
            continue
        if node.close in INTENSITY_CLOSE_CODES:
            text = text.replace(node.close, node.close + node.open)
        else:
            text = text.replace(node.close, node.open)
    return text


def encase_line_breaks(text: str, close_all: str, open_all: str) -> str:
    r"""Close styling before every line break and re-open it after.

    A ``\r\n`` pair is kept together; ``close_all`` goes in front of the ``\r``.

    Args:
        text (str): Text containing one or more line breaks.
        close_all (str): Cumulative close codes of the chain.
        open_all (str): Cumulative open codes of the chain.

    Returns:
        str: The text with every line break wrapped.
    """
    return _LINE_BREAK_RE.sub(lambda m: close_all + m.group(0) + open_all, text)


def render(chain: StyleNode | None, level: ColorLevel | int, strings: Iterable[str]) -> str:
    """Render ``strings`` through ``chain`` at the given capability ``level``.

    Args:
        chain (StyleNode | None): Innermost node of the style chain, or ``None``
            when no style is applied.
        level (ColorLevel | int): Active color level; any value ``<= NONE``
            disables styling.
        strings (Iterable[str]): Text fragments, joined with single spaces.

    Returns:
        str: The styled text, or the plain joined text when styling does not apply.
    """
    text: str = " ".join(strings)
    if level <= ColorLevel.NONE or not text:
        return text
    if chain is None:
        return text

    if ESC in text:
        text = reopen_embedded(text, chain)

    if "\n" in text:
        text = encase_line_breaks(text, chain.close_all, chain.open_all)

    return chain.open_all + text + chain.close_all
