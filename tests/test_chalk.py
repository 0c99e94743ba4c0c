# topmark:header:start
#
#   project      : TintChain
#   file         : test_chalk.py
#   file_relpath : tests/test_chalk.py
#   license      : MIT
#   copyright    : (c) 2025 TintChain Authors
#
# topmark:header:end

"""Tests for the `Chalk` builder: chaining, rendering and shared level overrides."""

from __future__ import annotations

import io
import sys
from concurrent.futures import ThreadPoolExecutor

import pytest

from tintchain import Chalk, ColorLevel, InvalidColorLevelError, UnknownStyleError


def test_unstyled_instance_renders_plain_text(chalk: Chalk) -> None:
    """A root builder without styles returns the joined text."""
    assert chalk.chain is None
    assert chalk("a", "b") == "a b"


def test_attribute_chaining_applies_styles_outermost_first(chalk: Chalk) -> None:
    """`chalk.green.bold` opens green then bold and closes in reverse."""
    assert chalk.green.bold("hi") == "\x1b[32m\x1b[1mhi\x1b[22m\x1b[39m"


def test_with_style_matches_attribute_access(chalk: Chalk) -> None:
    """Named and attribute chaining produce identical chains."""
    assert chalk.with_style("bg_red").underline("x") == chalk.bg_red.underline("x")


def test_with_codes_accepts_raw_pairs(chalk: Chalk) -> None:
    """Caller-computed codes (e.g. 256-color) chain like named styles."""
    orange = chalk.with_codes("\x1b[38;5;208m", "\x1b[39m")
    assert orange.bold("x") == "\x1b[38;5;208m\x1b[1mx\x1b[22m\x1b[39m"


def test_values_are_converted_like_print(chalk: Chalk) -> None:
    """Non-string arguments are rendered with `str()`."""
    assert chalk.green(1, 2.5, None) == "\x1b[32m1 2.5 None\x1b[39m"


def test_nested_calls_keep_outer_style(chalk: Chalk) -> None:
    """The documented nesting example renders green/blue/green."""
    out = chalk.green("I am green " + chalk.blue.underline.bold("blue") + " green again")

    assert out == (
        "\x1b[32mI am green "
        "\x1b[34m\x1b[4m\x1b[1mblue\x1b[22m\x1b[24m\x1b[32m"
        " green again\x1b[39m"
    )


def test_fan_out_children_are_independent(chalk: Chalk) -> None:
    """Two styles built from one base share the base node but not each other."""
    base = chalk.bold
    blue = base.blue
    red = base.red

    assert blue.chain is not None and red.chain is not None
    assert blue.chain.parent is base.chain
    assert red.chain.parent is base.chain
    assert base("x") == "\x1b[1mx\x1b[22m"
    assert blue("x") == "\x1b[1m\x1b[34mx\x1b[39m\x1b[22m"
    assert red("x") == "\x1b[1m\x1b[31mx\x1b[39m\x1b[22m"


def test_unknown_style_raises_attribute_error(chalk: Chalk) -> None:
    """Unknown names raise `UnknownStyleError`, which is an `AttributeError`."""
    with pytest.raises(UnknownStyleError) as excinfo:
        chalk.with_style("sparkly")
    assert excinfo.value.style_name == "sparkly"
    assert not hasattr(chalk, "sparkly")
    with pytest.raises(AttributeError):
        chalk._private  # noqa: B018


def test_set_level_is_shared_and_not_retroactive(chalk: Chalk) -> None:
    """A level change through any family member affects all, but not earlier output."""
    green = chalk.green
    before = green("x")

    green.bold.set_level(ColorLevel.NONE)

    assert chalk.get_level() is ColorLevel.NONE
    assert green("x") == "x"
    assert before == "\x1b[32mx\x1b[39m"

    chalk.level = "truecolor"
    assert green.level is ColorLevel.TRUECOLOR
    assert green("x") == before


def test_set_level_rejects_invalid_values(chalk: Chalk) -> None:
    """Invalid levels raise and leave the config untouched."""
    with pytest.raises(InvalidColorLevelError):
        chalk.set_level("rainbow")
    assert chalk.level is ColorLevel.BASIC


def test_separate_roots_do_not_share_config() -> None:
    """Each root instance owns its own config."""
    first = Chalk(ColorLevel.BASIC)
    second = Chalk(ColorLevel.BASIC)

    first.set_level(ColorLevel.NONE)

    assert second.red("x") == "\x1b[31mx\x1b[39m"
    assert first.red.config is first.config
    assert first.config is not second.config


def test_detected_level_when_not_forced(monkeypatch: pytest.MonkeyPatch) -> None:
    """Without a forced level the detector is consulted once, per stream."""
    assert Chalk(stream=io.StringIO()).level is ColorLevel.NONE

    monkeypatch.setenv("FORCE_COLOR", "3")
    assert Chalk().level is ColorLevel.TRUECOLOR
    assert Chalk.for_stderr().level is ColorLevel.TRUECOLOR
    assert Chalk(stream=sys.stderr, level="ansi256").level is ColorLevel.ANSI256


def test_concurrent_renders_see_whole_levels(chalk: Chalk) -> None:
    """Renders racing with level changes are either fully styled or plain."""
    red = chalk.red

    def work(i: int) -> str:
        if i % 10 == 0:
            chalk.set_level(ColorLevel.NONE if i % 20 == 0 else ColorLevel.BASIC)
        return red("x")

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = set(pool.map(work, range(500)))

    assert results <= {"x", "\x1b[31mx\x1b[39m"}


def test_repr_reports_level_and_depth(chalk: Chalk) -> None:
    """The repr is compact and informative."""
    assert repr(chalk.red.bold) == "Chalk(level=BASIC, depth=2)"


def test_with_codes_empty_close_keeps_embedded_escapes() -> None:
    """A raw open-only layer wraps the text once and leaves nested codes intact."""
    marker = Chalk(ColorLevel.BASIC).with_codes("<o>", "")

    assert marker("a\x1b[1mb") == "<o>a\x1b[1mb"
