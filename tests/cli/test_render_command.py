# topmark:header:start
#
#   project      : TintChain
#   file         : test_render_command.py
#   file_relpath : tests/cli/test_render_command.py
#   license      : MIT
#   copyright    : (c) 2025 TintChain Authors
#
# topmark:header:end

"""CLI tests: `render` command styling, level overrides and error handling."""

from __future__ import annotations

import io

import pytest

from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli
from tintchain.cli.commands.render import read_stdin_text
from tintchain.cli.exit_codes import ExitCode


@mark_cli
def test_render_always_emits_basic_codes() -> None:
    """`--color always` on a non-TTY raises the level to BASIC."""
    result = run_cli(["--color", "always", "render", "-s", "green", "hello", "world"])

    assert_SUCCESS(result)
    assert result.output == "\x1b[32mhello world\x1b[39m\n"


@mark_cli
def test_render_styles_are_outermost_first() -> None:
    """The first --style opens first and closes last."""
    result = run_cli(["--color", "always", "render", "-s", "red", "-s", "underline", "x"])

    assert_SUCCESS(result)
    assert result.output == "\x1b[31m\x1b[4mx\x1b[24m\x1b[39m\n"


@mark_cli
@pytest.mark.parametrize("flags", [["--no-color"], ["--color", "never"], []])
def test_render_without_color_prints_plain_text(flags: list[str]) -> None:
    """Disabled or undetected color leaves the text untouched."""
    result = run_cli([*flags, "render", "-s", "green", "-s", "bold", "plain"])

    assert_SUCCESS(result)
    assert result.output == "plain\n"


@mark_cli
def test_render_level_override_applies_to_shared_palette() -> None:
    """`--level` overrides the group's color choice for this command."""
    result = run_cli(["--color", "always", "render", "--level", "none", "-s", "bold", "hi"])

    assert_SUCCESS(result)
    assert result.output == "hi\n"


@mark_cli
def test_render_force_color_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """FORCE_COLOR is honored by auto detection."""
    monkeypatch.setenv("FORCE_COLOR", "1")
    result = run_cli(["render", "-s", "cyan", "x"])

    assert_SUCCESS(result)
    assert result.output == "\x1b[36mx\x1b[39m\n"


@mark_cli
def test_render_stdin_wraps_each_line() -> None:
    """Text read from STDIN is styled line by line."""
    result = run_cli(["--color", "always", "render", "-s", "red", "-"], input_text="a\nb\n")

    assert_SUCCESS(result)
    assert result.output == "\x1b[31ma\x1b[39m\n\x1b[31mb\x1b[39m\n"


@mark_cli
def test_render_unknown_style_is_a_usage_error() -> None:
    """Unknown style names exit with USAGE_ERROR and a hint."""
    result = run_cli(["render", "-s", "sparkly", "x"])

    assert result.exit_code == ExitCode.USAGE_ERROR
    assert "Unknown style: 'sparkly'" in result.output
    assert "tintchain styles" in result.output


@mark_cli
def test_render_invalid_level_is_rejected_by_click() -> None:
    """Bad --level values fail parameter validation."""
    result = run_cli(["render", "--level", "ultra", "x"])

    assert result.exit_code == 2
    assert "Invalid color level" in result.output


@mark_cli
def test_verbose_and_quiet_are_mutually_exclusive() -> None:
    """-v and -q together exit with USAGE_ERROR."""
    result = run_cli(["-v", "-q", "render", "x"])

    assert result.exit_code == ExitCode.USAGE_ERROR
    assert "mutually exclusive" in result.output


@mark_cli
def test_verbose_logging_does_not_break_rendering() -> None:
    """TRACE logging goes to stderr; the rendered text is still printed."""
    result = run_cli(["-vvv", "--no-color", "render", "-s", "red", "still", "here"])

    assert_SUCCESS(result)
    assert "still here" in result.output


@mark_cli
@pytest.mark.parametrize("flags", [["--no-color"], ["--color", "never"]])
def test_render_level_override_warns_when_color_disabled(flags: list[str]) -> None:
    """Enabling color with --level after disabling it at group level emits a warning."""
    result = run_cli([*flags, "render", "--level", "basic", "-s", "bold", "hi"])

    assert_SUCCESS(result)
    assert "Warning: --level basic overrides the disabled color mode." in result.output
    assert "\x1b[1mhi\x1b[22m\n" in result.output


@mark_cli
def test_render_level_none_with_no_color_does_not_warn() -> None:
    """Keeping color off with --level none agrees with --no-color."""
    result = run_cli(["--no-color", "render", "--level", "none", "-s", "bold", "hi"])

    assert_SUCCESS(result)
    assert result.output == "hi\n"


def test_read_stdin_text_strips_trailing_crlf() -> None:
    """A trailing CRLF is dropped whole; inner CRLF pairs are kept."""
    stream = io.StringIO("a\r\nb\r\n", newline="")

    assert read_stdin_text(stream) == "a\r\nb"


@mark_cli
def test_exit_codes_cover_success_failure_and_usage() -> None:
    """The CLI exposes exactly the exit codes it can return."""
    assert {code.value for code in ExitCode} == {0, 1, 64}
