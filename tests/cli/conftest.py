# topmark:header:start
#
#   project      : TintChain
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 TintChain Authors
#
# topmark:header:end

"""CLI test helpers for running TintChain through Click's test runner."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any, Sequence

import pytest
from click.testing import CliRunner, Result

from tintchain.cli.exit_codes import ExitCode
from tintchain.cli.main import cli
from tintchain.config.logging import TRACE_LEVEL, setup_logging

if TYPE_CHECKING:
    from collections.abc import Iterator


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the TintChain CLI and return Click's result.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. `["render", "-s", "red", "x"]`.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


def assert_SUCCESS(result: Result) -> None:  # noqa: N802
    """Assert that the command exited successfully without a Python exception."""
    assert result.exception is None, result.output
    assert result.exit_code == ExitCode.SUCCESS, result.output


@pytest.fixture(autouse=True)
def restore_test_logging() -> Iterator[None]:
    """Re-attach logging to the real stderr after each CLI run.

    The CLI reconfigures the root logger against the runner's temporary streams.
    """
    yield
    setup_logging(level=TRACE_LEVEL)
