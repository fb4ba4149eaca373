# topmark:header:start
#
#   project      : Barline
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running Barline through Click's test runner."""

from __future__ import annotations

import logging
from typing import IO, TYPE_CHECKING, Any, Sequence

import pytest
from click.testing import CliRunner, Result

from barline.cli.exit_codes import ExitCode
from barline.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def restore_root_logging() -> Iterator[None]:
    """Undo the logging setup performed by each CLI invocation.

    The CLI binds its log handler to the runner's temporary stderr, which is
    closed once the invocation returns.
    """
    root = logging.getLogger()
    saved_level: int = root.level
    saved_handlers: list[logging.Handler] = root.handlers[:]
    yield
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with colors disabled.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["version"]``.
            ``--no-color`` is prepended.
        input_text (str | bytes | IO[Any] | None): Optional standard input to pass
            to the command.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.

    Example:
        ```python
        result = run_cli(["markup", "<fc=red>x</fc>"])
        assert result.exit_code == ExitCode.SUCCESS
        ```
    """
    args: list[str] = [argv] if isinstance(argv, str) else list(argv or [])
    runner = CliRunner()
    return runner.invoke(cli, ["--no-color", *args], input=input_text)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_FAILURE(result: Result) -> None:
    """Assert that the command exited with FAILURE (code 1).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.FAILURE, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
