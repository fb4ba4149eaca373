# topmark:header:start
#
#   project      : Barline
#   file         : errors.py
#   file_relpath : src/barline/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the Barline CLI.

Raise these from commands to exit with a standardized message and exit code.
"""

from __future__ import annotations

from typing import IO, Any

import click

from barline.cli.exit_codes import ExitCode


class BarlineCliError(click.ClickException):
    """Base class for all Barline CLI errors."""

    exit_code = ExitCode.FAILURE

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error through the project console when one is available."""
        ctx = click.get_current_context(silent=True)
        console = ctx.obj.get("console") if ctx is not None and isinstance(ctx.obj, dict) else None
        if console is None:
            super().show(file)
            return
        console.error(console.styled(self.format_message(), fg="bright_red"))


class BarlineUsageError(BarlineCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class BarlineConfigError(BarlineCliError):
    """Error for configuration blocks that cannot be decoded."""

    exit_code = ExitCode.CONFIG_ERROR
