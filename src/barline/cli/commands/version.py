# topmark:header:start
#
#   project      : Barline
#   file         : version.py
#   file_relpath : src/barline/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Barline `version` command.

Prints the Barline version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from barline.cli.options import OutputFormat, output_format_option
from barline.constants import BARLINE_VERSION

if TYPE_CHECKING:
    from barline.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of Barline.",
)
@output_format_option
@click.pass_context
def version_command(ctx: click.Context, *, output_format: OutputFormat) -> None:
    """Print the installed version."""
    console: ClickConsole = ctx.obj["console"]
    if output_format == OutputFormat.JSON:
        console.print(json.dumps({"version": BARLINE_VERSION}))
    else:
        console.print(console.styled(BARLINE_VERSION, bold=True))
