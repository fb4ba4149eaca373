# topmark:header:start
#
#   project      : Barline
#   file         : config.py
#   file_relpath : src/barline/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Barline `config` command.

Decodes a ``Config { ... }`` block read from a file or STDIN and prints the
effective configuration, with every attribute filled in. Attributes taken from
the defaults are reported on STDERR. A block that cannot be decoded exits with
`ExitCode.CONFIG_ERROR` unless ``--fallback`` is given.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from barline.cli.errors import BarlineConfigError
from barline.cli.options import OutputFormat, output_format_option
from barline.config.decoder import decode_config_or_default, parse_config, render_config
from barline.errors import ConfigParseError

if TYPE_CHECKING:
    from typing import TextIO

    from barline.cli.console import ClickConsole
    from barline.config.decoder import DecodedConfig


@click.command(
    name="config",
    help="Decode a 'Config { ... }' block (from SOURCE or STDIN) and print the result.",
)
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--fallback",
    is_flag=True,
    default=False,
    help="Use the default configuration when the block cannot be decoded.",
)
@output_format_option
@click.pass_context
def config_command(
    ctx: click.Context,
    *,
    source: TextIO,
    fallback: bool,
    output_format: OutputFormat,
) -> None:
    """Decode the configuration in ``source``."""
    console: ClickConsole = ctx.obj["console"]
    text: str = source.read()

    decoded: DecodedConfig
    if fallback:
        decoded = decode_config_or_default(text)
    else:
        try:
            decoded = parse_config(text)
        except ConfigParseError as exc:
            raise BarlineConfigError(str(exc)) from exc

    if output_format == OutputFormat.JSON:
        payload = {"config": decoded.config.to_dict(), "defaulted": list(decoded.defaulted)}
        console.print(json.dumps(payload, indent=2))
        return
    console.print(render_config(decoded.config), nl=False)
    if decoded.defaulted:
        console.warn(f"Fields missing from config defaulted: {', '.join(decoded.defaulted)}")
