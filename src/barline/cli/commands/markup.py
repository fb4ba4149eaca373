# topmark:header:start
#
#   project      : Barline
#   file         : markup.py
#   file_relpath : src/barline/cli/commands/markup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Barline `markup` command.

Parses a color markup string and prints its styled fragments, one per line as
``<color><TAB><text>``, or as a JSON array with ``--format json``.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from barline.cli.errors import BarlineCliError
from barline.cli.options import OutputFormat, output_format_option
from barline.config.model import DEFAULT_CONFIG
from barline.errors import MarkupError
from barline.markup import markup_parser, parse_markup

if TYPE_CHECKING:
    from barline.cli.console import ClickConsole
    from barline.markup import StyledFragment


@click.command(
    name="markup",
    help="Parse a color markup string into styled fragments.",
)
@click.argument("text")
@click.option(
    "--color",
    "ambient_color",
    default=DEFAULT_CONFIG.fg_color,
    show_default=True,
    help="Color of text outside any <fc=...> directive.",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Fail on malformed markup instead of printing the fallback fragment.",
)
@output_format_option
@click.pass_context
def markup_command(
    ctx: click.Context,
    *,
    text: str,
    ambient_color: str,
    strict: bool,
    output_format: OutputFormat,
) -> None:
    """Print the fragments of ``text``."""
    console: ClickConsole = ctx.obj["console"]

    fragments: list[StyledFragment]
    if strict:
        try:
            fragments = markup_parser(ambient_color, text)
        except MarkupError as exc:
            raise BarlineCliError(str(exc)) from exc
    else:
        fragments = parse_markup(ambient_color, text)

    if output_format == OutputFormat.JSON:
        console.print(json.dumps([fragment._asdict() for fragment in fragments]))
        return
    for fragment in fragments:
        console.print(f"{console.styled(fragment.color, fg='cyan')}\t{fragment.text}")
