# topmark:header:start
#
#   project      : Barline
#   file         : template.py
#   file_relpath : src/barline/cli/commands/template.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Barline `template` command.

Tokenizes an output template and shows which command each reference resolves
to. Commands default to those of the baseline configuration and can be given
in configuration syntax with ``--commands``.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from barline.cli.errors import BarlineUsageError
from barline.cli.options import OutputFormat, output_format_option
from barline.commands import Runnable, commands_from_value
from barline.config.model import DEFAULT_CONFIG
from barline.errors import LiteralError
from barline.parsing.literal import read_value_text
from barline.template import TemplateContext, parse_template, split_alignment

if TYPE_CHECKING:
    from barline.cli.console import ClickConsole
    from barline.template import ResolvedSegment

REGIONS: tuple[str, ...] = ("left", "center", "right")


def _load_commands(commands_text: str | None) -> tuple[Runnable, ...]:
    if commands_text is None:
        return DEFAULT_CONFIG.commands
    try:
        return commands_from_value(read_value_text(commands_text, source="--commands"))
    except (LiteralError, ValueError) as exc:
        raise BarlineUsageError(f"Invalid --commands: {exc}") from exc


def _segment_payload(context: TemplateContext, segment: ResolvedSegment) -> dict[str, Any]:
    alias: str = segment.command.alias
    return {
        "alias": alias,
        "resolved": context.aliases.get(alias) is segment.command,
        "rate": segment.command.rate,
        "prefix": segment.prefix,
        "suffix": segment.suffix,
    }


@click.command(
    name="template",
    help="Tokenize an output template and resolve its command references.",
)
@click.argument("text", required=False)
@click.option(
    "--sep",
    "separator",
    default=DEFAULT_CONFIG.sep_char,
    show_default=True,
    help="Character delimiting command references.",
)
@click.option(
    "--commands",
    "commands_text",
    default=None,
    help="Command list in configuration syntax, e.g. '[Run Cpu [] 10]'.",
)
@click.option(
    "--regions",
    is_flag=True,
    default=False,
    help="Split the template into left, center and right regions first.",
)
@click.option(
    "--align-sep",
    default=DEFAULT_CONFIG.align_sep,
    show_default=True,
    help="Alignment separator used with --regions.",
)
@output_format_option
@click.pass_context
def template_command(
    ctx: click.Context,
    *,
    text: str | None,
    separator: str,
    commands_text: str | None,
    regions: bool,
    align_sep: str,
    output_format: OutputFormat,
) -> None:
    """Print the resolved segments of ``text`` (default: the baseline template)."""
    console: ClickConsole = ctx.obj["console"]
    context: TemplateContext = TemplateContext.from_commands(_load_commands(commands_text))
    template: str = DEFAULT_CONFIG.template if text is None else text

    parts: dict[str, str] = (
        dict(zip(REGIONS, split_alignment(align_sep, template))) if regions else {"": template}
    )
    resolved: dict[str, list[dict[str, Any]]] = {
        region: [_segment_payload(context, seg) for seg in parse_template(separator, context, part)]
        for region, part in parts.items()
    }

    if output_format == OutputFormat.JSON:
        console.print(json.dumps(resolved if regions else resolved[""]))
        return
    for region, segments in resolved.items():
        if region:
            console.print(console.styled(f"[{region}]", bold=True))
        for seg in segments:
            marker: str = "" if seg["resolved"] else console.styled(" (placeholder)", fg="yellow")
            console.print(f"{seg['alias']}{marker}\t{seg['prefix']!r}\t{seg['suffix']!r}")
