# topmark:header:start
#
#   project      : Barline
#   file         : main.py
#   file_relpath : src/barline/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point of the Barline CLI.

Group-level options (verbosity, color) are resolved once and placed into
``ctx.obj`` together with the program-output console used by subcommands.
"""

from __future__ import annotations

import click

from barline.cli.commands.config import config_command
from barline.cli.commands.markup import markup_command
from barline.cli.commands.template import template_command
from barline.cli.commands.version import version_command
from barline.cli.console import ClickConsole
from barline.cli.options import common_verbose_options, resolve_verbosity
from barline.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, verbose: int, quiet: int, no_color: bool) -> None:
    """Initialize logging, verbosity and the console on the Click context.

    ``BARLINE_LOG_LEVEL`` takes precedence over ``-v``/``-q``.

    Args:
        ctx (click.Context): Current Click context; ``obj`` is populated.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed.
    """
    ctx.obj = ctx.obj or {}

    level_cli: int = resolve_verbosity(verbose, quiet)
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env if level_env is not None else level_cli
    ctx.obj["verbosity_level"] = verbose
    setup_logging(level=ctx.obj["log_level"])

    ctx.color = not no_color
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Barline: status bar markup, template and configuration parser.",
)
@common_verbose_options
@click.option("--no-color", is_flag=True, default=False, help="Disable colored output.")
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: int, no_color: bool) -> None:
    """Entry point for the Barline CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)
    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print(ctx.get_help())


cli.add_command(markup_command)
cli.add_command(template_command)
cli.add_command(config_command)
cli.add_command(version_command)

if __name__ == "__main__":
    cli()
